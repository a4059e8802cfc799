from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


@dataclass(frozen=True)
class Settings:
    # Core/runtime
    db_path: str
    run_env: str
    log_level: str

    # Contact filter applied when reading scraped leads
    lead_source_tag: str
    phone_prefix: str

    # Company view
    default_owner: str

    # CRM webhook
    crm_webhook_url: str | None
    crm_source_tag: str
    http_timeout_seconds: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        db_path=os.getenv("DB_PATH", "outreach.db"),
        run_env=os.getenv("RUN_ENV", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        lead_source_tag=os.getenv("LEAD_SOURCE_TAG", "linkedin_scrapping"),
        phone_prefix=os.getenv("PHONE_PREFIX", "+55"),
        default_owner=os.getenv("DEFAULT_OWNER", "unassigned"),
        crm_webhook_url=os.getenv("CRM_WEBHOOK_URL") or None,
        crm_source_tag=os.getenv("CRM_SOURCE_TAG", "CHINA-RPA"),
        http_timeout_seconds=int(os.getenv("HTTP_TIMEOUT_SECONDS", "20")),
    )
