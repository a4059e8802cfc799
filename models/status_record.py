from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class StatusRecord(BaseModel):
    company_key: str
    contacted: bool = False
    contacted_by: str | None = None
    contacted_at: datetime | None = None

    model_config = ConfigDict(extra="ignore")
