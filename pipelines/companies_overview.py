from __future__ import annotations

import logging
import os
import sqlite3
import uuid as _uuid
from typing import List, Optional

from config.settings import Settings, get_settings
from db.repos.contacts_repo import ContactsRepo
from db.repos.enrichment_repo import EnrichmentRepo
from db.repos.status_repo import StatusRepo
from models.company_view import CompanyView
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import (
    AggregateCompanies,
    AssembleCompanyViews,
    FetchCompanyStatus,
    FetchContacts,
    FetchEnrichmentCandidates,
    JoinCompanyStatus,
    MatchEnrichment,
)
from services.errors import AggregationError
from utils.logging_setup import step_extra


def build_pipeline(conn: sqlite3.Connection, settings: Settings) -> Pipeline:
    return Pipeline([
        FetchContacts(ContactsRepo(conn), settings.lead_source_tag, settings.phone_prefix),
        AggregateCompanies(),
        FetchEnrichmentCandidates(EnrichmentRepo(conn)),
        MatchEnrichment(),
        FetchCompanyStatus(StatusRepo(conn)),
        JoinCompanyStatus(),
        AssembleCompanyViews(owner=settings.default_owner),
    ])


def run_overview(conn: sqlite3.Connection, settings: Optional[Settings] = None) -> RunContext:
    """Run the overview pipeline and return the full context (views plus counters)."""
    settings = settings or get_settings()
    ctx = RunContext(run_id=os.getenv("RUN_ID") or _uuid.uuid4().hex)
    try:
        return build_pipeline(conn, settings).run(ctx)
    except Exception as e:
        logging.exception(
            "Error fetching companies",
            extra=step_extra("company_overview", "error", run_id=ctx.run_id, error=type(e).__name__),
        )
        raise AggregationError("Failed to fetch companies") from e


def build_company_overview(conn: sqlite3.Connection, settings: Optional[Settings] = None) -> List[CompanyView]:
    """Grouped, enriched and status-joined companies, ordered by name."""
    return list(run_overview(conn, settings).companies)
