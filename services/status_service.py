from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from db.repos.status_repo import StatusRepo
from models.status_record import StatusRecord
from services.errors import StatusUpdateError


def set_company_status(
    conn: sqlite3.Connection,
    company_key: str,
    contacted: bool,
    contacted_by: Optional[str] = None,
) -> StatusRecord:
    """Mark or unmark a company (by group key) as contacted."""
    key = (company_key or "").strip()
    if not key:
        raise ValueError("Missing company_key")
    try:
        record = StatusRepo(conn).set_status(key, contacted, contacted_by)
    except sqlite3.Error as e:
        logging.error(f"Status update failed for {key}: {e}", extra={"step": "set_status", "status": "error", "error": type(e).__name__})
        raise StatusUpdateError(f"Failed to update status for {key}") from e
    logging.info(
        f"Company {key} contacted={record.contacted} by={record.contacted_by}",
        extra={"step": "set_status", "status": "ok"},
    )
    return record
