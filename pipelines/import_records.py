from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, Iterable, Optional

from db.repos.contacts_repo import ContactsRepo
from db.repos.enrichment_repo import EnrichmentRepo
from services.mapping import map_to_contact, map_to_enrichment_record


def import_contacts(conn: sqlite3.Connection, rows: Iterable[Dict[str, Any]], default_source_tag: Optional[str] = None) -> int:
    """Load scraped contact rows; rows without a contact id are skipped."""
    repo = ContactsRepo(conn)
    processed = 0
    for row in rows:
        contact = map_to_contact(row)
        if contact is None:
            continue
        source_tag = row.get("notes") or row.get("source_tag") or default_source_tag
        repo.insert_contact(contact, source_tag)
        processed += 1
    logging.info(f"Imported {processed} contacts", extra={"step": "import_contacts", "status": "ok"})
    return processed


def import_enrichment(conn: sqlite3.Connection, rows: Iterable[Dict[str, Any]]) -> int:
    repo = EnrichmentRepo(conn)
    processed = 0
    for row in rows:
        record = map_to_enrichment_record(row)
        if record is None:
            continue
        repo.insert_record(record)
        processed += 1
    logging.info(f"Imported {processed} enrichment records", extra={"step": "import_enrichment", "status": "ok"})
    return processed
