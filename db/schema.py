from __future__ import annotations

import sqlite3


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create contacts, enrichment and outreach status tables (idempotent)."""
    cur = conn.cursor()

    # Scraped contacts; `notes` carries the scraping source tag
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS contacts (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  contact_id TEXT NOT NULL UNIQUE,\n"
            "  company_id TEXT,\n"
            "  company_name TEXT,\n"
            "  lead_name TEXT,\n"
            "  job_title TEXT,\n"
            "  seniority_level TEXT,\n"
            "  email TEXT,\n"
            "  phone TEXT,\n"
            "  linkedin_url TEXT,\n"
            "  notes TEXT,\n"
            "  created_at TEXT NOT NULL DEFAULT (datetime('now'))\n"
            ")"
        )
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_contacts_notes_phone ON contacts(notes, phone);")

    # Enrichment records (read-only for the overview)
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS enriched_companies (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  primary_domain TEXT,\n"
            "  company_name TEXT,\n"
            "  description TEXT,\n"
            "  website TEXT,\n"
            "  city TEXT,\n"
            "  state TEXT,\n"
            "  country TEXT\n"
            ")"
        )
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_enriched_companies_domain ON enriched_companies(primary_domain);")
    cur.execute("CREATE INDEX IF NOT EXISTS idx_enriched_companies_name ON enriched_companies(company_name);")

    # Per-company outreach status keyed by the aggregation group key
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS company_outreach_status (\n"
            "  company_key TEXT PRIMARY KEY,\n"
            "  contacted INTEGER NOT NULL DEFAULT 0,\n"
            "  contacted_by TEXT,\n"
            "  contacted_at TEXT,\n"
            "  updated_at TEXT NOT NULL DEFAULT (datetime('now'))\n"
            ")"
        )
    )

    conn.commit()
