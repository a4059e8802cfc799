from __future__ import annotations

import sqlite3
from typing import List, Optional

from models.contact_record import RawContact


_COLUMNS = (
    "contact_id, company_id, company_name, lead_name, job_title, "
    "seniority_level, email, phone, linkedin_url"
)


def _row_to_contact(row: tuple) -> RawContact:
    return RawContact(
        contact_id=row[0],
        company_id_raw=row[1],
        company_name=row[2],
        lead_name=row[3],
        job_title=row[4],
        seniority_level=row[5],
        email=row[6],
        phone=row[7],
        linkedin_url=row[8],
    )


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ContactsRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def fetch_filtered(self, source_tag: str, phone_prefix: str) -> List[RawContact]:
        """Contacts scraped by `source_tag` whose phone starts with `phone_prefix`."""
        sql = (
            f"SELECT {_COLUMNS} FROM contacts "
            "WHERE notes = ? AND phone LIKE ? ESCAPE '\\';"
        )
        cur = self.conn.cursor()
        cur.execute(sql, (source_tag, f"{_escape_like(phone_prefix)}%"))
        return [_row_to_contact(r) for r in cur.fetchall()]

    def get_contact(self, contact_id: str) -> Optional[RawContact]:
        cur = self.conn.cursor()
        cur.execute(f"SELECT {_COLUMNS} FROM contacts WHERE contact_id = ?", (contact_id,))
        row = cur.fetchone()
        return _row_to_contact(row) if row else None

    def insert_contact(self, contact: RawContact, source_tag: Optional[str]) -> int:
        """Insert or refresh a scraped contact by contact_id; returns row id."""
        sql = (
            "INSERT INTO contacts (contact_id, company_id, company_name, lead_name, job_title, seniority_level, email, phone, linkedin_url, notes) "
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?) "
            "ON CONFLICT(contact_id) DO UPDATE SET "
            " company_id = COALESCE(excluded.company_id, contacts.company_id), "
            " company_name = COALESCE(excluded.company_name, contacts.company_name), "
            " lead_name = COALESCE(excluded.lead_name, contacts.lead_name), "
            " job_title = COALESCE(excluded.job_title, contacts.job_title), "
            " seniority_level = COALESCE(excluded.seniority_level, contacts.seniority_level), "
            " email = COALESCE(excluded.email, contacts.email), "
            " phone = COALESCE(excluded.phone, contacts.phone), "
            " linkedin_url = COALESCE(excluded.linkedin_url, contacts.linkedin_url), "
            " notes = COALESCE(excluded.notes, contacts.notes) "
            "RETURNING id;"
        )
        cur = self.conn.cursor()
        cur.execute(sql, (
            contact.contact_id, contact.company_id_raw, contact.company_name, contact.lead_name,
            contact.job_title, contact.seniority_level, contact.email, contact.phone,
            contact.linkedin_url, source_tag,
        ))
        row = cur.fetchone()
        self.conn.commit()
        return int(row[0])
