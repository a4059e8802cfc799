from __future__ import annotations

import sqlite3
from typing import Iterable, List, Optional

from models.status_record import StatusRecord


def _row_to_status(row: tuple) -> StatusRecord:
    return StatusRecord(
        company_key=row[0],
        contacted=bool(row[1]),
        contacted_by=row[2],
        contacted_at=row[3],
    )


class StatusRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def find_by_keys(self, keys: Iterable[str]) -> List[StatusRecord]:
        key_list = list(dict.fromkeys(k for k in keys if k))
        if not key_list:
            return []
        sql = (
            "SELECT company_key, contacted, contacted_by, contacted_at "
            f"FROM company_outreach_status WHERE company_key IN ({', '.join('?' for _ in key_list)});"
        )
        cur = self.conn.cursor()
        cur.execute(sql, tuple(key_list))
        return [_row_to_status(r) for r in cur.fetchall()]

    def set_status(self, company_key: str, contacted: bool, contacted_by: Optional[str] = None) -> StatusRecord:
        """Upsert the contacted flag for a company key.

        Marking sets contacted_by and stamps contacted_at; unmarking clears both.
        """
        sql = (
            "INSERT INTO company_outreach_status (company_key, contacted, contacted_by, contacted_at) "
            "VALUES (?, ?, ?, CASE WHEN ? THEN strftime('%Y-%m-%dT%H:%M:%SZ', 'now') ELSE NULL END) "
            "ON CONFLICT(company_key) DO UPDATE SET "
            " contacted = excluded.contacted, "
            " contacted_by = excluded.contacted_by, "
            " contacted_at = excluded.contacted_at, "
            " updated_at = datetime('now') "
            "RETURNING company_key, contacted, contacted_by, contacted_at;"
        )
        flag = 1 if contacted else 0
        cur = self.conn.cursor()
        cur.execute(sql, (company_key, flag, contacted_by if contacted else None, flag))
        row = cur.fetchone()
        self.conn.commit()
        return _row_to_status(row)
