from __future__ import annotations

import sqlite3
from typing import Any, Iterable, List

from models.enrichment_record import EnrichmentRecord
from services.domain_utils import extract_domain, normalize


_COLUMNS = "primary_domain, company_name, description, website, city, state, country"


def _distinct(values: Iterable[str]) -> List[str]:
    seen: List[str] = []
    for v in values:
        if v and v not in seen:
            seen.append(v)
    return seen


class EnrichmentRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        # SQL-side copies of the key functions used by services.matching
        conn.create_function("key_normalize", 1, normalize, deterministic=True)
        conn.create_function("key_domain", 1, extract_domain, deterministic=True)

    def find_candidates(self, domains: Iterable[str], names: Iterable[str]) -> List[EnrichmentRecord]:
        """Enrichment rows whose domain or name is in the given sets (compared on normalized keys).

        The result is a superset of the real matches, in insertion order; exact
        matching happens in services.matching.
        """
        domain_list = _distinct(extract_domain(d) for d in domains if d)
        name_list = _distinct(normalize(n) for n in names if n)
        clauses = []
        params: List[Any] = []
        if domain_list:
            clauses.append(f"key_domain(primary_domain) IN ({', '.join('?' for _ in domain_list)})")
            params.extend(domain_list)
        if name_list:
            clauses.append(f"key_normalize(company_name) IN ({', '.join('?' for _ in name_list)})")
            params.extend(name_list)
        if not clauses:
            return []
        sql = f"SELECT {_COLUMNS} FROM enriched_companies WHERE {' OR '.join(clauses)} ORDER BY id;"
        cur = self.conn.cursor()
        cur.execute(sql, tuple(params))
        keys = ["primary_domain", "company_name", "description", "website", "city", "state", "country"]
        return [EnrichmentRecord(**dict(zip(keys, row))) for row in cur.fetchall()]

    def insert_record(self, record: EnrichmentRecord) -> int:
        cur = self.conn.cursor()
        cur.execute(
            f"INSERT INTO enriched_companies ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
            (record.primary_domain, record.company_name, record.description, record.website,
             record.city, record.state, record.country),
        )
        self.conn.commit()
        return int(cur.lastrowid)
