from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

from models.contact_record import RawContact
from models.enrichment_record import EnrichmentRecord
from models.status_record import StatusRecord


class ContactsRepoPort(Protocol):
    def fetch_filtered(self, source_tag: str, phone_prefix: str) -> List[RawContact]:
        ...


class EnrichmentRepoPort(Protocol):
    def find_candidates(self, domains: Iterable[str], names: Iterable[str]) -> List[EnrichmentRecord]:
        ...


class StatusRepoPort(Protocol):
    def find_by_keys(self, keys: Iterable[str]) -> List[StatusRecord]:
        ...

    def set_status(self, company_key: str, contacted: bool, contacted_by: Optional[str] = None) -> StatusRecord:
        ...
