from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from models.contact_record import RawContact


@dataclass
class CompanyGroup:
    """Contacts sharing one derived company key (in-memory only)."""

    group_key: str
    display_name: str
    domain_input: str = ""
    contacts: List[RawContact] = field(default_factory=list)
