from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from models.company_group import CompanyGroup
from models.enrichment_record import EnrichmentRecord
from models.status_record import StatusRecord
from services.domain_utils import extract_domain, normalize


MatchPredicate = Callable[[EnrichmentRecord, CompanyGroup], bool]


def _same_domain(record: EnrichmentRecord, group: CompanyGroup) -> bool:
    record_domain = extract_domain(record.primary_domain)
    return bool(record_domain) and record_domain == extract_domain(group.domain_input)


def _same_name(record: EnrichmentRecord, group: CompanyGroup) -> bool:
    record_name = normalize(record.company_name)
    return bool(record_name) and record_name == normalize(group.display_name)


# Checked in order against each candidate
MATCH_PREDICATES: Tuple[Tuple[str, MatchPredicate], ...] = (
    ("domain", _same_domain),
    ("name", _same_name),
)


def match_enrichment(
    group: CompanyGroup,
    candidates: Sequence[EnrichmentRecord],
    predicates: Sequence[Tuple[str, MatchPredicate]] = MATCH_PREDICATES,
) -> Optional[EnrichmentRecord]:
    """Return the enrichment record for a group, or None.

    The first candidate in iteration order that satisfies any predicate wins;
    candidates are not scored against each other.
    """
    for record in candidates:
        for _label, predicate in predicates:
            if predicate(record, group):
                return record
    return None


def match_all(groups: Iterable[CompanyGroup], candidates: Sequence[EnrichmentRecord]) -> Dict[str, Optional[EnrichmentRecord]]:
    return {g.group_key: match_enrichment(g, candidates) for g in groups}


def join_status(groups: Iterable[CompanyGroup], statuses: Iterable[StatusRecord]) -> Dict[str, Optional[StatusRecord]]:
    """Map each group key to its status record (None if never marked)."""
    by_key: Dict[str, StatusRecord] = {}
    for s in statuses:
        by_key.setdefault(s.company_key, s)
    return {g.group_key: by_key.get(g.group_key) for g in groups}


def lookup_keys(groups: Iterable[CompanyGroup]) -> Tuple[List[str], List[str], List[str]]:
    """Collect (group keys, candidate domains, candidate names) for store prefilters."""
    keys: List[str] = []
    domains: List[str] = []
    names: List[str] = []
    for g in groups:
        keys.append(g.group_key)
        domain = extract_domain(g.domain_input)
        if domain:
            domains.append(domain)
        name = normalize(g.display_name)
        if name:
            names.append(name)
    return keys, domains, names
