from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from models.company_group import CompanyGroup
from models.contact_record import RawContact
from pipelines.runner import RunContext
from utils.logging_setup import step_extra
from services.domain_utils import collation_key, extract_domain, normalize


UNKNOWN_COMPANY = "Unknown Company"


def company_key(contact: RawContact) -> str:
    """Grouping key: domain when company_id looks like one, else the normalized name.

    An empty result means the contact cannot be grouped.
    """
    raw_id = contact.company_id_raw
    if raw_id and "." in raw_id:
        return extract_domain(raw_id)
    return normalize(contact.company_name)


def aggregate_companies(contacts: Iterable[RawContact]) -> List[CompanyGroup]:
    """Group contacts by company key, sorted by display name.

    The first contact seen for a key fixes the group's display name and domain input.
    """
    groups: Dict[str, CompanyGroup] = {}
    for contact in contacts:
        key = company_key(contact)
        if not key:
            continue
        group = groups.get(key)
        if group is None:
            group = CompanyGroup(
                group_key=key,
                display_name=contact.company_name or UNKNOWN_COMPANY,
                domain_input=contact.company_id_raw or "",
            )
            groups[key] = group
        group.contacts.append(contact)
    return sorted(groups.values(), key=lambda g: collation_key(g.display_name))


class AggregateCompanies:
    def run(self, ctx: RunContext) -> RunContext:
        contacts = ctx.contacts or []
        ctx.groups = aggregate_companies(contacts)
        grouped = sum(len(g.contacts) for g in ctx.groups)
        ctx.meta["companies_total"] = len(ctx.groups)
        ctx.meta["contacts_dropped"] = len(contacts) - grouped
        logging.info(
            f"Aggregated {grouped} contacts into {len(ctx.groups)} companies",
            extra=step_extra("aggregate_companies", run_id=ctx.run_id),
        )
        return ctx
