from __future__ import annotations

from typing import Optional

from models.company_group import CompanyGroup
from models.company_view import CompanyView, ContactView
from models.contact_record import RawContact
from models.enrichment_record import EnrichmentRecord
from models.status_record import StatusRecord


NO_DESCRIPTION = "No description available."
NO_NAME = "no name"
NO_TITLE = "no title"
NO_EMAIL = "N/A"


def to_contact_view(contact: RawContact) -> ContactView:
    return ContactView(
        id=contact.contact_id,
        name=contact.lead_name or NO_NAME,
        title=contact.job_title or NO_TITLE,
        seniority=contact.seniority_level,
        email=contact.email or NO_EMAIL,
        phone=contact.phone,
        linkedin=contact.linkedin_url,
    )


def _location(enrichment: Optional[EnrichmentRecord]) -> Optional[str]:
    if enrichment is None:
        return None
    parts = [p for p in (enrichment.city, enrichment.state, enrichment.country) if p]
    return ", ".join(parts) or None


def assemble_company_view(
    group: CompanyGroup,
    enrichment: Optional[EnrichmentRecord],
    status: Optional[StatusRecord],
    owner: str,
) -> CompanyView:
    """Merge one group with its enrichment and status, applying field fallbacks."""
    e = enrichment
    return CompanyView(
        key=group.group_key,
        owner=owner,
        name=(e.company_name if e else None) or group.display_name,
        description=(e.description if e else None) or NO_DESCRIPTION,
        website=(e.website if e else None) or (e.primary_domain if e else None) or group.domain_input or None,
        location=_location(e),
        contacted=bool(status.contacted) if status else False,
        contacted_by=(status.contacted_by or None) if status else None,
        contacted_at=status.contacted_at if status else None,
        contacts=[to_contact_view(c) for c in group.contacts],
    )
