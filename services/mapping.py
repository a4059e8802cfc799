from __future__ import annotations

from typing import Any, Dict, Optional

from models.contact_record import RawContact
from models.enrichment_record import EnrichmentRecord
from services.domain_utils import extract_apex_domain


def _text(value: Any) -> Optional[str]:
    """Stringify scalar input, mapping blank values to None."""
    if value is None:
        return None
    s = str(value).strip()
    return s or None


def map_to_contact(row: Dict[str, Any]) -> Optional[RawContact]:
    """Map a scraped contact row (export or DB column names) to RawContact."""
    contact_id = _text(row.get('contact_id') or row.get('id'))
    if not contact_id:
        return None
    return RawContact(
        contact_id=contact_id,
        company_id_raw=_text(row.get('company_id') or row.get('company_domain')),
        company_name=_text(row.get('company_name') or row.get('company')),
        lead_name=_text(row.get('lead_name') or row.get('name')),
        job_title=_text(row.get('job_title') or row.get('title')),
        seniority_level=_text(row.get('seniority_level') or row.get('seniority')),
        email=_text(row.get('email')),
        phone=_text(row.get('phone')),
        linkedin_url=_text(row.get('linkedin_url') or row.get('linkedin')),
    )


def map_to_enrichment_record(row: Dict[str, Any]) -> Optional[EnrichmentRecord]:
    """Map an enrichment export row; the primary domain is derived from the website when absent."""
    website = _text(row.get('website'))
    primary_domain = _text(row.get('primary_domain') or row.get('domain'))
    if not primary_domain and website:
        primary_domain = extract_apex_domain(website)
    company_name = _text(row.get('company_name') or row.get('name'))
    if not (primary_domain or company_name):
        return None
    return EnrichmentRecord(
        primary_domain=primary_domain,
        company_name=company_name,
        description=_text(row.get('description')),
        website=website,
        city=_text(row.get('city')),
        state=_text(row.get('state')),
        country=_text(row.get('country')),
    )
