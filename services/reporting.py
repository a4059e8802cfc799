from __future__ import annotations

from typing import Dict, List, Optional

from models.company_view import CompanyView


def summarize(companies: List[CompanyView], meta: Optional[Dict] = None) -> Dict[str, int]:
    meta = meta or {}
    return {
        "contacts_loaded": int(meta.get("contacts_total", 0)),
        "contacts_dropped": int(meta.get("contacts_dropped", 0)),
        "companies": len(companies),
        "companies_enriched": int(meta.get("companies_enriched", 0)),
        "companies_contacted": sum(1 for c in companies if c.contacted),
        "contacts_listed": sum(len(c.contacts) for c in companies),
    }


def print_summary(companies: List[CompanyView], meta: Optional[Dict] = None) -> None:
    """Print summary of an overview run."""
    stats = summarize(companies, meta)

    print("\n" + "="*60)
    print("OUTREACH DASHBOARD - SUMMARY")
    print("="*60)
    print(f"Contacts Loaded: {stats['contacts_loaded']}")
    print(f"Contacts Without Company: {stats['contacts_dropped']}")
    print(f"Companies: {stats['companies']}")
    print(f"  Enriched: {stats['companies_enriched']}")
    print(f"  Contacted: {stats['companies_contacted']}")
    print(f"  Pending: {stats['companies'] - stats['companies_contacted']}")
    print(f"Contacts Listed: {stats['contacts_listed']}")
    print("="*60)
