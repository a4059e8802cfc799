from __future__ import annotations

from services.mapping import map_to_contact, map_to_enrichment_record


def test_map_to_contact_accepts_export_columns():
    c = map_to_contact({"contact_id": 42, "company_id": " acme.com ", "company_name": "Acme", "lead_name": "", "phone": "+55 11"})
    assert c.contact_id == "42"
    assert c.company_id_raw == "acme.com"
    assert c.lead_name is None


def test_map_to_contact_requires_id():
    assert map_to_contact({"company_name": "Acme"}) is None


def test_map_to_enrichment_derives_primary_domain():
    r = map_to_enrichment_record({"company_name": "Beta", "website": "https://www.beta.io/contact"})
    assert r.primary_domain == "beta.io"
    assert r.website == "https://www.beta.io/contact"


def test_map_to_enrichment_skips_unidentifiable_rows():
    assert map_to_enrichment_record({"description": "orphan"}) is None
