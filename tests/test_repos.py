from __future__ import annotations

from db.repos.contacts_repo import ContactsRepo
from db.repos.enrichment_repo import EnrichmentRepo
from db.repos.status_repo import StatusRepo
from models.contact_record import RawContact
from models.enrichment_record import EnrichmentRecord


def test_fetch_filtered_applies_source_and_phone_prefix(conn):
    repo = ContactsRepo(conn)
    repo.insert_contact(RawContact(contact_id="1", company_name="Acme", phone="+5511999990000"), "linkedin_scrapping")
    repo.insert_contact(RawContact(contact_id="2", company_name="Acme", phone="+1415555000"), "linkedin_scrapping")
    repo.insert_contact(RawContact(contact_id="3", company_name="Acme", phone="+5521988880000"), "apollo_export")
    repo.insert_contact(RawContact(contact_id="4", company_name="Acme", phone=None), "linkedin_scrapping")
    got = repo.fetch_filtered("linkedin_scrapping", "+55")
    assert [c.contact_id for c in got] == ["1"]


def test_insert_contact_is_idempotent_by_contact_id(conn):
    repo = ContactsRepo(conn)
    a = repo.insert_contact(RawContact(contact_id="1", company_name="Acme", phone="+55"), "linkedin_scrapping")
    b = repo.insert_contact(RawContact(contact_id="1", lead_name="Ana", phone="+55"), None)
    assert a == b
    c = repo.get_contact("1")
    assert c.company_name == "Acme" and c.lead_name == "Ana"
    assert repo.get_contact("missing") is None


def test_find_candidates_is_case_insensitive_superset(conn):
    repo = EnrichmentRepo(conn)
    repo.insert_record(EnrichmentRecord(primary_domain="ACME.com", company_name="Acme"))
    repo.insert_record(EnrichmentRecord(primary_domain=None, company_name=" Beta GmbH"))
    repo.insert_record(EnrichmentRecord(primary_domain="gamma.io", company_name="Gamma"))
    got = repo.find_candidates(["acme.com"], ["beta gmbh"])
    assert [r.company_name.strip() for r in got] == ["Acme", "Beta GmbH"]


def test_find_candidates_with_nothing_to_look_up(conn):
    EnrichmentRepo(conn).insert_record(EnrichmentRecord(company_name="Acme"))
    assert EnrichmentRepo(conn).find_candidates([], []) == []


def test_set_status_marks_and_clears(conn):
    repo = StatusRepo(conn)
    marked = repo.set_status("acme.com", True, "ana")
    assert marked.contacted is True
    assert marked.contacted_by == "ana"
    assert marked.contacted_at is not None

    again = repo.set_status("acme.com", True, "bia")
    assert again.contacted_by == "bia"

    cleared = repo.set_status("acme.com", False, "bia")
    assert cleared.contacted is False
    assert cleared.contacted_by is None and cleared.contacted_at is None

    rows = repo.find_by_keys(["acme.com", "other"])
    assert len(rows) == 1 and rows[0].contacted is False
    cur = conn.cursor()
    cur.execute("SELECT COUNT(*) FROM company_outreach_status")
    assert cur.fetchone()[0] == 1


def test_set_status_false_on_first_write(conn):
    rec = StatusRepo(conn).set_status("beta", False, "ana")
    assert rec.contacted is False and rec.contacted_by is None and rec.contacted_at is None


def test_find_candidates_folds_accents_and_url_domains(conn):
    repo = EnrichmentRepo(conn)
    repo.insert_record(EnrichmentRecord(company_name="SÃO PAULO ALPARGATAS", description="Sandals"))
    repo.insert_record(EnrichmentRecord(primary_domain="https://www.Acme.com/about", company_name="Acme"))
    repo.insert_record(EnrichmentRecord(primary_domain="gamma.io", company_name="Gamma"))
    got = repo.find_candidates(["acme.com"], ["são paulo alpargatas"])
    assert [r.company_name for r in got] == ["SÃO PAULO ALPARGATAS", "Acme"]
