from __future__ import annotations

from models.company_group import CompanyGroup
from models.enrichment_record import EnrichmentRecord
from models.status_record import StatusRecord
from services.matching import join_status, lookup_keys, match_all, match_enrichment


def _group(key, name, domain_input=""):
    return CompanyGroup(group_key=key, display_name=name, domain_input=domain_input)


def test_each_group_binds_to_its_own_record():
    by_domain = _group("acme.com", "Acme", "https://acme.com")
    by_name = _group("beta gmbh", "Beta GmbH", "")
    name_only = EnrichmentRecord(company_name="  BETA GmbH ", description="name hit")
    domain_only = EnrichmentRecord(primary_domain="www.ACME.com", company_name="Acme Holdings", description="domain hit")
    matches = match_all([by_domain, by_name], [name_only, domain_only])
    assert matches["acme.com"] is domain_only
    assert matches["beta gmbh"] is name_only


def test_earlier_name_match_wins_over_later_domain_match():
    g = _group("acme.com", "Acme", "acme.com")
    name_hit = EnrichmentRecord(company_name="acme", primary_domain="other.com", description="first")
    domain_hit = EnrichmentRecord(company_name="Acme International", primary_domain="acme.com", description="second")
    assert match_enrichment(g, [name_hit, domain_hit]) is name_hit
    assert match_enrichment(g, [domain_hit, name_hit]) is domain_hit


def test_first_candidate_wins_within_predicate():
    g = _group("acme", "Acme")
    first = EnrichmentRecord(company_name="Acme", description="first")
    second = EnrichmentRecord(company_name="ACME", description="second")
    assert match_enrichment(g, [first, second]) is first


def test_empty_values_never_match():
    g = _group("acme", "Acme", "")
    blank = EnrichmentRecord(primary_domain=None, company_name=None)
    assert match_enrichment(g, [blank]) is None
    assert match_enrichment(g, []) is None


def test_join_status_exact_key():
    groups = [_group("acme.com", "Acme"), _group("beta", "Beta")]
    statuses = [StatusRecord(company_key="acme.com", contacted=True, contacted_by="ana")]
    joined = join_status(groups, statuses)
    assert joined["acme.com"].contacted_by == "ana"
    assert joined["beta"] is None


def test_lookup_keys_collects_prefilter_values():
    groups = [_group("acme.com", "Acme", "https://www.acme.com/about"), _group("beta", "Beta", "")]
    keys, domains, names = lookup_keys(groups)
    assert keys == ["acme.com", "beta"]
    assert domains == ["acme.com"]
    assert names == ["acme", "beta"]
