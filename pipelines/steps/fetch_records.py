from __future__ import annotations

import logging

from ports.repos import ContactsRepoPort, EnrichmentRepoPort, StatusRepoPort
from pipelines.runner import RunContext
from utils.logging_setup import step_extra
from services.matching import lookup_keys


class FetchContacts:
    def __init__(self, repo: ContactsRepoPort, source_tag: str, phone_prefix: str) -> None:
        self.repo = repo
        self.source_tag = source_tag
        self.phone_prefix = phone_prefix

    def run(self, ctx: RunContext) -> RunContext:
        ctx.contacts = self.repo.fetch_filtered(self.source_tag, self.phone_prefix)
        ctx.meta["contacts_total"] = len(ctx.contacts)
        logging.info(
            f"Loaded {len(ctx.contacts)} contacts (source={self.source_tag}, phone={self.phone_prefix}*)",
            extra=step_extra("fetch_contacts", run_id=ctx.run_id),
        )
        return ctx


class FetchEnrichmentCandidates:
    def __init__(self, repo: EnrichmentRepoPort) -> None:
        self.repo = repo

    def run(self, ctx: RunContext) -> RunContext:
        _keys, domains, names = lookup_keys(ctx.groups or [])
        ctx.enrichment = self.repo.find_candidates(domains, names)
        ctx.meta["enrichment_candidates"] = len(ctx.enrichment)
        return ctx


class FetchCompanyStatus:
    def __init__(self, repo: StatusRepoPort) -> None:
        self.repo = repo

    def run(self, ctx: RunContext) -> RunContext:
        keys, _domains, _names = lookup_keys(ctx.groups or [])
        ctx.statuses = self.repo.find_by_keys(keys)
        ctx.meta["status_records"] = len(ctx.statuses)
        return ctx
