from __future__ import annotations

import logging

from pipelines.runner import RunContext
from utils.logging_setup import step_extra
from services.matching import join_status, match_all


class MatchEnrichment:
    def run(self, ctx: RunContext) -> RunContext:
        ctx.matches = match_all(ctx.groups or [], ctx.enrichment or [])
        matched = sum(1 for m in ctx.matches.values() if m is not None)
        ctx.meta["companies_enriched"] = matched
        logging.info(
            f"Matched enrichment for {matched}/{len(ctx.matches)} companies",
            extra=step_extra("match_enrichment", run_id=ctx.run_id),
        )
        return ctx


class JoinCompanyStatus:
    def run(self, ctx: RunContext) -> RunContext:
        ctx.status_by_key = join_status(ctx.groups or [], ctx.statuses or [])
        ctx.meta["companies_contacted"] = sum(
            1 for s in ctx.status_by_key.values() if s is not None and s.contacted
        )
        return ctx
