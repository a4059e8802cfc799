from __future__ import annotations

from pipelines.runner import RunContext
from services.assembler import assemble_company_view


class AssembleCompanyViews:
    def __init__(self, owner: str) -> None:
        self.owner = owner

    def run(self, ctx: RunContext) -> RunContext:
        ctx.companies = [
            assemble_company_view(
                group,
                ctx.matches.get(group.group_key),
                ctx.status_by_key.get(group.group_key),
                self.owner,
            )
            for group in ctx.groups or []
        ]
        return ctx
