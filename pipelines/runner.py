from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Protocol, List, Optional
import logging

from utils.logging_setup import init_logging, step_extra


@dataclass
class RunContext:
    contacts: list = field(default_factory=list)
    groups: list = field(default_factory=list)
    enrichment: list = field(default_factory=list)
    statuses: list = field(default_factory=list)
    matches: dict = field(default_factory=dict)
    status_by_key: dict = field(default_factory=dict)
    companies: list = field(default_factory=list)
    meta: dict = field(default_factory=dict)
    run_id: Optional[str] = None


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            name = type(step).__name__
            t0 = time.perf_counter()
            ctx = step.run(ctx)
            logging.debug(
                f"{name} done",
                extra=step_extra(name, run_id=ctx.run_id, duration_ms=int((time.perf_counter() - t0) * 1000)),
            )
        return ctx
