from __future__ import annotations

import logging

from utils.logging_setup import SafeExtraFormatter, step_extra


def test_formatter_fills_missing_extras():
    fmt = SafeExtraFormatter(fmt="%(message)s step=%(step)s run_id=%(run_id)s")
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "hello", None, None)
    assert fmt.format(record) == "hello step=- run_id=-"


def test_step_extra_carries_fields():
    extra = step_extra("fetch_contacts", run_id=None, duration_ms=5)
    assert extra == {"step": "fetch_contacts", "status": "ok", "run_id": "-", "duration_ms": 5}
