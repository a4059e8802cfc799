from __future__ import annotations


class AggregationError(RuntimeError):
    """The company overview could not be built; no partial result exists."""


class StatusUpdateError(RuntimeError):
    pass


class CrmForwardError(RuntimeError):
    pass
