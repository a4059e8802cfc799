from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EnrichmentRecord(BaseModel):
    """Firmographic detail for a company, produced outside this app."""

    primary_domain: str | None = None
    company_name: str | None = None
    description: str | None = None
    website: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)
