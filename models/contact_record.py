from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RawContact(BaseModel):
    """Scraped person as stored in the contacts table (read-only here)."""

    contact_id: str
    company_id_raw: str | None = Field(default=None, alias="company_id")
    company_name: str | None = None
    lead_name: str | None = None
    job_title: str | None = None
    seniority_level: str | None = None
    email: str | None = None
    phone: str | None = None
    linkedin_url: str | None = None

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
