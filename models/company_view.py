from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ContactView(BaseModel):
    id: str
    name: str
    title: str
    seniority: str | None = None
    email: str
    phone: str | None = None
    linkedin: str | None = None


class CompanyView(BaseModel):
    """One company row of the outreach overview, as returned to clients."""

    key: str
    owner: str
    name: str
    description: str
    website: str | None = None
    location: str | None = None
    contacted: bool = False
    contacted_by: str | None = None
    contacted_at: datetime | None = None
    contacts: list[ContactView] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")
