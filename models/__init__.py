from .contact_record import RawContact
from .enrichment_record import EnrichmentRecord
from .status_record import StatusRecord
from .company_group import CompanyGroup
from .company_view import CompanyView, ContactView

__all__ = [
    "RawContact",
    "EnrichmentRecord",
    "StatusRecord",
    "CompanyGroup",
    "CompanyView",
    "ContactView",
]
