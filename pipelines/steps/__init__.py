# Namespace for pipeline steps
from .fetch_records import FetchContacts, FetchEnrichmentCandidates, FetchCompanyStatus  # noqa: F401
from .aggregate_companies import AggregateCompanies  # noqa: F401
from .link_records import MatchEnrichment, JoinCompanyStatus  # noqa: F401
from .assemble_companies import AssembleCompanyViews  # noqa: F401
