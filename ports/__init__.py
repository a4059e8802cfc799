from .repos import ContactsRepoPort, EnrichmentRepoPort, StatusRepoPort

__all__ = [
    "ContactsRepoPort",
    "EnrichmentRepoPort",
    "StatusRepoPort",
]
