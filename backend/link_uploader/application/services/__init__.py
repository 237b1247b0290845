from .link_service import LinkService
from .ownership_guard import authorize, ensure_owner
from .preview_enrichment import PreviewEnrichmentScheduler
from .user_service import UserService

__all__ = [
    "LinkService",
    "PreviewEnrichmentScheduler",
    "UserService",
    "authorize",
    "ensure_owner",
]
