from .link_repository import LinkRepository
from .preview_fetcher import PreviewFetcher
from .user_repository import UserRepository

__all__ = [
    "LinkRepository",
    "PreviewFetcher",
    "UserRepository",
]
