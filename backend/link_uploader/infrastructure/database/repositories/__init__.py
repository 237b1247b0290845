from .link_repository import SQLAlchemyLinkRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyLinkRepository",
    "SQLAlchemyUserRepository",
]
