from .base import Base
from .session import engine, async_session_factory, create_session_factory
from .models import LinkModel, UserModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "create_session_factory",
    "LinkModel",
    "UserModel",
]
