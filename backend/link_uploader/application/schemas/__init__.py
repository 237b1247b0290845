from .link import (
    LinkCreate,
    LinkPreviewResponse,
    LinkResponse,
    LinkUpdate,
    MessageResponse,
    OwnerSummaryResponse,
)
from .user import UserCreate, UserResponse

__all__ = [
    "LinkCreate",
    "LinkUpdate",
    "LinkResponse",
    "LinkPreviewResponse",
    "OwnerSummaryResponse",
    "MessageResponse",
    "UserCreate",
    "UserResponse",
]
