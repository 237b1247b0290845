from .link import Link, LinkPreview, OwnerSummary
from .user import User

__all__ = [
    "Link",
    "LinkPreview",
    "OwnerSummary",
    "User",
]
