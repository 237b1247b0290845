from .link import LinkModel
from .user import UserModel

__all__ = [
    "LinkModel",
    "UserModel",
]
