"""Domain entity for users known to the link service."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class User:
    """A user profile. Authentication lives with the external identity provider."""

    username: str
    email: str
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
