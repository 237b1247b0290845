"""Domain entities for shared links and their previews."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class LinkPreview:
    """Best-effort metadata extracted from the page a link points to."""

    title: str | None = None
    description: str | None = None
    image_url: str | None = None

    def is_empty(self) -> bool:
        return not (self.title or self.description or self.image_url)

    def to_dict(self) -> dict[str, str | None]:
        return {
            "title": self.title,
            "description": self.description,
            "image_url": self.image_url,
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "LinkPreview | None":
        if not data:
            return None
        return cls(
            title=data.get("title"),
            description=data.get("description"),
            image_url=data.get("image_url"),
        )


@dataclass(frozen=True)
class OwnerSummary:
    """Read-time projection of the owning user's public identity."""

    username: str


@dataclass
class Link:
    """Core domain entity representing a saved, shareable hyperlink.

    ``owner`` is never stored on the link row; it is joined from the users
    table on every read and is ``None`` when the owner no longer exists.
    """

    url: str
    title: str
    description: str
    owner_id: str
    id: str | None = None
    click_count: int = 0
    preview: LinkPreview | None = None
    owner: OwnerSummary | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
