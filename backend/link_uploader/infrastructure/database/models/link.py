"""SQLAlchemy ORM model for the Link entity."""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from link_uploader.infrastructure.database.base import Base


def _generate_uuid() -> str:
    return str(uuid.uuid4())


class LinkModel(Base):
    """ORM model — maps to the 'links' table.

    ``owner_id`` deliberately has no foreign key: users are owned by the
    identity provider and a link may outlive its owner's profile row.
    ``updated_at`` has no ``onupdate`` hook; only user edits refresh it.
    """

    __tablename__ = "links"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_generate_uuid)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    owner_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    click_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    preview: Mapped[dict[str, Any] | None] = mapped_column(JSON(none_as_null=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<LinkModel(id={self.id}, url='{self.url}')>"
