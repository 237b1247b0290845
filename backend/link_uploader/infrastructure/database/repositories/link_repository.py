"""Concrete Link store backed by SQLAlchemy.

Each public method opens its own short-lived session and transaction from
the shared session factory, so every call is independently atomic and no
connection is held between calls.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from sqlalchemy import Select, delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from link_uploader.application.interfaces import LinkRepository
from link_uploader.domain.entities import Link, LinkPreview, OwnerSummary
from link_uploader.domain.exceptions import StorageError
from link_uploader.infrastructure.database.models import LinkModel, UserModel

logger = logging.getLogger(__name__)


class SQLAlchemyLinkRepository(LinkRepository):
    """Implements the LinkRepository port using SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Run one unit of work, translating driver errors into StorageError."""
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    yield session
        except SQLAlchemyError as exc:
            logger.error("Link store %s failed: %s", operation, exc)
            raise StorageError(operation, exc) from exc

    @staticmethod
    def _select_with_owner() -> Select:
        return (
            select(LinkModel, UserModel.username)
            .outerjoin(UserModel, UserModel.id == LinkModel.owner_id)
            .execution_options(populate_existing=True)
        )

    @staticmethod
    def _to_entity(model: LinkModel, username: str | None) -> Link:
        """Map ORM row (+ joined owner name) → domain entity."""
        return Link(
            id=model.id,
            url=model.url,
            title=model.title,
            description=model.description,
            owner_id=model.owner_id,
            click_count=model.click_count,
            preview=LinkPreview.from_dict(model.preview),
            owner=OwnerSummary(username=username) if username is not None else None,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def _fetch_one(self, session: AsyncSession, link_id: str) -> Link | None:
        result = await session.execute(self._select_with_owner().where(LinkModel.id == link_id))
        row = result.one_or_none()
        return self._to_entity(row[0], row[1]) if row else None

    async def create(self, link: Link) -> Link:
        now = datetime.now(timezone.utc)
        async with self._transaction("create") as session:
            model = LinkModel(
                url=link.url,
                title=link.title,
                description=link.description,
                owner_id=link.owner_id,
                click_count=0,
                preview=link.preview.to_dict() if link.preview else None,
                created_at=now,
                updated_at=now,
            )
            session.add(model)
            await session.flush()
            created = await self._fetch_one(session, model.id)
        if created is None:
            raise StorageError("create")
        return created

    async def get_by_id(self, link_id: str) -> Link | None:
        async with self._transaction("get_by_id") as session:
            return await self._fetch_one(session, link_id)

    async def get_all(self) -> list[Link]:
        stmt = self._select_with_owner().order_by(LinkModel.created_at.desc())
        async with self._transaction("get_all") as session:
            result = await session.execute(stmt)
            return [self._to_entity(model, username) for model, username in result.all()]

    async def update(self, link_id: str, url: str, title: str, description: str) -> Link | None:
        stmt = (
            update(LinkModel)
            .where(LinkModel.id == link_id)
            .values(
                url=url,
                title=title,
                description=description,
                updated_at=datetime.now(timezone.utc),
            )
            .execution_options(synchronize_session=False)
        )
        async with self._transaction("update") as session:
            result = await session.execute(stmt)
            if result.rowcount == 0:
                return None
            return await self._fetch_one(session, link_id)

    async def increment_click_count(self, link_id: str) -> None:
        stmt = (
            update(LinkModel)
            .where(LinkModel.id == link_id)
            .values(click_count=LinkModel.click_count + 1)
            .execution_options(synchronize_session=False)
        )
        async with self._transaction("increment_click_count") as session:
            await session.execute(stmt)

    async def delete(self, link_id: str) -> None:
        stmt = (
            delete(LinkModel)
            .where(LinkModel.id == link_id)
            .execution_options(synchronize_session=False)
        )
        async with self._transaction("delete") as session:
            await session.execute(stmt)

    async def attach_preview(self, link_id: str, preview: LinkPreview) -> bool:
        stmt = (
            update(LinkModel)
            .where(LinkModel.id == link_id, LinkModel.preview.is_(None))
            .values(preview=preview.to_dict())
            .execution_options(synchronize_session=False)
        )
        async with self._transaction("attach_preview") as session:
            result = await session.execute(stmt)
            return result.rowcount > 0
