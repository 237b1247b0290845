"""Shared fixtures: in-memory fakes for the service tests and a SQLite-backed store."""

import asyncio
import dataclasses
import uuid
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

from link_uploader.application.interfaces import LinkRepository, PreviewFetcher
from link_uploader.domain.entities import Link, LinkPreview
from link_uploader.infrastructure.database import Base, create_session_factory


class FakeLinkRepository(LinkRepository):
    """In-memory fake repository. Always hands out copies, like a real store."""

    def __init__(self):
        self._links: dict[str, Link] = {}

    def _copy(self, link: Link) -> Link:
        return dataclasses.replace(link)

    async def create(self, link: Link) -> Link:
        now = datetime.now(timezone.utc)
        stored = dataclasses.replace(
            link, id=str(uuid.uuid4()), click_count=0, created_at=now, updated_at=now
        )
        self._links[stored.id] = stored
        return self._copy(stored)

    async def get_by_id(self, link_id: str) -> Link | None:
        link = self._links.get(link_id)
        return self._copy(link) if link else None

    async def get_all(self) -> list[Link]:
        links = sorted(self._links.values(), key=lambda l: l.created_at, reverse=True)
        return [self._copy(link) for link in links]

    async def update(self, link_id: str, url: str, title: str, description: str) -> Link | None:
        link = self._links.get(link_id)
        if link is None:
            return None
        link.url, link.title, link.description = url, title, description
        link.updated_at = datetime.now(timezone.utc)
        return self._copy(link)

    async def increment_click_count(self, link_id: str) -> None:
        link = self._links.get(link_id)
        if link is not None:
            link.click_count += 1

    async def delete(self, link_id: str) -> None:
        self._links.pop(link_id, None)

    async def attach_preview(self, link_id: str, preview: LinkPreview) -> bool:
        link = self._links.get(link_id)
        if link is None or link.preview is not None:
            return False
        link.preview = preview
        return True


class FakePreviewFetcher(PreviewFetcher):
    """Returns a canned preview (or None / raises) after an optional delay."""

    def __init__(
        self,
        preview: LinkPreview | None = None,
        delay: float = 0.0,
        error: Exception | None = None,
    ):
        self._preview = preview
        self._delay = delay
        self._error = error
        self.calls: list[str] = []

    async def fetch_preview(self, url: str) -> LinkPreview | None:
        self.calls.append(url)
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return self._preview


@pytest.fixture
def fake_repository() -> FakeLinkRepository:
    return FakeLinkRepository()


@pytest.fixture
def example_preview() -> LinkPreview:
    return LinkPreview(
        title="Example Domain",
        description="This domain is for use in illustrative examples.",
        image_url="https://example.com/og.png",
    )


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """Session factory over a throwaway SQLite file with the schema created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'links.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield create_session_factory(engine)
    await engine.dispose()


@pytest.fixture
def fetcher_factory():
    """Builds FakePreviewFetcher instances: ``fetcher_factory(preview, delay=..., error=...)``."""
    return FakePreviewFetcher
