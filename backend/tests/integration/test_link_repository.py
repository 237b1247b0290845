"""Integration tests for the SQLAlchemy Link store against SQLite."""

import asyncio

import pytest
import pytest_asyncio

from link_uploader.domain.entities import Link, LinkPreview, User
from link_uploader.infrastructure.database.models import LinkModel
from link_uploader.infrastructure.database.repositories import (
    SQLAlchemyLinkRepository,
    SQLAlchemyUserRepository,
)


@pytest_asyncio.fixture
async def owner(session_factory) -> User:
    return await SQLAlchemyUserRepository(session_factory).create(
        User(username="alice", email="alice@example.com")
    )


@pytest.fixture
def repository(session_factory) -> SQLAlchemyLinkRepository:
    return SQLAlchemyLinkRepository(session_factory)


def _link(owner_id: str, title: str = "Example") -> Link:
    return Link(url="https://example.com", title=title, description="d", owner_id=owner_id)


@pytest.mark.asyncio
async def test_create_returns_full_record_with_owner(repository, owner):
    created = await repository.create(_link(owner.id))

    assert created.id is not None
    assert created.click_count == 0
    assert created.preview is None
    assert created.owner is not None
    assert created.owner.username == "alice"
    assert created.created_at == created.updated_at


@pytest.mark.asyncio
async def test_link_with_unknown_owner_has_no_owner_summary(repository):
    created = await repository.create(_link("99999999-9999-9999-9999-999999999999"))

    fetched = await repository.get_by_id(created.id)
    assert fetched is not None
    assert fetched.owner is None


@pytest.mark.asyncio
async def test_get_by_id_missing_returns_none(repository):
    assert await repository.get_by_id("missing") is None


@pytest.mark.asyncio
async def test_get_all_orders_newest_first(repository, owner):
    first = await repository.create(_link(owner.id, "A"))
    await asyncio.sleep(0.01)
    second = await repository.create(_link(owner.id, "B"))

    links = await repository.get_all()
    assert [link.id for link in links] == [second.id, first.id]


@pytest.mark.asyncio
async def test_update_refreshes_updated_at_only_for_text_fields(repository, owner, example_preview):
    created = await repository.create(_link(owner.id))
    await repository.attach_preview(created.id, example_preview)
    await repository.increment_click_count(created.id)
    await asyncio.sleep(0.01)

    updated = await repository.update(created.id, "https://example.org", "New", "new d")

    assert updated is not None
    assert (updated.url, updated.title, updated.description) == ("https://example.org", "New", "new d")
    assert updated.updated_at > created.updated_at
    assert updated.created_at == created.created_at
    assert updated.click_count == 1
    assert updated.preview == example_preview
    assert updated.owner.username == "alice"


@pytest.mark.asyncio
async def test_update_missing_returns_none(repository):
    assert await repository.update("missing", "https://example.org", "t", "d") is None


@pytest.mark.asyncio
async def test_concurrent_increments_are_not_lost(repository, owner):
    created = await repository.create(_link(owner.id))

    await asyncio.gather(*(repository.increment_click_count(created.id) for _ in range(10)))

    assert (await repository.get_by_id(created.id)).click_count == 10


@pytest.mark.asyncio
async def test_increment_missing_is_a_noop(repository):
    await repository.increment_click_count("missing")


@pytest.mark.asyncio
async def test_delete_is_idempotent(repository, owner):
    created = await repository.create(_link(owner.id))

    await repository.delete(created.id)
    await repository.delete(created.id)
    await repository.delete("never-existed")

    assert await repository.get_by_id(created.id) is None


@pytest.mark.asyncio
async def test_attach_preview_keeps_updated_at(repository, owner, example_preview):
    created = await repository.create(_link(owner.id))
    await asyncio.sleep(0.01)

    assert await repository.attach_preview(created.id, example_preview) is True

    fetched = await repository.get_by_id(created.id)
    assert fetched.preview == example_preview
    assert fetched.updated_at == created.updated_at


@pytest.mark.asyncio
async def test_attach_preview_happens_at_most_once(repository, owner, example_preview):
    created = await repository.create(_link(owner.id))

    assert await repository.attach_preview(created.id, example_preview) is True
    assert await repository.attach_preview(created.id, LinkPreview(title="Other")) is False
    assert (await repository.get_by_id(created.id)).preview == example_preview


@pytest.mark.asyncio
async def test_attach_preview_after_delete_is_a_noop(repository, owner, example_preview):
    created = await repository.create(_link(owner.id))
    await repository.delete(created.id)

    assert await repository.attach_preview(created.id, example_preview) is False


@pytest.mark.asyncio
async def test_each_store_call_commits_on_its_own(session_factory, repository, owner):
    created = await repository.create(_link(owner.id))
    await repository.increment_click_count(created.id)

    async with session_factory() as session:
        row = await session.get(LinkModel, created.id)
        assert row is not None
        assert row.click_count == 1


def test_database_package_exposes_factory_not_request_session():
    import link_uploader.infrastructure.database as database

    assert "create_session_factory" in database.__all__
    assert not hasattr(database, "get_db_session")
