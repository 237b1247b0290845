"""FastAPI dependency injection — wires infrastructure to application layer."""

import uuid
from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends, Header, HTTPException, status

from link_uploader.application.services import (
    LinkService,
    PreviewEnrichmentScheduler,
    UserService,
)
from link_uploader.config import get_settings
from link_uploader.infrastructure.database.repositories import (
    SQLAlchemyLinkRepository,
    SQLAlchemyUserRepository,
)
from link_uploader.infrastructure.database.session import async_session_factory
from link_uploader.infrastructure.preview import HttpPreviewFetcher


@lru_cache
def get_link_repository() -> SQLAlchemyLinkRepository:
    """Process-wide Link store bound to the shared session factory."""
    return SQLAlchemyLinkRepository(async_session_factory)


@lru_cache
def get_enrichment_scheduler() -> PreviewEnrichmentScheduler:
    """Process-wide scheduler; its tasks outlive the requests that start them."""
    settings = get_settings()
    fetcher = HttpPreviewFetcher(
        timeout=settings.preview_fetch_timeout,
        max_bytes=settings.preview_max_bytes,
        user_agent=settings.preview_user_agent,
    )
    return PreviewEnrichmentScheduler(fetcher=fetcher, repository=get_link_repository())


async def get_link_service(
    repository: SQLAlchemyLinkRepository = Depends(get_link_repository),
    enrichment: PreviewEnrichmentScheduler = Depends(get_enrichment_scheduler),
) -> AsyncGenerator[LinkService, None]:
    """Provides a LinkService wired to the shared store and enrichment scheduler."""
    yield LinkService(repository, enrichment)


async def get_user_service() -> AsyncGenerator[UserService, None]:
    """Provides a UserService instance with its repository wired up."""
    yield UserService(SQLAlchemyUserRepository(async_session_factory))


async def get_current_user_id(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
) -> str:
    """Trusted identity forwarded by the authenticating gateway.

    Tokens are verified upstream; only the presence and shape of the user id
    are checked here.
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authenticated user",
        )
    try:
        return str(uuid.UUID(x_user_id))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Malformed authenticated user id",
        )
