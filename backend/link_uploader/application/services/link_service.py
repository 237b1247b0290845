"""Application service (use case) for the link lifecycle."""

import logging

from link_uploader.application.interfaces import LinkRepository
from link_uploader.application.schemas import LinkCreate, LinkUpdate
from link_uploader.application.services.ownership_guard import ensure_owner
from link_uploader.application.services.preview_enrichment import PreviewEnrichmentScheduler
from link_uploader.domain.entities import Link
from link_uploader.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class LinkService:
    """Coordinates link creation, ownership-gated mutation, and click tracking.

    Depends on the repository port and the enrichment scheduler (DI). Every
    synchronous failure propagates to the caller; enrichment failures never do.
    """

    def __init__(self, repository: LinkRepository, enrichment: PreviewEnrichmentScheduler):
        self._repository = repository
        self._enrichment = enrichment

    async def get_link(self, link_id: str) -> Link:
        link = await self._repository.get_by_id(link_id)
        if link is None:
            raise EntityNotFoundError("Link", link_id)
        return link

    async def list_links(self) -> list[Link]:
        return await self._repository.get_all()

    async def create_link(self, data: LinkCreate, owner_id: str) -> Link:
        """Persist a link without a preview, then enrich it in the background."""
        link = Link(
            url=data.url,
            title=data.title,
            description=data.description,
            owner_id=owner_id,
        )
        created = await self._repository.create(link)
        logger.info("Created link %s for user %s", created.id, owner_id)

        self._enrichment.schedule(created.id, created.url)
        return created

    async def update_link(self, link_id: str, data: LinkUpdate, requester_id: str) -> Link:
        current = await self.get_link(link_id)
        ensure_owner(current, requester_id, "update")

        updated = await self._repository.update(
            link_id, url=data.url, title=data.title, description=data.description
        )
        if updated is None:
            # Deleted between the ownership check and the write.
            raise EntityNotFoundError("Link", link_id)
        return updated

    async def delete_link(self, link_id: str, requester_id: str) -> None:
        current = await self.get_link(link_id)
        ensure_owner(current, requester_id, "delete")
        await self._repository.delete(link_id)
        logger.info("Deleted link %s", link_id)

    async def track_click(self, link_id: str) -> None:
        """Record a click. Unknown or deleted links are silently ignored."""
        await self._repository.increment_click_count(link_id)
