"""Preview enrichment — fire-and-forget background tasks that attach link previews."""

import asyncio
import logging

from link_uploader.application.interfaces import LinkRepository, PreviewFetcher

logger = logging.getLogger(__name__)


class PreviewEnrichmentScheduler:
    """Spawns one independent asyncio.Task per created link.

    A task fetches the preview outside of any transaction and, only on
    success, attaches it with a single store call. Outcomes are never
    reported back to the request that scheduled the task. The scheduler
    holds a reference to every pending task until it finishes so the event
    loop does not drop it mid-flight.
    """

    def __init__(self, fetcher: PreviewFetcher, repository: LinkRepository) -> None:
        self._fetcher = fetcher
        self._repository = repository
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending_count(self) -> int:
        return len(self._tasks)

    def schedule(self, link_id: str, url: str) -> asyncio.Task:
        """Start enrichment for a link without awaiting it."""
        task = asyncio.create_task(self._enrich(link_id, url), name=f"enrich-preview-{link_id}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait for every pending enrichment task to finish."""
        while True:
            pending = [task for task in self._tasks if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    async def shutdown(self) -> None:
        """Cancel outstanding enrichment tasks and wait for them to unwind."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("PreviewEnrichmentScheduler stopped (%d task(s) cancelled)", len(tasks))

    async def _enrich(self, link_id: str, url: str) -> None:
        try:
            preview = await self._fetcher.fetch_preview(url)
            if preview is None:
                logger.debug("No preview available for link %s (%s)", link_id, url)
                return

            attached = await self._repository.attach_preview(link_id, preview)
            if attached:
                logger.info("Attached preview to link %s: title=%r", link_id, preview.title)
            else:
                logger.debug("Link %s vanished or already has a preview — skipped", link_id)
        except asyncio.CancelledError:
            raise
        except Exception:
            # Enrichment is additive; a failure leaves the preview absent.
            logger.info("Preview enrichment failed for link %s", link_id, exc_info=True)
