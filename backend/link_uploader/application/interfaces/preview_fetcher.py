"""Port for fetching link previews from remote pages."""

from abc import ABC, abstractmethod

from link_uploader.domain.entities import LinkPreview


class PreviewFetcher(ABC):
    """Fetches and parses preview metadata for a URL.

    Implementations must not raise: timeouts, unreachable hosts, non-success
    responses and unparseable content all yield ``None``.
    """

    @abstractmethod
    async def fetch_preview(self, url: str) -> LinkPreview | None:
        ...
