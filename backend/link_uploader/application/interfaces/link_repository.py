"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from link_uploader.domain.entities import Link, LinkPreview


class LinkRepository(ABC):
    """Port for link persistence — implemented in the infrastructure layer.

    Every method is individually atomic. Methods returning ``Link`` always
    include the owner summary joined at read time.
    """

    @abstractmethod
    async def create(self, link: Link) -> Link:
        """Persist a new link with ``click_count = 0`` and return it with its generated ID."""
        ...

    @abstractmethod
    async def get_by_id(self, link_id: str) -> Link | None:
        """Retrieve a single link, or None when no row matches."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Link]:
        """Retrieve every link, newest first."""
        ...

    @abstractmethod
    async def update(self, link_id: str, url: str, title: str, description: str) -> Link | None:
        """Replace the user-editable fields and refresh ``updated_at``.

        Never touches ``preview`` or ``click_count``. Returns None when the
        link no longer exists.
        """
        ...

    @abstractmethod
    async def increment_click_count(self, link_id: str) -> None:
        """Atomically add one to ``click_count``. Unknown IDs are a no-op."""
        ...

    @abstractmethod
    async def delete(self, link_id: str) -> None:
        """Delete a link. Deleting an unknown ID is not an error."""
        ...

    @abstractmethod
    async def attach_preview(self, link_id: str, preview: LinkPreview) -> bool:
        """Set the preview of a link that has none, leaving ``updated_at`` alone.

        Returns True if a row was written; False if the link was deleted or
        already carries a preview.
        """
        ...
