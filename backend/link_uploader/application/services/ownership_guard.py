"""Ownership guard — identity equality check applied before link mutations."""

from link_uploader.domain.entities import Link
from link_uploader.domain.exceptions import ForbiddenError


def authorize(requester_id: str, resource_owner_id: str) -> bool:
    """Return True when the requester owns the resource.

    Plain identity equality; there are no roles or delegation.
    """
    return requester_id == resource_owner_id


def ensure_owner(link: Link, requester_id: str, action: str) -> None:
    """Raise ForbiddenError unless ``requester_id`` owns ``link``."""
    if not authorize(requester_id, link.owner_id):
        raise ForbiddenError("Link", link.id or "", action)
