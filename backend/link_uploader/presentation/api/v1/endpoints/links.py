"""Link lifecycle endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from link_uploader.application.schemas import (
    LinkCreate,
    LinkResponse,
    LinkUpdate,
    MessageResponse,
)
from link_uploader.application.services import LinkService
from link_uploader.domain.exceptions import EntityNotFoundError, ForbiddenError
from link_uploader.infrastructure.dependencies import get_current_user_id, get_link_service

router = APIRouter(prefix="/links", tags=["Links"])


@router.get("", response_model=list[LinkResponse])
async def list_links(
    _user_id: str = Depends(get_current_user_id),
    service: LinkService = Depends(get_link_service),
) -> list[LinkResponse]:
    """Retrieve every link, newest first."""
    links = await service.list_links()
    return [LinkResponse.model_validate(link, from_attributes=True) for link in links]


@router.post("", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
async def create_link(
    data: LinkCreate,
    user_id: str = Depends(get_current_user_id),
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Create a link. Its preview is fetched in the background."""
    link = await service.create_link(data, owner_id=user_id)
    return LinkResponse.model_validate(link, from_attributes=True)


@router.get("/{link_id}", response_model=LinkResponse)
async def get_link(
    link_id: str,
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Retrieve a single link by ID."""
    try:
        link = await service.get_link(link_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return LinkResponse.model_validate(link, from_attributes=True)


@router.put("/{link_id}", response_model=LinkResponse)
async def update_link(
    link_id: str,
    data: LinkUpdate,
    user_id: str = Depends(get_current_user_id),
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Replace a link's url, title and description. Owner only."""
    try:
        link = await service.update_link(link_id, data, requester_id=user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ForbiddenError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return LinkResponse.model_validate(link, from_attributes=True)


@router.delete("/{link_id}", response_model=MessageResponse)
async def delete_link(
    link_id: str,
    user_id: str = Depends(get_current_user_id),
    service: LinkService = Depends(get_link_service),
) -> MessageResponse:
    """Delete a link. Owner only."""
    try:
        await service.delete_link(link_id, requester_id=user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ForbiddenError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return MessageResponse(message="Link deleted successfully")


@router.post("/{link_id}/click", response_model=MessageResponse)
async def track_click(
    link_id: str,
    service: LinkService = Depends(get_link_service),
) -> MessageResponse:
    """Record a click. Succeeds whether or not the link exists."""
    await service.track_click(link_id)
    return MessageResponse(message="Click recorded")
