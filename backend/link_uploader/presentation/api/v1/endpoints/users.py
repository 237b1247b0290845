"""User profile endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from link_uploader.application.schemas import UserCreate, UserResponse
from link_uploader.application.services import UserService
from link_uploader.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from link_uploader.infrastructure.dependencies import get_user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Register a user profile used for owner summaries."""
    try:
        user = await service.register_user(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = await service.get_user(user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)
