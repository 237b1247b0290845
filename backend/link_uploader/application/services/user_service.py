"""Application service for user profiles."""

from link_uploader.application.interfaces import UserRepository
from link_uploader.application.schemas import UserCreate
from link_uploader.domain.entities import User
from link_uploader.domain.exceptions import DuplicateEntityError, EntityNotFoundError


class UserService:
    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_user(self, user_id: str) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def register_user(self, data: UserCreate) -> User:
        if await self._repository.exists(data.username, data.email):
            raise DuplicateEntityError("User", "username/email", f"{data.username}/{data.email}")
        return await self._repository.create(User(username=data.username, email=data.email))
