"""Port for user profile persistence."""

from abc import ABC, abstractmethod

from link_uploader.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User | None:
        ...

    @abstractmethod
    async def exists(self, username: str, email: str) -> bool:
        """True if a user already holds this username or email."""
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        ...
