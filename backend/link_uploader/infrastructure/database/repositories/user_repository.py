"""Concrete user profile repository backed by SQLAlchemy."""

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from link_uploader.application.interfaces import UserRepository
from link_uploader.domain.entities import User
from link_uploader.domain.exceptions import DuplicateEntityError, StorageError
from link_uploader.infrastructure.database.models import UserModel


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            email=model.email,
            created_at=model.created_at,
        )

    async def get_by_id(self, user_id: str) -> User | None:
        try:
            async with self._session_factory() as session:
                model = await session.get(UserModel, user_id)
                return self._to_entity(model) if model else None
        except SQLAlchemyError as exc:
            raise StorageError("get_user", exc) from exc

    async def exists(self, username: str, email: str) -> bool:
        stmt = select(UserModel.id).where(
            or_(UserModel.username == username, UserModel.email == email)
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt.limit(1))
                return result.first() is not None
        except SQLAlchemyError as exc:
            raise StorageError("user_exists", exc) from exc

    async def create(self, user: User) -> User:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    model = UserModel(
                        username=user.username,
                        email=user.email,
                        created_at=user.created_at,
                    )
                    session.add(model)
                    await session.flush()
                    await session.refresh(model)
                    return self._to_entity(model)
        except IntegrityError as exc:
            raise DuplicateEntityError("User", "username/email", user.username) from exc
        except SQLAlchemyError as exc:
            raise StorageError("create_user", exc) from exc
