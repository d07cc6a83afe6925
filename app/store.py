"""User store backed by an async SQLAlchemy session factory.

One ``UserStore`` is built at startup and shared by every request; each
operation opens its own short-lived session, so there is no per-request
state to coordinate. Username and email uniqueness is left to the
database's unique constraints, which also settles concurrent signups.
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.task import Task
from app.models.user import User
from app.services.credentials import issue_token
from app.utils.exceptions import DuplicateKeyError, StoreError

logger = logging.getLogger(__name__)


class UserStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def create(self, username: str, email: str, password_hash: str) -> User:
        """Insert a new user and issue its access token.

        Raises ``DuplicateKeyError`` when the username or email is taken.
        """
        user = User(
            id=str(uuid.uuid4()),
            username=username,
            email=email,
            password_hash=password_hash,
            access_token=issue_token(),
        )
        async with self.session_factory() as session:
            session.add(user)
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                logger.info("Rejected duplicate signup for username=%s", username)
                raise DuplicateKeyError()
            except SQLAlchemyError:
                await session.rollback()
                logger.exception("Failed to create user %s", username)
                raise StoreError()
        return user

    async def find_by_username(self, username: str) -> User | None:
        return await self._first(select(User).where(User.username == username))

    async def find_by_token(self, token: str) -> User | None:
        return await self._first(select(User).where(User.access_token == token))

    async def find_tasks_by_user(self, user_id: str) -> list[Task]:
        """Tasks referencing ``user_id``, newest first."""
        query = (
            select(Task)
            .where(Task.user_id == user_id)
            .order_by(Task.created_at.desc())
        )
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                return list(result.scalars().all())
        except SQLAlchemyError:
            logger.exception("Failed to list tasks for user %s", user_id)
            raise StoreError()

    async def _first(self, query) -> User | None:
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                return result.scalars().first()
        except SQLAlchemyError:
            logger.exception("User lookup failed")
            raise StoreError()
