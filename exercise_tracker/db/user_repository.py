"""User Repository — SQLAlchemy implementation of the UserRepository protocol.

Invariants:
    - Returns UserRecord, never ORM objects
    - Username collisions surface as DuplicateResourceError (unique constraint)
    - Any other SQLAlchemy failure surfaces as DatabaseError
    - create() commits immediately: one insert per request, no shared transaction

Design Decisions:
    - Insert-and-catch over select-then-insert: the unique index is the only
      race-free uniqueness check
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.domain_types import UserId, UserRecord
from exercise_tracker.core.errors import DatabaseError, DuplicateResourceError
from exercise_tracker.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """User persistence over an async session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, username: str) -> UserRecord:
        user = User(username=username)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateResourceError("User", "username")
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to insert user: {e}")
            raise DatabaseError("Could not save user", "insert")
        return _to_record(user)

    async def get_by_id(self, user_id: UserId) -> UserRecord | None:
        try:
            result = await self.db.execute(
                select(User).where(User.id == user_id),
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to load user {user_id}: {e}")
            raise DatabaseError("Could not load user", "query")
        user = result.scalar_one_or_none()
        return _to_record(user) if user else None

    async def list_all(self) -> list[UserRecord]:
        try:
            result = await self.db.execute(
                select(User).order_by(User.created_at.asc()),
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to list users: {e}")
            raise DatabaseError("Could not list users", "query")
        return [_to_record(u) for u in result.scalars().all()]


def _to_record(user: User) -> UserRecord:
    return UserRecord(id=UserId(user.id), username=user.username)
