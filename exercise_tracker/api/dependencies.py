"""API Dependencies — bind repositories to the request-scoped DB session.

Invariants:
    - One AsyncSession per request: FastAPI caches get_db, so both repositories
      in a handler share it
    - Routes receive repositories, never sessions

Design Decisions:
    - Store handle injected through Depends: tests override get_db only
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.db.exercise_repository import SqlExerciseRepository
from exercise_tracker.db.user_repository import SqlUserRepository
from exercise_tracker.infrastructure.database import get_db


def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlUserRepository:
    return SqlUserRepository(db)


def get_exercise_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlExerciseRepository:
    return SqlExerciseRepository(db)
