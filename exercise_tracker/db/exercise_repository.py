"""Exercise Repository — SQLAlchemy implementation of the ExerciseRepository protocol.

Invariants:
    - find_for_user filters by user_id, then inclusive date bounds when present
    - Results sorted by date ascending, created_at breaking ties
    - limit applied after sorting: the earliest N entries are kept
    - Any SQLAlchemy failure surfaces as DatabaseError

Design Decisions:
    - Filter/sort/limit pushed into SQL: the log never loads more rows than returned
"""

import datetime as dt
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.domain_types import (
    ExerciseId, ExerciseRecord, LogQuery, UserId,
)
from exercise_tracker.core.errors import DatabaseError
from exercise_tracker.models.exercise import Exercise

logger = logging.getLogger(__name__)


class SqlExerciseRepository:
    """Exercise persistence over an async session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self, user_id: UserId, description: str, duration: int, on: dt.date,
    ) -> ExerciseRecord:
        exercise = Exercise(
            user_id=user_id,
            description=description,
            duration=duration,
            date=on,
        )
        self.db.add(exercise)
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to insert exercise: {e}")
            raise DatabaseError("Could not save exercise", "insert")
        return _to_record(exercise)

    async def find_for_user(self, query: LogQuery) -> list[ExerciseRecord]:
        stmt = select(Exercise).where(Exercise.user_id == query.user_id)
        if query.date_from is not None:
            stmt = stmt.where(Exercise.date >= query.date_from)
        if query.date_to is not None:
            stmt = stmt.where(Exercise.date <= query.date_to)
        stmt = stmt.order_by(Exercise.date.asc(), Exercise.created_at.asc())
        if query.limit is not None:
            stmt = stmt.limit(query.limit)

        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to query exercise log: {e}")
            raise DatabaseError("Could not load exercise log", "query")
        return [_to_record(e) for e in result.scalars().all()]


def _to_record(exercise: Exercise) -> ExerciseRecord:
    return ExerciseRecord(
        id=ExerciseId(exercise.id),
        user_id=UserId(exercise.user_id),
        description=exercise.description,
        duration=exercise.duration,
        date=exercise.date,
    )
