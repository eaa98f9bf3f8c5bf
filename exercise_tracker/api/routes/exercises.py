"""Exercises — log exercises for a user and read the user's exercise log.

Invariants:
    - Path id is the user's _id; unknown or malformed ids → 404
    - POST body fields: description, duration, optional date (yyyy-mm-dd)
    - GET /logs query: optional from, to (yyyy-mm-dd) and limit

Design Decisions:
    - from/to/limit typed as str: lenient parsing lives in core/coerce_input.py,
      so a bad filter value is ignored instead of failing framework validation
"""

from fastapi import APIRouter, Depends, Query

from exercise_tracker.api.dependencies import (
    get_exercise_repository,
    get_user_repository,
)
from exercise_tracker.api.request_body import read_payload
from exercise_tracker.db.exercise_repository import SqlExerciseRepository
from exercise_tracker.db.user_repository import SqlUserRepository
from exercise_tracker.schemas.exercise import ExerciseResponse, LogResponse
from exercise_tracker.services import exercise_service

router = APIRouter(prefix="/api/users", tags=["exercises"])


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
async def add_exercise(
    user_id: str,
    payload: dict = Depends(read_payload),
    users: SqlUserRepository = Depends(get_user_repository),
    exercises: SqlExerciseRepository = Depends(get_exercise_repository),
):
    """Log an exercise for the user."""
    return await exercise_service.add_exercise(
        users,
        exercises,
        user_id,
        description=payload.get("description"),
        duration=payload.get("duration"),
        on=payload.get("date"),
    )


@router.get("/{user_id}/logs", response_model=LogResponse)
async def get_log(
    user_id: str,
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    limit: str | None = Query(None),
    users: SqlUserRepository = Depends(get_user_repository),
    exercises: SqlExerciseRepository = Depends(get_exercise_repository),
):
    """Return the user's exercise log, oldest first."""
    return await exercise_service.get_log(
        users, exercises, user_id,
        date_from=date_from, date_to=date_to, limit=limit,
    )
