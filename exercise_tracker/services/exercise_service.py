"""Exercise Service — record exercises and build filtered exercise logs.

Invariants:
    - User existence checked first: a missing user fails before input validation
      and nothing is persisted
    - Duration coerced explicitly (core/coerce_input.py), never passed through raw
    - Omitted date resolves to the server's current calendar date
    - Unparseable from/to/limit are ignored and logged, never rejected
    - Dates in every response use the calendar-date string form

Design Decisions:
    - `today` injectable: callers and tests pin the clock without patching
    - User lookup and insert are separate store calls with no shared transaction
      (users are never deleted, so the window between them is inert)
"""

import logging
from datetime import date

from exercise_tracker.core.coerce_input import (
    build_log_query,
    coerce_description,
    coerce_duration,
    coerce_exercise_date,
    parse_user_id,
)
from exercise_tracker.core.domain_types import UserRecord
from exercise_tracker.core.errors import ResourceNotFoundError
from exercise_tracker.core.format_log import (
    format_exercise_response,
    format_log_response,
)
from exercise_tracker.core.repository_protocols import (
    ExerciseRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


async def add_exercise(
    users: UserRepository,
    exercises: ExerciseRepository,
    user_id: str,
    description: object,
    duration: object,
    on: object = None,
    today: date | None = None,
) -> dict:
    """Log an exercise for a user and return the composed response."""
    user = await _get_user_or_raise(users, user_id)

    clean_description = coerce_description(description)
    minutes = coerce_duration(duration)
    exercise_date = coerce_exercise_date(on, today or date.today())

    exercise = await exercises.create(
        user.id, clean_description, minutes, exercise_date,
    )
    logger.info(
        "Exercise logged",
        extra={"user_id": str(user.id), "exercise_id": str(exercise.id)},
    )
    return format_exercise_response(user, exercise)


async def get_log(
    users: UserRepository,
    exercises: ExerciseRepository,
    user_id: str,
    date_from: str | None = None,
    date_to: str | None = None,
    limit: str | None = None,
) -> dict:
    """Return a user's exercise log, filtered by date range and capped by limit."""
    user = await _get_user_or_raise(users, user_id)

    query, ignored = build_log_query(user.id, date_from, date_to, limit)
    if ignored:
        logger.warning(
            f"Ignoring unparseable log filters: {', '.join(ignored)}",
            extra={"user_id": str(user.id)},
        )
    entries = await exercises.find_for_user(query)
    return format_log_response(user, entries)


async def _get_user_or_raise(users: UserRepository, raw_id: str) -> UserRecord:
    user = await users.get_by_id(parse_user_id(raw_id))
    if user is None:
        raise ResourceNotFoundError("User", raw_id)
    return user
