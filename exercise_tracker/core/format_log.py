"""Log Formatter — shapes stored records into the wire response format.

Invariants:
    - Dates always render as calendar-date strings ("Sun Jan 15 2023"), never ISO
    - Ids render as the canonical UUID string under the "_id" key
    - Key order mirrors the public contract (clients compare payloads verbatim)

Design Decisions:
    - Weekday/month names from fixed tables, not strftime("%a %b"): output must not
      depend on the process locale (ADR: wire-format contract)
"""

from datetime import date

from exercise_tracker.core.domain_types import ExerciseRecord, UserRecord

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_calendar_date(value: date) -> str:
    """Render as 'Www Mmm DD YYYY'."""
    return (
        f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )


def format_user(user: UserRecord) -> dict:
    return {"username": user.username, "_id": str(user.id)}


def format_exercise_response(user: UserRecord, exercise: ExerciseRecord) -> dict:
    """Response for a newly logged exercise: the user's id plus the exercise fields."""
    return {
        "_id": str(user.id),
        "username": user.username,
        "description": exercise.description,
        "duration": exercise.duration,
        "date": format_calendar_date(exercise.date),
    }


def format_log_entry(exercise: ExerciseRecord) -> dict:
    return {
        "description": exercise.description,
        "duration": exercise.duration,
        "date": format_calendar_date(exercise.date),
    }


def format_log_response(
    user: UserRecord, exercises: list[ExerciseRecord],
) -> dict:
    log = [format_log_entry(e) for e in exercises]
    return {
        "_id": str(user.id),
        "username": user.username,
        "count": len(log),
        "log": log,
    }
