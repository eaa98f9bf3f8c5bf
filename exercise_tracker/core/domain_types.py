"""Domain Types — identities and immutable records shared by core and shell.

Invariants:
    - UserId, ExerciseId wrap UUIDs — never use bare strings for ids in domain logic
    - Records are frozen: nothing downstream of a repository mutates stored data
    - ExerciseRecord.duration is whole minutes, >= 0

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Records as frozen dataclasses over ORM objects: core never touches the session
      (ADR: functional core, imperative shell)
"""

from dataclasses import dataclass
from datetime import date
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
ExerciseId = NewType("ExerciseId", UUID)


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class UserRecord:
    """Stored user as seen by the core."""
    id: UserId
    username: str


@dataclass(frozen=True)
class ExerciseRecord:
    """Stored exercise as seen by the core."""
    id: ExerciseId
    user_id: UserId
    description: str
    duration: int
    date: date


@dataclass(frozen=True)
class LogQuery:
    """Filter for a user's exercise log: inclusive date bounds and an optional cap."""
    user_id: UserId
    date_from: date | None = None
    date_to: date | None = None
    limit: int | None = None
