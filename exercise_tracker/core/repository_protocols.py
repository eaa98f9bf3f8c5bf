"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Repositories return frozen records, never ORM objects
    - UserRepository.create raises DuplicateResourceError on username collision:
      the store's unique constraint is the only uniqueness check
"""

from datetime import date
from typing import Protocol

from exercise_tracker.core.domain_types import (
    ExerciseRecord, LogQuery, UserId, UserRecord,
)


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def create(self, username: str) -> UserRecord: ...
    async def get_by_id(self, user_id: UserId) -> UserRecord | None: ...
    async def list_all(self) -> list[UserRecord]: ...


class ExerciseRepository(Protocol):
    """Contract for exercise persistence — implemented by shell."""
    async def create(
        self, user_id: UserId, description: str, duration: int, on: date,
    ) -> ExerciseRecord: ...
    async def find_for_user(self, query: LogQuery) -> list[ExerciseRecord]: ...
