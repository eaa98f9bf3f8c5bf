"""User Service — create and list users.

Invariants:
    - Username validated before any store access
    - Uniqueness is the store's job: DuplicateResourceError propagates unchanged
    - Returns wire-shaped dicts ({username, _id}) built by core/format_log.py

Design Decisions:
    - Module-level async functions over a class: no state to hold besides the
      injected repository (ADR: impureim sandwich, repository passed in)
"""

import logging

from exercise_tracker.core.coerce_input import coerce_username
from exercise_tracker.core.format_log import format_user
from exercise_tracker.core.repository_protocols import UserRepository

logger = logging.getLogger(__name__)


async def create_user(users: UserRepository, username: object) -> dict:
    """Create a user. Raises FieldValidationError or DuplicateResourceError."""
    name = coerce_username(username)
    user = await users.create(name)
    logger.info("User created", extra={"user_id": str(user.id)})
    return format_user(user)


async def list_users(users: UserRepository) -> list[dict]:
    return [format_user(u) for u in await users.list_all()]
