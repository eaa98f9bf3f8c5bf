"""Users — create and list users.

Invariants:
    - POST accepts form or JSON bodies with a `username` field
    - Success returns 200 with {username, _id}; failures use the global error envelope
    - GET returns every user, no pagination

Design Decisions:
    - 200 (not 201) on create: existing clients check the body, not the status
"""

from fastapi import APIRouter, Depends

from exercise_tracker.api.dependencies import get_user_repository
from exercise_tracker.api.request_body import read_payload
from exercise_tracker.db.user_repository import SqlUserRepository
from exercise_tracker.schemas.user import UserResponse
from exercise_tracker.services import user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
async def create_user(
    payload: dict = Depends(read_payload),
    users: SqlUserRepository = Depends(get_user_repository),
):
    """Create a user with a unique username."""
    return await user_service.create_user(users, payload.get("username"))


@router.get("", response_model=list[UserResponse])
async def list_users(
    users: SqlUserRepository = Depends(get_user_repository),
):
    """List all users."""
    return await user_service.list_users(users)
