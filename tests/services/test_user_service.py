"""User Service — create/list semantics over the SQL repository."""

import pytest

from exercise_tracker.core.errors import DuplicateResourceError, FieldValidationError
from exercise_tracker.services.user_service import create_user, list_users


async def test_create_user_returns_username_and_fresh_id(users):
    first = await create_user(users, "alice")
    second = await create_user(users, "bob")
    assert first["username"] == "alice"
    assert first["_id"] and second["_id"]
    assert first["_id"] != second["_id"]


async def test_create_user_requires_username(users):
    with pytest.raises(FieldValidationError):
        await create_user(users, None)
    assert await list_users(users) == []


async def test_create_user_duplicate_leaves_single_user(users):
    await create_user(users, "alice")
    with pytest.raises(DuplicateResourceError):
        await create_user(users, "alice")

    listed = await list_users(users)
    assert [u["username"] for u in listed] == ["alice"]


async def test_list_users_returns_all_created(users):
    created = [await create_user(users, f"user{i}") for i in range(4)]
    listed = await list_users(users)
    assert len(listed) == 4
    assert {(u["username"], u["_id"]) for u in listed} == {
        (u["username"], u["_id"]) for u in created
    }
