"""Error Hierarchy — verifies codes, HTTP statuses and the REST envelope."""

from dataclasses import fields
from datetime import timezone

from exercise_tracker.core.errors import (
    DatabaseError,
    DuplicateResourceError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    ExerciseTrackerError,
    FieldValidationError,
    ResourceNotFoundError,
)


def test_validation_error_is_400():
    err = FieldValidationError("Username is required", "username")
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert err.to_response() == {
        "error": "Username is required", "code": "VALIDATION_ERROR",
    }


def test_not_found_message_hides_id():
    err = ResourceNotFoundError("User", "abc")
    assert err.http_status == 404
    assert err.message == "User not found"
    assert err.resource_id == "abc"


def test_duplicate_is_conflict():
    err = DuplicateResourceError("User", "username")
    assert err.http_status == 409
    assert err.to_response()["error"] == "Username already exists"


def test_database_error_is_critical_503():
    err = DatabaseError("boom", "insert")
    assert err.http_status == 503
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.message == "Database insert failed: boom"


def test_all_errors_share_base():
    for err in (
        FieldValidationError("x", "f"),
        ResourceNotFoundError("User", "1"),
        DuplicateResourceError("User", "username"),
        DatabaseError("x", "query"),
    ):
        assert isinstance(err, ExerciseTrackerError)
        assert set(err.to_response()) == {"error", "code"}


def test_categories_cover_every_concrete_error():
    assert {c.value for c in ErrorCategory} == {
        "validation", "resource_not_found", "conflict", "database",
    }
    assert {
        FieldValidationError("x", "f").category,
        ResourceNotFoundError("User", "1").category,
        DuplicateResourceError("User", "username").category,
        DatabaseError("x", "query").category,
    } == set(ErrorCategory)


def test_context_records_utc_timestamp():
    err = DatabaseError("x", "query")
    assert err.context.timestamp.tzinfo == timezone.utc
    assert {f.name for f in fields(ErrorContext)} == {"timestamp"}
