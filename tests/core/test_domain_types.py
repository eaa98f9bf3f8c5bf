"""Domain Types — verifies identity wrappers and record immutability.

Tests:
    - NewType wrappers exist and are callable
    - Records are frozen and compare by value
    - LogQuery defaults to an unfiltered, uncapped query
"""

import dataclasses
from datetime import date
from uuid import uuid4

import pytest

from exercise_tracker.core.domain_types import (
    ExerciseId, ExerciseRecord, LogQuery, UserId, UserRecord,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert UserId(uid) == uid
    assert ExerciseId(uid) == uid


def test_user_record_is_frozen():
    user = UserRecord(id=UserId(uuid4()), username="alice")
    with pytest.raises(dataclasses.FrozenInstanceError):
        user.username = "bob"


def test_records_compare_by_value():
    uid = UserId(uuid4())
    eid = ExerciseId(uuid4())
    a = ExerciseRecord(eid, uid, "run", 30, date(2023, 1, 1))
    b = ExerciseRecord(eid, uid, "run", 30, date(2023, 1, 1))
    assert a == b


def test_log_query_defaults():
    query = LogQuery(user_id=UserId(uuid4()))
    assert query.date_from is None
    assert query.date_to is None
    assert query.limit is None
