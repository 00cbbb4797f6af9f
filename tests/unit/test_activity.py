from __future__ import annotations

from uuid import uuid4

import pytest

from fitness_db.activity import (
    ActivityShapeError,
    ProgramWorkoutActivity,
    TargetedWorkoutActivity,
    load_activity,
)


def _row(**values):
    base = {
        "id": uuid4(),
        "user_id": uuid4(),
        "program_id": None,
        "workout_video_id": None,
        "targeted_workout_id": None,
        "day": None,
        "watched_duration": 120,
        "is_completed": True,
        "completed_at": None,
        "rating": 5,
        "details": None,
        "created_at": None,
    }
    base.update(values)
    return base


def test_load_program_workout() -> None:
    program_id, video_id = uuid4(), uuid4()
    activity = load_activity(
        _row(activity_type="PROGRAM_WORKOUT", program_id=program_id, workout_video_id=video_id, day=3)
    )
    assert isinstance(activity, ProgramWorkoutActivity)
    assert activity.program_id == program_id
    assert activity.day == 3
    assert activity.activity_type == "PROGRAM_WORKOUT"


def test_load_targeted_workout() -> None:
    targeted_id = uuid4()
    activity = load_activity(_row(activity_type="TARGETED_WORKOUT", targeted_workout_id=targeted_id))
    assert isinstance(activity, TargetedWorkoutActivity)
    assert activity.targeted_workout_id == targeted_id


def test_targeted_row_with_nulled_reference_is_rejected() -> None:
    with pytest.raises(ActivityShapeError, match="needs targeted_workout_id"):
        load_activity(_row(activity_type="TARGETED_WORKOUT"))


def test_row_with_both_references_is_rejected() -> None:
    row = _row(
        activity_type="PROGRAM_WORKOUT",
        program_id=uuid4(),
        workout_video_id=uuid4(),
        targeted_workout_id=uuid4(),
        day=1,
    )
    with pytest.raises(ActivityShapeError):
        load_activity(row)


def test_unknown_activity_type_is_rejected() -> None:
    with pytest.raises(ActivityShapeError, match="unknown activity_type"):
        load_activity(_row(activity_type="YOGA"))


def test_shape_error_is_a_value_error() -> None:
    assert issubclass(ActivityShapeError, ValueError)
