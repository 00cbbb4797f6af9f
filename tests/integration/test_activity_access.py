from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
import sqlalchemy as sa

from fitness_db.activity import (
    ActivityShapeError,
    ProgramWorkoutActivity,
    TargetedWorkoutActivity,
    load_activity,
    record_activity,
    user_activities,
)
from fitness_db.seed import run_seeders
from fitness_db.tables import activity_history, targeted_workouts, users, workout_videos


T0 = datetime(2026, 1, 5, 8, 0, tzinfo=UTC)


@pytest.fixture()
def seeded(migrated_engine):
    run_seeders(migrated_engine, ["users", "programs", "workout_videos", "targeted_workouts"])
    with migrated_engine.connect() as conn:
        user_id = conn.execute(sa.select(users.c.id).order_by(users.c.phone_formatted).limit(1)).scalar_one()
        video = conn.execute(
            sa.select(workout_videos.c.id, workout_videos.c.program_id, workout_videos.c.day)
            .where(workout_videos.c.day == 3)
            .limit(1)
        ).one()
        targeted_id = conn.execute(
            sa.select(targeted_workouts.c.id).where(targeted_workouts.c.sort_order == 1)
        ).scalar_one()
    return migrated_engine, user_id, video, targeted_id


def test_record_and_list_both_variants_newest_first(seeded) -> None:
    engine, user_id, video, targeted_id = seeded
    with engine.begin() as conn:
        program_row_id = record_activity(
            conn,
            ProgramWorkoutActivity(
                user_id=user_id,
                program_id=video.program_id,
                workout_video_id=video.id,
                day=video.day,
                watched_duration=900,
                is_completed=True,
                created_at=T0,
            ),
        )
        targeted_row_id = record_activity(
            conn,
            TargetedWorkoutActivity(
                user_id=user_id,
                targeted_workout_id=targeted_id,
                watched_duration=300,
                details={"clips_completed": 10},
                created_at=T0 + timedelta(hours=1),
            ),
        )

    with engine.connect() as conn:
        activities = user_activities(conn, user_id)
        stored = conn.execute(
            sa.select(activity_history.c.program_id, activity_history.c.workout_video_id, activity_history.c.day)
            .where(activity_history.c.id == targeted_row_id)
        ).one()

    assert [a.id for a in activities] == [targeted_row_id, program_row_id]
    targeted, program = activities
    assert isinstance(targeted, TargetedWorkoutActivity)
    assert targeted.details == {"clips_completed": 10}
    assert isinstance(program, ProgramWorkoutActivity)
    assert program.workout_video_id == video.id
    assert tuple(stored) == (None, None, None)


def test_deleted_targeted_workout_leaves_unloadable_row(seeded) -> None:
    engine, user_id, _, targeted_id = seeded
    with engine.begin() as conn:
        row_id = record_activity(conn, TargetedWorkoutActivity(user_id=user_id, targeted_workout_id=targeted_id))
        conn.execute(targeted_workouts.delete().where(targeted_workouts.c.id == targeted_id))

    with engine.connect() as conn:
        row = conn.execute(sa.select(activity_history).where(activity_history.c.id == row_id)).one()
        assert row.targeted_workout_id is None
        with pytest.raises(ActivityShapeError):
            load_activity(row)
        with pytest.raises(ActivityShapeError):
            user_activities(conn, user_id)


def test_record_rejects_non_activity(seeded) -> None:
    engine, user_id, _, _ = seeded
    with engine.begin() as conn:
        with pytest.raises(TypeError):
            record_activity(conn, {"user_id": user_id})  # type: ignore[arg-type]


def test_activities_recorded_in_one_transaction_list_newest_first(seeded) -> None:
    engine, user_id, video, targeted_id = seeded
    with engine.begin() as conn:
        first = record_activity(
            conn,
            ProgramWorkoutActivity(
                user_id=user_id, program_id=video.program_id, workout_video_id=video.id, day=video.day
            ),
        )
        second = record_activity(conn, TargetedWorkoutActivity(user_id=user_id, targeted_workout_id=targeted_id))
        # now() would stamp both rows with the transaction start.
        assert conn.execute(sa.select(sa.func.count(sa.distinct(activity_history.c.created_at)))).scalar_one() == 2

    with engine.connect() as conn:
        assert [a.id for a in user_activities(conn, user_id)] == [second, first]
