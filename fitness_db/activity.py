"""
Typed access to activity_history.

A row is either a program-day workout (program_id + workout_video_id) or a
targeted workout (targeted_workout_id), tagged by activity_type. The table
allows both shapes through nullable columns, so the shape is checked here on
the way in and on the way out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

import sqlalchemy as sa
from sqlalchemy.engine import Connection

from fitness_db.tables import activity_history


PROGRAM_WORKOUT = "PROGRAM_WORKOUT"
TARGETED_WORKOUT = "TARGETED_WORKOUT"


class ActivityShapeError(ValueError):
    pass


@dataclass(frozen=True)
class ProgramWorkoutActivity:
    user_id: UUID
    program_id: UUID
    workout_video_id: UUID
    day: int
    watched_duration: int = 0
    is_completed: bool = False
    completed_at: datetime | None = None
    rating: int | None = None
    details: dict[str, Any] | None = None
    id: UUID | None = None
    created_at: datetime | None = None
    activity_type: str = field(default=PROGRAM_WORKOUT, init=False)


@dataclass(frozen=True)
class TargetedWorkoutActivity:
    user_id: UUID
    targeted_workout_id: UUID
    watched_duration: int = 0
    is_completed: bool = False
    completed_at: datetime | None = None
    rating: int | None = None
    details: dict[str, Any] | None = None
    id: UUID | None = None
    created_at: datetime | None = None
    activity_type: str = field(default=TARGETED_WORKOUT, init=False)


Activity = ProgramWorkoutActivity | TargetedWorkoutActivity


def _values(activity: Activity) -> dict[str, Any]:
    if not isinstance(activity, (ProgramWorkoutActivity, TargetedWorkoutActivity)):
        raise TypeError(f"not an activity: {type(activity).__name__}")
    values: dict[str, Any] = {
        "user_id": activity.user_id,
        "activity_type": activity.activity_type,
        "watched_duration": activity.watched_duration,
        "is_completed": activity.is_completed,
        "completed_at": activity.completed_at,
        "rating": activity.rating,
        "details": activity.details,
    }
    if isinstance(activity, ProgramWorkoutActivity):
        values.update(
            program_id=activity.program_id,
            workout_video_id=activity.workout_video_id,
            day=activity.day,
            targeted_workout_id=None,
        )
    else:
        values.update(
            targeted_workout_id=activity.targeted_workout_id,
            program_id=None,
            workout_video_id=None,
            day=None,
        )
    # Wall clock, not transaction start, so rows recorded in one transaction still order.
    created_at = activity.created_at if activity.created_at is not None else sa.func.clock_timestamp()
    values["created_at"] = created_at
    values["updated_at"] = created_at
    return values


def record_activity(conn: Connection, activity: Activity) -> UUID:
    """Insert one activity_history row and return its id."""
    # Round-trip the values through the loader so a bad variant never reaches the table.
    values = _values(activity)
    load_activity(values)
    return conn.execute(activity_history.insert().values(**values).returning(activity_history.c.id)).scalar_one()


def load_activity(row: Any) -> Activity:
    """
    Convert a stored row (Row, RowMapping or plain dict) back into its variant.

    Raises ActivityShapeError when the tag and the populated foreign keys
    disagree, which happens when a targeted workout is deleted and SET NULL
    clears the reference.
    """
    data = dict(row._mapping) if hasattr(row, "_mapping") else dict(row)
    kind = data.get("activity_type")
    program_id = data.get("program_id")
    video_id = data.get("workout_video_id")
    targeted_id = data.get("targeted_workout_id")

    common = {
        "user_id": data["user_id"],
        "watched_duration": data.get("watched_duration") or 0,
        "is_completed": bool(data.get("is_completed")),
        "completed_at": data.get("completed_at"),
        "rating": data.get("rating"),
        "details": data.get("details"),
        "id": data.get("id"),
        "created_at": data.get("created_at"),
    }

    if kind == PROGRAM_WORKOUT:
        if program_id is None or video_id is None or targeted_id is not None:
            raise ActivityShapeError(
                f"program workout row {data.get('id')} needs program_id and workout_video_id and no targeted_workout_id"
            )
        day = data.get("day")
        if day is None:
            raise ActivityShapeError(f"program workout row {data.get('id')} has no day")
        return ProgramWorkoutActivity(program_id=program_id, workout_video_id=video_id, day=day, **common)

    if kind == TARGETED_WORKOUT:
        if targeted_id is None or program_id is not None or video_id is not None:
            raise ActivityShapeError(
                f"targeted workout row {data.get('id')} needs targeted_workout_id and no program references"
            )
        return TargetedWorkoutActivity(targeted_workout_id=targeted_id, **common)

    raise ActivityShapeError(f"unknown activity_type {kind!r}")


def user_activities(conn: Connection, user_id: UUID) -> list[Activity]:
    rows = conn.execute(
        sa.select(activity_history)
        .where(activity_history.c.user_id == user_id)
        .order_by(activity_history.c.created_at.desc(), activity_history.c.id)
    ).all()
    return [load_activity(r) for r in rows]
