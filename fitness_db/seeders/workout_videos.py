"""
Daily workout videos for every seeded program.

Each program gets a day-0 welcome video plus one video per day of its
duration. Asset keys come from fitness_db.assets, so rows for a given program
id always reference the same files.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any

import sqlalchemy as sa
from sqlalchemy.engine import Connection

from fitness_db import assets
from fitness_db.assets import AssetPools
from fitness_db.seeders.context import SeedContext, delete_all, insert_rows, skip
from fitness_db.seeders.workout_titles import WORKOUT_TITLES
from fitness_db.tables import programs, workout_videos


WELCOME_DURATION_SECONDS = 180

GENDER_LABELS = {"male": "Men", "female": "Women"}

WELCOME_MUSCLE_GROUPS = {
    "male": ["introduction", "motivation", "strength"],
    "female": ["introduction", "motivation", "toning"],
}

# Indexed by day % 3.
MALE_ROTATION = [["chest", "arms", "shoulders"], ["legs", "glutes", "core"], ["back", "arms", "full_body"]]
OTHER_ROTATION = [["abs", "core", "waist"], ["arms", "back", "toning"], ["legs", "glutes", "curves"]]


def day_title(slug: str, program_name: str, day: int) -> str:
    titles = WORKOUT_TITLES.get(slug, [])
    if day - 1 < len(titles):
        return titles[day - 1]
    return f"Day {day}: {program_name} Workout"


def day_difficulty(difficulty: str | None, day: int, duration: int) -> str:
    difficulty = difficulty or "beginner"
    if difficulty == "beginner" and day > duration * 0.7:
        return "intermediate"
    if difficulty == "intermediate" and day > duration * 0.5:
        return "advanced"
    return difficulty


def day_duration(equipment_required: bool, day: int) -> int:
    # Seconds: 25 minutes bodyweight, 30 with equipment, growing a little each day.
    base = 1800 if equipment_required else 1500
    return base + day * 10


def day_calories(gender_target: str, equipment_required: bool, day: int) -> int:
    calories = 200
    if gender_target == "male":
        calories += 50
    if equipment_required:
        calories += 50
    return calories + day * 5


def day_muscle_groups(gender_target: str, day: int) -> list[str]:
    rotation = MALE_ROTATION if gender_target == "male" else OTHER_ROTATION
    return list(rotation[day % 3])


def _video_row(program: Any, now: datetime, **values: Any) -> dict:
    row = {
        "program_id": program.id,
        "is_active": True,
        "has_adaptive_streaming": False,
        "streaming_manifest_key": None,
        "original_video_asset_id": None,
        "thumbnail_asset_id": None,
        "created_at": now,
        "updated_at": now,
    }
    row.update(values)
    return row


def build_workout_video_rows(program_rows: Sequence[Any], pools: AssetPools, now: datetime) -> list[dict]:
    """
    Pure row generation. ``program_rows`` needs id, slug, name, description,
    duration, gender_target, equipment_required and difficulty attributes.
    """
    rows: list[dict] = []
    for program in program_rows:
        gender = program.gender_target
        rows.append(
            _video_row(
                program,
                now,
                day=0,
                title=f"Welcome to {program.name}",
                description=(
                    f"Your {program.duration}-day journey to becoming fitter and stronger. "
                    f"Designed specifically for {GENDER_LABELS.get(gender, 'Everyone')}."
                ),
                video_key=assets.welcome_video_key(pools, program.id),
                thumbnail_key=assets.welcome_thumbnail_key(pools, program.id),
                duration=WELCOME_DURATION_SECONDS,
                difficulty=program.difficulty or "beginner",
                calories_burned=0,
                is_welcome_video=True,
                sort_order=0,
                muscle_groups=list(WELCOME_MUSCLE_GROUPS.get(gender, ["introduction", "motivation"])),
            )
        )

        blurb = (program.description or "")[:100] or "Daily workout"
        for day in range(1, program.duration + 1):
            rows.append(
                _video_row(
                    program,
                    now,
                    day=day,
                    title=day_title(program.slug, program.name, day),
                    description=f"Day {day} of {program.duration}: {blurb}...",
                    video_key=assets.program_video_key(pools, program.id, gender, day),
                    thumbnail_key=assets.program_thumbnail_key(pools, program.id, day),
                    duration=day_duration(program.equipment_required, day),
                    difficulty=day_difficulty(program.difficulty, day, program.duration),
                    calories_burned=day_calories(gender, program.equipment_required, day),
                    is_welcome_video=False,
                    sort_order=day,
                    muscle_groups=day_muscle_groups(gender, day),
                )
            )
    return rows


def seed(conn: Connection, ctx: SeedContext) -> int:
    program_rows = conn.execute(
        sa.select(
            programs.c.id,
            programs.c.slug,
            programs.c.name,
            programs.c.description,
            programs.c.duration,
            programs.c.gender_target,
            programs.c.equipment_required,
            programs.c.difficulty,
        ).order_by(programs.c.sort_order)
    ).all()
    if not program_rows:
        return skip(workout_videos, missing="programs")
    return insert_rows(conn, workout_videos, build_workout_video_rows(program_rows, ctx.pools, ctx.now))


def unseed(conn: Connection) -> int:
    return delete_all(conn, workout_videos)
