from __future__ import annotations

from datetime import UTC, datetime
from types import SimpleNamespace
from uuid import UUID

import pytest

from fitness_db.assets import AssetPools
from fitness_db.seeders.targeted_workout_clips import (
    EXERCISE_LIBRARY,
    build_targeted_clip_rows,
    exercise_set,
    exercises_for,
)
from fitness_db.seeders.targeted_workouts import TARGETED_WORKOUT_SPECS, build_targeted_workout_rows


NOW = datetime(2026, 1, 5, 12, 0, tzinfo=UTC)


def _workout(**overrides):
    values = {
        "id": UUID("a7000000-0000-4000-8000-000000000001"),
        "title": "5-Minute Belly Fat Burner",
        "body_part": "abs",
        "gender_target": "female",
        "clip_count": 10,
        "calories_burned": 50,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


@pytest.mark.parametrize(
    ("gender", "body_part", "library"),
    [
        ("female", "abs", "women_abs"),
        ("female", "arms", "women_arms"),
        ("female", "glutes", "women_glutes"),
        ("female", "full_body", "cardio"),
        ("male", "chest", "men_chest"),
        ("male", "arms", "men_arms"),
        ("male", "full_body", "cardio"),
        ("both", "abs", "core"),
        ("both", "core", "core"),
        ("both", "full_body", "cardio"),
    ],
)
def test_exercise_library_selection(gender: str, body_part: str, library: str) -> None:
    assert exercise_set(gender, body_part) is EXERCISE_LIBRARY[library]


def test_exercises_cycle_when_clip_count_exceeds_library() -> None:
    picked = exercises_for("male", "chest", 10)
    chest = EXERCISE_LIBRARY["men_chest"]
    assert picked[8] == chest[0]
    assert picked[9] == chest[1]


def test_clip_rows_shape() -> None:
    rows = build_targeted_clip_rows([_workout()], AssetPools(), NOW)
    assert [r["clip_order"] for r in rows] == list(range(1, 11))
    first = rows[0]
    assert first["title"] == "Crunches - 1/10"
    assert first["description"] == "30-second crunches for your 5-minute belly fat burner"
    assert first["duration"] == 30
    assert first["calories_burned"] == 5
    assert first["tips"] == "Exhale as you crunch"
    assert first["original_video_asset_id"] is None


def test_calories_per_clip_rounds_down() -> None:
    rows = build_targeted_clip_rows([_workout(calories_burned=45, clip_count=8)], AssetPools(), NOW)
    assert {r["calories_burned"] for r in rows} == {5}


def test_female_clips_use_female_video_pool() -> None:
    pools = AssetPools()
    rows = build_targeted_clip_rows([_workout()], pools, NOW)
    assert {r["video_key"] for r in rows} <= set(pools.video_categories["female"])


def test_targeted_workout_rows() -> None:
    rows = build_targeted_workout_rows(AssetPools(), NOW)
    assert len(rows) == len(TARGETED_WORKOUT_SPECS) == 12
    assert [r["sort_order"] for r in rows] == list(range(1, 13))
    for row in rows:
        assert row["total_duration"] == row["clip_count"] * 30
    dumbbell = next(r for r in rows if r["title"] == "Dumbbell Arm Builder")
    assert dumbbell["equipment_required"] is True
    assert dumbbell["difficulty"] == "advanced"
