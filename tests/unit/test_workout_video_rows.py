from __future__ import annotations

from datetime import UTC, datetime
from types import SimpleNamespace
from uuid import UUID

from fitness_db.assets import AssetPools
from fitness_db.seeders.programs import PROGRAM_SPECS, build_program_rows
from fitness_db.seeders.workout_videos import (
    build_workout_video_rows,
    day_calories,
    day_difficulty,
    day_duration,
    day_muscle_groups,
    day_title,
)


NOW = datetime(2026, 1, 5, 12, 0, tzinfo=UTC)


def _program(**overrides):
    values = {
        "id": UUID("3f000000-0000-4000-8000-000000000001"),
        "slug": "7-day-abs-challenge",
        "name": "7 Day Abs Challenge",
        "description": "Get visible abs in just 7 days!",
        "duration": 7,
        "gender_target": "both",
        "equipment_required": False,
        "difficulty": "intermediate",
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_program_rows_are_published_and_ordered() -> None:
    rows = build_program_rows(NOW)
    assert len(rows) == len(PROGRAM_SPECS) == 10
    assert [r["sort_order"] for r in rows] == list(range(1, 11))
    assert {r["status"] for r in rows} == {"published"}
    assert len({r["slug"] for r in rows}) == 10


def test_one_welcome_video_plus_one_per_day() -> None:
    rows = build_workout_video_rows([_program()], AssetPools(), NOW)
    assert len(rows) == 8
    welcome = rows[0]
    assert welcome["day"] == 0
    assert welcome["is_welcome_video"] is True
    assert welcome["calories_burned"] == 0
    assert welcome["title"] == "Welcome to 7 Day Abs Challenge"
    assert [r["day"] for r in rows[1:]] == list(range(1, 8))
    assert all(r["is_welcome_video"] is False for r in rows[1:])


def test_days_without_hand_written_title_use_generic_title() -> None:
    assert day_title("7-day-abs-challenge", "7 Day Abs Challenge", 3) == "Day 3: 7 Day Abs Challenge Workout"
    assert day_title("30-day-beginner-men", "ignored", 1) == "Day 1: Full Body Strength Basics"


def test_difficulty_escalates_late_in_program() -> None:
    assert day_difficulty("beginner", 21, 30) == "beginner"
    assert day_difficulty("beginner", 22, 30) == "intermediate"
    assert day_difficulty("intermediate", 15, 30) == "intermediate"
    assert day_difficulty("intermediate", 16, 30) == "advanced"
    assert day_difficulty("advanced", 30, 30) == "advanced"
    assert day_difficulty(None, 1, 30) == "beginner"


def test_duration_calories_and_muscle_groups() -> None:
    assert day_duration(False, 1) == 1510
    assert day_duration(True, 1) == 1810
    assert day_calories("male", True, 2) == 310
    assert day_calories("female", False, 2) == 210
    assert day_muscle_groups("male", 3) == ["chest", "arms", "shoulders"]
    assert day_muscle_groups("female", 4) == ["arms", "back", "toning"]


def test_rows_are_deterministic_for_same_program_id() -> None:
    pools = AssetPools()
    a = build_workout_video_rows([_program()], pools, NOW)
    b = build_workout_video_rows([_program()], pools, NOW)
    assert [(r["video_key"], r["thumbnail_key"]) for r in a] == [(r["video_key"], r["thumbnail_key"]) for r in b]


def test_description_truncates_program_blurb() -> None:
    program = _program(description="x" * 150, duration=1)
    rows = build_workout_video_rows([program], AssetPools(), NOW)
    assert rows[1]["description"] == f"Day 1 of 1: {'x' * 100}..."
