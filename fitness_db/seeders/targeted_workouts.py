"""Twelve 3-5 minute targeted workouts. Covers are chosen from the gender pool by sort order."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.engine import Connection

from fitness_db.assets import AssetPools, cover_key
from fitness_db.seeders.context import SeedContext, delete_all, insert_rows
from fitness_db.tables import targeted_workouts


CLIP_SECONDS = 30


@dataclass(frozen=True)
class TargetedWorkoutSpec:
    title: str
    description: str
    body_part: str
    gender_target: str
    category: str
    difficulty: str
    calories_burned: int
    clip_count: int
    focus_areas: list[str]
    tags: list[str]
    view_count: int
    rating: float
    equipment_required: bool = False


TARGETED_WORKOUT_SPECS: list[TargetedWorkoutSpec] = [
    # Women: belly fat, toning, curves.
    TargetedWorkoutSpec(
        "5-Minute Belly Fat Burner", "Target stubborn belly fat with 30-second high-intensity intervals",
        "abs", "female", "belly_fat", "beginner", 50, 10,
        ["lower abs", "obliques", "core"], ["belly fat", "abs", "core", "women", "quick"], 2150, 4.8,
    ),
    TargetedWorkoutSpec(
        "Arm Toning in 3 Minutes", "Sculpt and tone arms without equipment",
        "arms", "female", "toning", "beginner", 30, 6,
        ["biceps", "triceps", "toning"], ["arms", "toning", "women", "no equipment"], 1850, 4.6,
    ),
    TargetedWorkoutSpec(
        "Glute & Leg Sculptor", "Build curves and tone lower body in 4 minutes",
        "glutes", "female", "curves", "beginner", 45, 8,
        ["glutes", "thighs", "curves"], ["glutes", "legs", "curves", "women", "toning"], 1920, 4.7,
    ),
    TargetedWorkoutSpec(
        "Full Body Toning", "Complete body toning workout for women",
        "full_body", "female", "toning", "intermediate", 55, 10,
        ["total body", "toning", "lean muscle"], ["full body", "toning", "women", "complete"], 1350, 4.9,
    ),
    # Men: strength, fat loss, chest and arms.
    TargetedWorkoutSpec(
        "Chest Builder in 3 Minutes", "Build chest strength with push-up variations",
        "chest", "male", "strength", "intermediate", 40, 6,
        ["chest", "pectorals", "strength"], ["chest", "pushups", "strength", "men"], 1450, 4.7,
    ),
    TargetedWorkoutSpec(
        "Arm Strength Blast", "Build arm muscle with intense 30-second intervals",
        "arms", "male", "strength", "intermediate", 50, 8,
        ["biceps", "triceps", "forearms"], ["arms", "biceps", "triceps", "strength", "men"], 1280, 4.6,
    ),
    TargetedWorkoutSpec(
        "Fat Burn Express", "High-intensity fat burning workout for men",
        "full_body", "male", "fat_loss", "intermediate", 60, 10,
        ["fat burning", "cardio", "metabolism"], ["fat loss", "cardio", "hiit", "men", "burn"], 1650, 4.5,
    ),
    TargetedWorkoutSpec(
        "Dumbbell Arm Builder", "Advanced arm workout using dumbbells",
        "arms", "male", "strength", "advanced", 55, 8,
        ["bicep growth", "tricep definition"], ["dumbbell", "weights", "advanced", "men", "gym"], 850, 4.8,
        equipment_required=True,
    ),
    # Everyone.
    TargetedWorkoutSpec(
        "Quick Cardio Blast", "Get your heart pumping in 3 minutes",
        "full_body", "both", "cardio", "beginner", 45, 6,
        ["cardiovascular", "endurance"], ["cardio", "hiit", "quick", "energy", "fat burn"], 2100, 4.5,
    ),
    TargetedWorkoutSpec(
        "Core Strength in 4 Minutes", "Build strong abs and core for better posture",
        "abs", "both", "strength", "intermediate", 40, 8,
        ["core stability", "abs", "posture"], ["core", "abs", "stability", "posture"], 1750, 4.7,
    ),
    TargetedWorkoutSpec(
        "Office Worker Relief", "Counteract sitting with 3-minute mobility workout",
        "full_body", "both", "flexibility", "beginner", 25, 6,
        ["mobility", "posture", "back pain"], ["office", "desk job", "posture", "mobility", "relief"], 1200, 4.8,
    ),
    TargetedWorkoutSpec(
        "Morning Energy Boost", "Energize your day with this 4-minute routine",
        "full_body", "both", "cardio", "beginner", 35, 8,
        ["energy", "mood", "metabolism"], ["morning", "energy", "wake up", "quick"], 1950, 4.6,
    ),
]


def build_targeted_workout_rows(pools: AssetPools, now: datetime) -> list[dict]:
    rows = []
    for i, workout in enumerate(TARGETED_WORKOUT_SPECS):
        sort_order = i + 1
        rows.append(
            {
                "title": workout.title,
                "description": workout.description,
                "total_duration": workout.clip_count * CLIP_SECONDS,
                "body_part": workout.body_part,
                "gender_target": workout.gender_target,
                "category": workout.category,
                "difficulty": workout.difficulty,
                "calories_burned": workout.calories_burned,
                "clip_count": workout.clip_count,
                "thumbnail_key": cover_key(pools, workout.gender_target, sort_order),
                "equipment_required": workout.equipment_required,
                "focus_areas": list(workout.focus_areas),
                "tags": list(workout.tags),
                "view_count": workout.view_count,
                "rating": workout.rating,
                "is_active": True,
                "sort_order": sort_order,
                "created_at": now,
                "updated_at": now,
            }
        )
    return rows


def seed(conn: Connection, ctx: SeedContext) -> int:
    return insert_rows(conn, targeted_workouts, build_targeted_workout_rows(ctx.pools, ctx.now))


def unseed(conn: Connection) -> int:
    return delete_all(conn, targeted_workouts)
