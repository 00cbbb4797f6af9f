"""
30-second clips for every seeded targeted workout.

Exercises come from a small library chosen by (gender_target, body_part) and
are cycled until the workout's clip_count is reached.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import sqlalchemy as sa
from sqlalchemy.engine import Connection

from fitness_db import assets
from fitness_db.assets import AssetPools
from fitness_db.seeders.context import SeedContext, delete_all, insert_rows, skip
from fitness_db.seeders.targeted_workouts import CLIP_SECONDS
from fitness_db.tables import targeted_workout_clips, targeted_workouts


@dataclass(frozen=True)
class Exercise:
    name: str
    instruction: str
    tip: str


EXERCISE_LIBRARY: dict[str, list[Exercise]] = {
    "women_abs": [
        Exercise("Crunches", "Lie on your back with knees bent, lift shoulders using abs", "Exhale as you crunch"),
        Exercise("Leg Raises", "Lie on back, keep legs straight and lift them up", "Keep lower back pressed to floor"),
        Exercise("Russian Twists", "Sit with knees bent, twist torso side to side", "Engage your core throughout"),
        Exercise("Mountain Climbers", "In plank position, alternate bringing knees to chest", "Keep hips level"),
        Exercise("Bicycle Crunches", "Lie on back, alternate elbow to opposite knee", "Go slow for better control"),
        Exercise("Plank", "Hold push-up position on forearms", "Keep body straight, don't sag"),
        Exercise("Flutter Kicks", "Lie on back, alternate kicking legs up and down", "Keep legs straight"),
        Exercise("Reverse Crunches", "Lie on back, bring knees toward chest", "Use lower abs to lift hips"),
        Exercise("Side Plank", "Balance on one forearm, lift hips", "Don't let hips drop"),
        Exercise("Toe Touches", "Lie on back, reach hands toward toes", "Keep neck relaxed"),
    ],
    "women_arms": [
        Exercise("Arm Circles", "Extend arms to sides, make small circles", "Keep shoulders relaxed"),
        Exercise("Tricep Dips", "Use chair or floor to dip body up and down", "Keep elbows pointing backward"),
        Exercise("Bicep Curls", "Make fists and curl arms as if holding weights", "Squeeze at the top"),
        Exercise("Push-ups", "Standard push-up or modified on knees", "Keep core tight"),
        Exercise("Shoulder Taps", "In plank, tap opposite shoulder", "Keep hips stable"),
        Exercise("Arm Pulses", "Extend arms, pulse up and down", "Small movements"),
        Exercise("Wrist Circles", "Rotate wrists in circles", "Good for flexibility"),
        Exercise("Overhead Press", "Press imaginary weights overhead", "Don't lock elbows"),
    ],
    "women_glutes": [
        Exercise("Glute Bridges", "Lie on back, lift hips upward", "Squeeze glutes at the top"),
        Exercise("Squats", "Stand, lower as if sitting in a chair", "Keep chest up"),
        Exercise("Lunges", "Step forward, lower until both knees are bent", "Front knee behind toes"),
        Exercise("Donkey Kicks", "On hands and knees, kick leg upward", "Squeeze glute at top"),
        Exercise("Fire Hydrants", "On hands and knees, lift leg to side", "Keep core engaged"),
        Exercise("Side Lunges", "Step to side, lower into lunge", "Keep other leg straight"),
        Exercise("Calf Raises", "Stand on toes, lift heels", "Slow and controlled"),
        Exercise("Sumo Squats", "Wide stance squats", "Point toes slightly outward"),
    ],
    "men_chest": [
        Exercise("Push-ups", "Standard push-up form", "Keep body in straight line"),
        Exercise("Wide Push-ups", "Hands wider than shoulders", "Targets outer chest"),
        Exercise("Decline Push-ups", "Feet elevated on chair", "Targets upper chest"),
        Exercise("Diamond Push-ups", "Hands close together in diamond shape", "Focus on triceps"),
        Exercise("Plyo Push-ups", "Push with enough force to lift hands", "Explosive movement"),
        Exercise("Archer Push-ups", "Shift weight from side to side", "Great for chest expansion"),
        Exercise("Incline Push-ups", "Hands on elevated surface", "Easier variation"),
        Exercise("Clap Push-ups", "Push up and clap", "Advanced, build power"),
    ],
    "men_arms": [
        Exercise("Bicep Curls", "Curl imaginary weights", "Squeeze bicep at top"),
        Exercise("Tricep Dips", "Use chair for dips", "Keep elbows pointing back"),
        Exercise("Hammer Curls", "Curl with palms facing each other", "Works forearms too"),
        Exercise("Tricep Extensions", "Extend arms overhead", "Keep elbows close to head"),
        Exercise("Concentration Curls", "One arm at a time, elbow on thigh", "Maximum bicep contraction"),
        Exercise("Skull Crushers", "Lie down, lower weight toward forehead", "Keep elbows stable"),
        Exercise("Reverse Curls", "Palms facing down, curl up", "Targets brachialis"),
        Exercise("Close-grip Push-ups", "Hands close together", "Focus on triceps"),
    ],
    "cardio": [
        Exercise("High Knees", "Run in place, bringing knees up high", "Pump arms for momentum"),
        Exercise("Jumping Jacks", "Jump feet out while raising arms", "Full range of motion"),
        Exercise("Burpees", "Squat, kick back, push-up, jump up", "Maintain good form"),
        Exercise("Mountain Climbers", "In plank, alternate knees to chest", "Fast but controlled"),
        Exercise("Jump Squats", "Squat then explode upward", "Land softly"),
        Exercise("Butt Kicks", "Run in place, kick heels to glutes", "Quick foot turnover"),
        Exercise("Skaters", "Leap side to side like speed skater", "Reach opposite hand to foot"),
        Exercise("Fast Feet", "Quick small steps in place", "Stay on balls of feet"),
    ],
    "core": [
        Exercise("Plank", "Hold push-up position on forearms", "Don't let hips sag"),
        Exercise("Side Plank", "Balance on one forearm", "Keep body in straight line"),
        Exercise("Dead Bug", "Lie on back, alternate arm and leg extensions", "Keep lower back flat"),
        Exercise("Bird Dog", "On hands and knees, extend opposite arm and leg", "Keep core tight"),
        Exercise("Superman", "Lie on stomach, lift arms and legs", "Squeeze glutes and back"),
        Exercise("Leg Raises", "Lie on back, lift legs up and down", "Control the descent"),
        Exercise("Russian Twists", "Sit with knees bent, twist torso", "Keep back straight"),
        Exercise("Bicycle Crunches", "Alternate elbow to opposite knee", "Slow and controlled"),
    ],
}

# (gender_target, body_part) -> library; anything not listed falls back to cardio.
LIBRARY_BY_TARGET: dict[tuple[str, str], str] = {
    ("female", "abs"): "women_abs",
    ("female", "arms"): "women_arms",
    ("female", "glutes"): "women_glutes",
    ("male", "chest"): "men_chest",
    ("male", "arms"): "men_arms",
    ("both", "abs"): "core",
    ("both", "core"): "core",
}


def exercise_set(gender_target: str, body_part: str) -> list[Exercise]:
    return EXERCISE_LIBRARY[LIBRARY_BY_TARGET.get((gender_target, body_part), "cardio")]


def exercises_for(gender_target: str, body_part: str, clip_count: int) -> list[Exercise]:
    library = exercise_set(gender_target, body_part)
    return [library[i % len(library)] for i in range(clip_count)]


def build_targeted_clip_rows(workout_rows: Sequence[Any], pools: AssetPools, now: datetime) -> list[dict]:
    """
    ``workout_rows`` needs id, title, body_part, gender_target, clip_count and
    calories_burned attributes.
    """
    rows: list[dict] = []
    for workout in workout_rows:
        count = workout.clip_count
        if count <= 0:
            continue
        calories_per_clip = (workout.calories_burned or 0) // count
        for i, exercise in enumerate(exercises_for(workout.gender_target, workout.body_part, count)):
            order = i + 1
            rows.append(
                {
                    "targeted_workout_id": workout.id,
                    "clip_order": order,
                    "title": f"{exercise.name} - {order}/{count}",
                    "description": f"30-second {exercise.name.lower()} for your {workout.title.lower()}",
                    "exercise": exercise.name,
                    "duration": CLIP_SECONDS,
                    "video_key": assets.clip_video_key(pools, workout.id, workout.gender_target, order),
                    "thumbnail_key": assets.clip_thumbnail_key(pools, workout.id, order),
                    "instructions": exercise.instruction,
                    "tips": exercise.tip,
                    "calories_burned": calories_per_clip,
                    "is_active": True,
                    "original_video_asset_id": None,
                    "thumbnail_asset_id": None,
                    "created_at": now,
                    "updated_at": now,
                }
            )
    return rows


def seed(conn: Connection, ctx: SeedContext) -> int:
    workout_rows = conn.execute(
        sa.select(
            targeted_workouts.c.id,
            targeted_workouts.c.title,
            targeted_workouts.c.body_part,
            targeted_workouts.c.gender_target,
            targeted_workouts.c.clip_count,
            targeted_workouts.c.calories_burned,
        ).order_by(targeted_workouts.c.sort_order)
    ).all()
    if not workout_rows:
        return skip(targeted_workout_clips, missing="targeted_workouts")
    return insert_rows(conn, targeted_workout_clips, build_targeted_clip_rows(workout_rows, ctx.pools, ctx.now))


def unseed(conn: Connection) -> int:
    return delete_all(conn, targeted_workout_clips)
