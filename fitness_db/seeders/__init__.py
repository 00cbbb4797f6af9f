"""
Demo data generators.

Each seeder module exposes ``seed(conn, ctx) -> int`` and ``unseed(conn) -> int``.
SEEDERS lists them in dependency order; undo runs the list reversed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from sqlalchemy.engine import Connection

from fitness_db.seeders import (
    nutrition,
    programs,
    subscriptions,
    targeted_workout_clips,
    targeted_workouts,
    users,
    workout_videos,
)
from fitness_db.seeders.context import SeedContext


@dataclass(frozen=True)
class Seeder:
    name: str
    seed: Callable[[Connection, SeedContext], int]
    unseed: Callable[[Connection], int]


def _seeder(name: str, module) -> Seeder:
    return Seeder(name=name, seed=module.seed, unseed=module.unseed)


SEEDERS: list[Seeder] = [
    _seeder("users", users),
    _seeder("subscriptions", subscriptions),
    _seeder("programs", programs),
    _seeder("workout_videos", workout_videos),
    _seeder("nutrition", nutrition),
    _seeder("targeted_workouts", targeted_workouts),
    _seeder("targeted_workout_clips", targeted_workout_clips),
]

SEEDER_NAMES = [s.name for s in SEEDERS]

__all__ = ["SEEDERS", "SEEDER_NAMES", "SeedContext", "Seeder"]
