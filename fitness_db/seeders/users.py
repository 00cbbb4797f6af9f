"""Four demo users: daily, weekly and monthly subscribers plus one inactive sign-up."""

from __future__ import annotations

from datetime import datetime, timedelta

from sqlalchemy.engine import Connection

from fitness_db.seeders.context import SeedContext, delete_all, insert_rows
from fitness_db.tables import users


def build_user_rows(now: datetime) -> list[dict]:
    def subscriber(
        phone: str,
        phone_formatted: str,
        name: str,
        email: str,
        plan: str,
        days_left: int,
        streak: int,
        hours_since_workout: int,
        workouts: int,
        minutes: int,
        gender: str,
        level: str,
        equipment: bool,
        device: str,
    ) -> dict:
        return {
            "phone": phone,
            "phone_formatted": phone_formatted,
            "name": name,
            "email": email,
            "subscription_status": "active",
            "subscription_plan": plan,
            "subscription_end_date": now + timedelta(days=days_left),
            "daily_streak": streak,
            "last_workout_date": now - timedelta(hours=hours_since_workout),
            "total_workouts": workouts,
            "total_minutes": minutes,
            "gender_preference": gender,
            "fitness_level": level,
            "equipment_available": equipment,
            "has_completed_welcome_video": True,
            "timezone": "Africa/Lagos",
            "metadata": {"source": "seed_data", "test_user": True, "device": device},
            "created_at": now,
            "updated_at": now,
        }

    return [
        subscriber(
            "07012345678", "2347012345678", "John Chukwu", "john.chukwu@example.com",
            "daily", 1, 3, 6, 7, 210, "male", "beginner", False, "android",
        ),
        subscriber(
            "08098765432", "2348098765432", "Jane Doe", "jane.doe@example.com",
            "weekly", 7, 5, 12, 12, 360, "female", "intermediate", True, "iphone",
        ),
        subscriber(
            "09055556666", "2349055556666", "Fatima Ibrahim", "fatima.ibrahim@example.com",
            "monthly", 30, 15, 24, 22, 660, "both", "advanced", True, "android",
        ),
        {
            # Signed up by phone; no profile, no subscription yet.
            "phone": "08123456789",
            "phone_formatted": "2348123456789",
            "name": None,
            "email": None,
            "subscription_status": "inactive",
            "subscription_plan": None,
            "subscription_end_date": None,
            "daily_streak": 0,
            "last_workout_date": None,
            "total_workouts": 0,
            "total_minutes": 0,
            "gender_preference": "both",
            "fitness_level": "beginner",
            "equipment_available": False,
            "has_completed_welcome_video": False,
            "timezone": "Africa/Lagos",
            "metadata": {"source": "seed_data", "test_user": True},
            "created_at": now,
            "updated_at": now,
        },
    ]


def seed(conn: Connection, ctx: SeedContext) -> int:
    return insert_rows(conn, users, build_user_rows(ctx.now))


def unseed(conn: Connection) -> int:
    return delete_all(conn, users)
