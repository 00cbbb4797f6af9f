from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.engine import Connection

from fitness_db.seeders.context import SeedContext, delete_all, insert_rows
from fitness_db.tables import programs


@dataclass(frozen=True)
class ProgramSpec:
    slug: str
    name: str
    description: str
    duration: int
    difficulty: str
    gender_target: str
    equipment_required: bool
    cover_image_url: str
    enrollment_count: int


PROGRAM_SPECS: list[ProgramSpec] = [
    # 30-day bodyweight starters.
    ProgramSpec(
        slug="30-day-beginner-men",
        name="30 Day Beginner Challenge for Men",
        description=(
            "Perfect for men starting their fitness journey. No equipment needed, just 20-30 minutes daily "
            "to build strength, lose fat, and gain confidence."
        ),
        duration=30,
        difficulty="beginner",
        gender_target="male",
        equipment_required=False,
        cover_image_url="cover/handsome-black-man-is-engaged-gym.jpg",
        enrollment_count=1850,
    ),
    ProgramSpec(
        slug="30-day-beginner-women",
        name="30 Day Beginner Challenge for Women",
        description=(
            "Perfect for women starting their fitness journey. Simple, effective workouts to tone your body, "
            "burn belly fat, and build confidence at home."
        ),
        duration=30,
        difficulty="beginner",
        gender_target="female",
        equipment_required=False,
        cover_image_url="cover/beautiful-black-girl-is-engaged-gym.jpg",
        enrollment_count=2350,
    ),
    # 30-day dumbbell programs.
    ProgramSpec(
        slug="30-day-dumbbell-men",
        name="30 Day Dumbbell Strength for Men",
        description=(
            "Take your fitness to the next level with dumbbells. Build serious muscle, strength, and definition "
            "with this progressive 30-day program."
        ),
        duration=30,
        difficulty="intermediate",
        gender_target="male",
        equipment_required=True,
        cover_image_url="cover/side-view-man-training-with-dumbbells.jpg",
        enrollment_count=940,
    ),
    ProgramSpec(
        slug="30-day-dumbbell-women",
        name="30 Day Dumbbell Tone for Women",
        description=(
            "Sculpt and tone your entire body using dumbbells. Perfect for women who want to build lean muscle, "
            "boost metabolism, and get stronger."
        ),
        duration=30,
        difficulty="intermediate",
        gender_target="female",
        equipment_required=True,
        cover_image_url="cover/full-shot-woman-training-outdoors.jpg",
        enrollment_count=1120,
    ),
    ProgramSpec(
        slug="15-day-fat-loss-men",
        name="15 Day Fat Loss for Men",
        description=(
            "High-intensity workouts designed specifically for men to maximize fat burning, boost metabolism, "
            "and reveal muscle definition."
        ),
        duration=15,
        difficulty="intermediate",
        gender_target="male",
        equipment_required=False,
        cover_image_url="cover/athletic-man-practicing-gymnastics-keep-fit.jpg",
        enrollment_count=1280,
    ),
    ProgramSpec(
        slug="21-day-toning-women",
        name="21 Day Toning Challenge for Women",
        description=(
            "Target belly fat, tone arms, and sculpt curves with this 21-day program designed specifically for "
            "women. See results in just 3 weeks!"
        ),
        duration=21,
        difficulty="beginner",
        gender_target="female",
        equipment_required=False,
        cover_image_url="cover/plus-size-person-working-out.jpg",
        enrollment_count=1950,
    ),
    ProgramSpec(
        slug="21-day-upper-body-men",
        name="21 Day Upper Body Builder for Men",
        description=(
            "Focus on chest, arms, back, and shoulders. Build definition and strength with targeted workouts "
            "designed for men."
        ),
        duration=21,
        difficulty="intermediate",
        gender_target="male",
        equipment_required=False,
        cover_image_url="cover/full-shot-man-doing-exercise-gym.jpg",
        enrollment_count=870,
    ),
    ProgramSpec(
        slug="14-day-curve-sculptor",
        name="14 Day Curve Sculptor for Women",
        description=(
            "Shape your glutes, tone your legs, and create beautiful curves with this targeted 14-day program "
            "designed for women."
        ),
        duration=14,
        difficulty="beginner",
        gender_target="female",
        equipment_required=False,
        cover_image_url="cover/full-shot-woman-training-outdoors.jpg",
        enrollment_count=1420,
    ),
    ProgramSpec(
        slug="7-day-abs-challenge",
        name="7 Day Abs Challenge",
        description=(
            "Get visible abs in just 7 days! Intense core workouts to strengthen your abs, obliques, and lower back."
        ),
        duration=7,
        difficulty="intermediate",
        gender_target="both",
        equipment_required=False,
        cover_image_url="cover/side-view-athlete-holding-weights-with-copy-space.jpg",
        enrollment_count=3100,
    ),
    ProgramSpec(
        slug="30-day-advanced-strength",
        name="30 Day Advanced Strength",
        description=(
            "For experienced fitness enthusiasts. Progressive overload training to build maximum strength and muscle."
        ),
        duration=30,
        difficulty="advanced",
        gender_target="both",
        equipment_required=True,
        cover_image_url="cover/portrait-athletic-man-doing-box-jump-exercise-crossfit-sport-healt.jpg",
        enrollment_count=520,
    ),
]


def build_program_rows(now: datetime) -> list[dict]:
    return [
        {
            "slug": p.slug,
            "name": p.name,
            "description": p.description,
            "duration": p.duration,
            "difficulty": p.difficulty,
            "gender_target": p.gender_target,
            "equipment_required": p.equipment_required,
            "cover_image_url": p.cover_image_url,
            "status": "published",
            "is_active": True,
            "sort_order": i + 1,
            "enrollment_count": p.enrollment_count,
            "created_at": now,
            "updated_at": now,
        }
        for i, p in enumerate(PROGRAM_SPECS)
    ]


def seed(conn: Connection, ctx: SeedContext) -> int:
    return insert_rows(conn, programs, build_program_rows(ctx.now))


def unseed(conn: Connection) -> int:
    return delete_all(conn, programs)
