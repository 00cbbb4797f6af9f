"""Closed value sets of the Postgres enum columns at head, keyed by their type names."""

from __future__ import annotations

from sqlalchemy.dialects import postgresql


DIFFICULTIES = ("beginner", "intermediate", "advanced")
GENDERS = ("male", "female", "both")
PLAN_TYPES = ("daily", "weekly", "monthly")
ADMIN_ROLES = ("super_admin", "content_manager", "video_editor", "support", "viewer")
ACTIVITY_TYPES = ("PROGRAM_WORKOUT", "TARGETED_WORKOUT")

ENUM_VALUES: dict[str, tuple[str, ...]] = {
    "enum_users_subscription_status": ("active", "inactive", "expired", "pending", "failed", "cancelled"),
    "enum_users_subscription_plan": PLAN_TYPES,
    "enum_users_gender_preference": GENDERS,
    "enum_users_fitness_level": DIFFICULTIES,
    "enum_admins_role": ADMIN_ROLES,
    "enum_programs_difficulty": DIFFICULTIES,
    "enum_programs_gender_target": GENDERS,
    "enum_programs_status": ("draft", "published", "archived"),
    "enum_workout_videos_difficulty": DIFFICULTIES,
    "enum_media_assets_asset_type": ("video", "image", "audio", "document"),
    "enum_media_assets_file_purpose": (
        "original",
        "thumbnail",
        "hls_manifest",
        "hls_segment",
        "dash_manifest",
        "preview",
        "transcoded",
    ),
    "enum_subscriptions_plan_type": PLAN_TYPES,
    "enum_subscriptions_status": ("active", "pending", "cancelled", "expired", "failed", "suspended"),
    "enum_subscriptions_channel": ("SMS", "USSD", "WEB", "APP"),
    "enum_subscriptions_telco": ("MTN", "AIRTEL", "NINEMOBILE"),
    "enum_admin_activity_logs_action_type": (
        "login",
        "logout",
        "create",
        "update",
        "delete",
        "upload",
        "download",
        "export",
        "import",
        "approve",
        "reject",
        "system_action",
    ),
    "enum_admin_invites_role": ADMIN_ROLES,
    "enum_admin_invites_status": ("pending", "accepted", "expired", "revoked"),
    "enum_nutrition_category": ("breakfast", "lunch", "dinner", "snack", "general", "recipe", "tip"),
    "enum_nutrition_difficulty": DIFFICULTIES,
    "enum_targeted_workouts_gender_target": GENDERS,
    "enum_targeted_workouts_difficulty": DIFFICULTIES,
    "enum_activity_history_activity_type": ACTIVITY_TYPES,
}


def pg_enum(name: str) -> postgresql.ENUM:
    """Reference an existing enum type; creation belongs to the migrations."""
    return postgresql.ENUM(*ENUM_VALUES[name], name=name, create_type=False)


def create_type_if_missing(name: str) -> str:
    """CREATE TYPE guarded by a pg_type lookup; runs server-side so it also renders in --sql mode."""
    labels = ", ".join(f"'{value}'" for value in ENUM_VALUES[name])
    return (
        "DO $$\n"
        "BEGIN\n"
        f"    IF NOT EXISTS (SELECT 1 FROM pg_type WHERE typname = '{name}') THEN\n"
        f"        CREATE TYPE {name} AS ENUM ({labels});\n"
        "    END IF;\n"
        "END $$"
    )
