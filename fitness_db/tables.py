"""
SQLAlchemy Core view of the schema at migration head.

Seeders and the activity access layer write through these tables. They carry no
foreign keys or indexes; the Alembic revisions own all DDL.
"""

from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, UUID

from fitness_db.enums import pg_enum


metadata = sa.MetaData()


def _id() -> sa.Column:
    return sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("uuid_generate_v4()"))


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


users = sa.Table(
    "users",
    metadata,
    _id(),
    sa.Column("phone", sa.String(20), nullable=False),
    sa.Column("phone_formatted", sa.String(20), nullable=False),
    sa.Column("name", sa.String(100), nullable=True),
    sa.Column("email", sa.String(100), nullable=True),
    sa.Column("subscription_status", pg_enum("enum_users_subscription_status"), nullable=False),
    sa.Column("subscription_plan", pg_enum("enum_users_subscription_plan"), nullable=True),
    sa.Column("subscription_end_date", sa.DateTime(timezone=True), nullable=True),
    sa.Column("daily_streak", sa.Integer(), nullable=False),
    sa.Column("last_workout_date", sa.DateTime(timezone=True), nullable=True),
    sa.Column("total_workouts", sa.Integer(), nullable=False),
    sa.Column("total_minutes", sa.Integer(), nullable=False),
    sa.Column("gender_preference", pg_enum("enum_users_gender_preference"), nullable=False),
    sa.Column("fitness_level", pg_enum("enum_users_fitness_level"), nullable=False),
    sa.Column("equipment_available", sa.Boolean(), nullable=False),
    sa.Column("has_completed_welcome_video", sa.Boolean(), nullable=False),
    sa.Column("timezone", sa.String(50), nullable=True),
    sa.Column("metadata", JSONB, nullable=False),
    *_timestamps(),
    sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
)

admins = sa.Table(
    "admins",
    metadata,
    _id(),
    sa.Column("name", sa.String(100), nullable=False),
    sa.Column("email", sa.String(100), nullable=False),
    sa.Column("username", sa.String(50), nullable=False),
    sa.Column("password", sa.String(255), nullable=False),
    sa.Column("role", pg_enum("enum_admins_role"), nullable=False),
    sa.Column("permissions", JSONB, nullable=False),
    sa.Column("profile_image_url", sa.String(500), nullable=True),
    sa.Column("phone", sa.String(20), nullable=True),
    sa.Column("is_active", sa.Boolean(), nullable=False),
    sa.Column("is_super_admin", sa.Boolean(), nullable=False),
    sa.Column("force_password_change", sa.Boolean(), nullable=False),
    sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
    sa.Column("last_login_ip", sa.String(45), nullable=True),
    sa.Column("two_factor_secret", sa.String(100), nullable=True),
    sa.Column("two_factor_enabled", sa.Boolean(), nullable=False),
    sa.Column("reset_password_token", sa.String(100), nullable=True),
    sa.Column("reset_password_expires", sa.DateTime(timezone=True), nullable=True),
    sa.Column("password_changed_at", sa.DateTime(timezone=True), nullable=True),
    sa.Column("preferences", JSONB, nullable=False),
    sa.Column("department", sa.String(100), nullable=True),
    sa.Column("failed_login_attempts", sa.Integer(), nullable=False),
    sa.Column("locked_until", sa.DateTime(timezone=True), nullable=True),
    *_timestamps(),
)

programs = sa.Table(
    "programs",
    metadata,
    _id(),
    sa.Column("slug", sa.String(100), nullable=False),
    sa.Column("name", sa.String(200), nullable=False),
    sa.Column("description", sa.Text(), nullable=True),
    sa.Column("duration", sa.Integer(), nullable=False),
    sa.Column("difficulty", pg_enum("enum_programs_difficulty"), nullable=False),
    sa.Column("gender_target", pg_enum("enum_programs_gender_target"), nullable=False),
    sa.Column("equipment_required", sa.Boolean(), nullable=False),
    sa.Column("cover_image_url", sa.String(500), nullable=True),
    sa.Column("status", pg_enum("enum_programs_status"), nullable=False),
    sa.Column("is_active", sa.Boolean(), nullable=False),
    sa.Column("sort_order", sa.Integer(), nullable=False),
    sa.Column("enrollment_count", sa.Integer(), nullable=False),
    *_timestamps(),
)

workout_videos = sa.Table(
    "workout_videos",
    metadata,
    _id(),
    sa.Column("program_id", UUID(as_uuid=True), nullable=True),
    sa.Column("day", sa.Integer(), nullable=False),
    sa.Column("title", sa.String(200), nullable=False),
    sa.Column("description", sa.Text(), nullable=True),
    sa.Column("video_key", sa.String(100), nullable=False),
    sa.Column("thumbnail_key", sa.String(100), nullable=True),
    sa.Column("duration", sa.Integer(), nullable=False),
    sa.Column("difficulty", pg_enum("enum_workout_videos_difficulty"), nullable=False),
    sa.Column("calories_burned", sa.Integer(), nullable=False),
    sa.Column("is_welcome_video", sa.Boolean(), nullable=False),
    sa.Column("is_active", sa.Boolean(), nullable=False),
    sa.Column("sort_order", sa.Integer(), nullable=False),
    sa.Column("muscle_groups", ARRAY(sa.String(255)), nullable=False),
    sa.Column("has_adaptive_streaming", sa.Boolean(), nullable=False),
    sa.Column("streaming_manifest_key", sa.String(100), nullable=True),
    sa.Column("original_video_asset_id", UUID(as_uuid=True), nullable=True),
    sa.Column("thumbnail_asset_id", UUID(as_uuid=True), nullable=True),
    *_timestamps(),
    sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
)

media_assets = sa.Table(
    "media_assets",
    metadata,
    _id(),
    sa.Column("uploaded_by", UUID(as_uuid=True), nullable=False),
    sa.Column("workout_video_id", UUID(as_uuid=True), nullable=True),
    sa.Column("program_id", UUID(as_uuid=True), nullable=True),
    sa.Column("storage_key", sa.String(255), nullable=False),
    sa.Column("filename", sa.String(50), nullable=False),
    sa.Column("file_extension", sa.String(50), nullable=False),
    sa.Column("file_size", sa.BigInteger(), nullable=False),
    sa.Column("mime_type", sa.String(100), nullable=False),
    sa.Column("asset_type", pg_enum("enum_media_assets_asset_type"), nullable=False),
    sa.Column("metadata", JSONB, nullable=False),
    sa.Column("processing_status", sa.String(50), nullable=False),
    sa.Column("file_purpose", pg_enum("enum_media_assets_file_purpose"), nullable=False),
    sa.Column("cdn_url", sa.String(500), nullable=True),
    sa.Column("direct_url", sa.String(1000), nullable=True),
    sa.Column("processing_log", sa.Text(), nullable=True),
    sa.Column("duration", sa.Integer(), nullable=True),
    sa.Column("width", sa.Integer(), nullable=True),
    sa.Column("height", sa.Integer(), nullable=True),
    sa.Column("is_archived", sa.Boolean(), nullable=False),
    sa.Column("processed_at", sa.DateTime(timezone=True), nullable=True),
    *_timestamps(),
)

activity_history = sa.Table(
    "activity_history",
    metadata,
    _id(),
    sa.Column("user_id", UUID(as_uuid=True), nullable=False),
    sa.Column("workout_video_id", UUID(as_uuid=True), nullable=True),
    sa.Column("day", sa.Integer(), nullable=True),
    sa.Column("watched_duration", sa.Integer(), nullable=False),
    sa.Column("is_completed", sa.Boolean(), nullable=False),
    sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
    sa.Column("rating", sa.Integer(), nullable=True),
    *_timestamps(),
    sa.Column("details", JSONB, nullable=True),
    sa.Column("program_id", UUID(as_uuid=True), nullable=True),
    sa.Column("targeted_workout_id", UUID(as_uuid=True), nullable=True),
    sa.Column("activity_type", pg_enum("enum_activity_history_activity_type"), nullable=False),
)

subscriptions = sa.Table(
    "subscriptions",
    metadata,
    _id(),
    sa.Column("user_id", UUID(as_uuid=True), nullable=False),
    sa.Column("aggregator_product_id", sa.Integer(), nullable=True),
    sa.Column("aggregator_transaction_id", sa.String(100), nullable=True),
    sa.Column("telco_ref", sa.String(100), nullable=True),
    sa.Column("plan_type", pg_enum("enum_subscriptions_plan_type"), nullable=False),
    sa.Column("amount", sa.Integer(), nullable=False),
    sa.Column("status", pg_enum("enum_subscriptions_status"), nullable=False),
    sa.Column("channel", pg_enum("enum_subscriptions_channel"), nullable=False),
    sa.Column("telco", pg_enum("enum_subscriptions_telco"), nullable=False),
    sa.Column("phone", sa.String(20), nullable=False),
    sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
    sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
    sa.Column("auto_renewal", sa.Boolean(), nullable=False),
    sa.Column("telco_status_code", sa.String(10), nullable=True),
    sa.Column("telco_status_message", sa.String(255), nullable=True),
    sa.Column("aggregator_response", JSONB, nullable=False),
    *_timestamps(),
    sa.Column("renewal_count", sa.Integer(), nullable=False, server_default="0"),
    sa.Column("cancelled_at", sa.DateTime(timezone=True), nullable=True),
    sa.Column("cancellation_reason", sa.String(255), nullable=True),
)

video_processing_queue = sa.Table(
    "video_processing_queue",
    metadata,
    _id(),
    sa.Column("media_asset_id", UUID(as_uuid=True), nullable=False),
    sa.Column("processed_by", UUID(as_uuid=True), nullable=True),
    sa.Column("status", sa.String(50), nullable=False),
    sa.Column("priority", sa.Integer(), nullable=False),
    sa.Column("processing_options", JSONB, nullable=False),
    sa.Column("retry_count", sa.Integer(), nullable=False),
    sa.Column("error_message", sa.Text(), nullable=True),
    sa.Column("processing_result", JSONB, nullable=False),
    sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
    sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
    sa.Column("next_retry_at", sa.DateTime(timezone=True), nullable=True),
    *_timestamps(),
)

admin_activity_logs = sa.Table(
    "admin_activity_logs",
    metadata,
    _id(),
    sa.Column("admin_id", UUID(as_uuid=True), nullable=False),
    sa.Column("action_type", pg_enum("enum_admin_activity_logs_action_type"), nullable=False),
    sa.Column("description", sa.String(200), nullable=False),
    sa.Column("entity_type", sa.String(100), nullable=True),
    sa.Column("entity_id", UUID(as_uuid=True), nullable=True),
    sa.Column("old_values", JSONB, nullable=True),
    sa.Column("new_values", JSONB, nullable=True),
    sa.Column("metadata", JSONB, nullable=True),
    sa.Column("ip_address", sa.String(45), nullable=True),
    sa.Column("user_agent", sa.String(500), nullable=True),
    sa.Column("was_successful", sa.Boolean(), nullable=False),
    sa.Column("error_message", sa.Text(), nullable=True),
    *_timestamps(),
)

admin_invites = sa.Table(
    "admin_invites",
    metadata,
    _id(),
    sa.Column("invited_by", UUID(as_uuid=True), nullable=False),
    sa.Column("email", sa.String(100), nullable=False),
    sa.Column("name", sa.String(100), nullable=True),
    sa.Column("token", sa.String(100), nullable=False),
    sa.Column("role", pg_enum("enum_admin_invites_role"), nullable=False),
    sa.Column("permissions", JSONB, nullable=False),
    sa.Column("status", pg_enum("enum_admin_invites_status"), nullable=False),
    sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
    sa.Column("accepted_at", sa.DateTime(timezone=True), nullable=True),
    sa.Column("accepted_by_admin_id", UUID(as_uuid=True), nullable=True),
    *_timestamps(),
)

nutrition = sa.Table(
    "nutrition",
    metadata,
    _id(),
    sa.Column("day", sa.Integer(), nullable=True),
    sa.Column("title", sa.String(200), nullable=False),
    sa.Column("description", sa.Text(), nullable=False),
    sa.Column("detailed_content", sa.Text(), nullable=True),
    sa.Column("image_url", sa.String(500), nullable=True),
    sa.Column("video_url", sa.String(500), nullable=True),
    sa.Column("category", pg_enum("enum_nutrition_category"), nullable=False),
    sa.Column("calories", sa.Integer(), nullable=True),
    sa.Column("ingredients", ARRAY(sa.String(255)), nullable=False),
    sa.Column("preparation_steps", ARRAY(sa.Text()), nullable=False),
    sa.Column("prep_time", sa.String(50), nullable=True),
    sa.Column("is_active", sa.Boolean(), nullable=False),
    sa.Column("sort_order", sa.Integer(), nullable=False),
    *_timestamps(),
    sa.Column("protein_g", sa.Integer(), nullable=True),
    sa.Column("carbs_g", sa.Integer(), nullable=True),
    sa.Column("fat_g", sa.Integer(), nullable=True),
    sa.Column("fiber_g", sa.Integer(), nullable=True),
    sa.Column("servings", sa.Integer(), nullable=True),
    sa.Column("difficulty", pg_enum("enum_nutrition_difficulty"), nullable=True),
)

activity_logs = sa.Table(
    "activity_logs",
    metadata,
    _id(),
    sa.Column("user_id", UUID(as_uuid=True), nullable=False),
    sa.Column("action", sa.String(50), nullable=False),
    sa.Column("entity_type", sa.String(100), nullable=True),
    sa.Column("entity_id", UUID(as_uuid=True), nullable=True),
    sa.Column("details", JSONB, nullable=False),
    sa.Column("ip_address", sa.String(50), nullable=True),
    sa.Column("user_agent", sa.String(255), nullable=True),
    *_timestamps(),
)

targeted_workouts = sa.Table(
    "targeted_workouts",
    metadata,
    _id(),
    sa.Column("title", sa.String(200), nullable=False),
    sa.Column("description", sa.Text(), nullable=True),
    sa.Column("total_duration", sa.Integer(), nullable=False),
    sa.Column("body_part", sa.String(100), nullable=False),
    sa.Column("gender_target", pg_enum("enum_targeted_workouts_gender_target"), nullable=True),
    sa.Column("category", sa.String(100), nullable=False),
    sa.Column("difficulty", pg_enum("enum_targeted_workouts_difficulty"), nullable=True),
    sa.Column("calories_burned", sa.Integer(), nullable=True),
    sa.Column("clip_count", sa.Integer(), nullable=True),
    sa.Column("thumbnail_key", sa.String(100), nullable=False),
    sa.Column("equipment_required", sa.Boolean(), nullable=True),
    sa.Column("focus_areas", ARRAY(sa.String(255)), nullable=True),
    sa.Column("tags", ARRAY(sa.String(255)), nullable=True),
    sa.Column("view_count", sa.Integer(), nullable=True),
    sa.Column("rating", sa.Float(), nullable=True),
    sa.Column("is_active", sa.Boolean(), nullable=False),
    sa.Column("sort_order", sa.Integer(), nullable=True),
    *_timestamps(),
)

targeted_workout_clips = sa.Table(
    "targeted_workout_clips",
    metadata,
    _id(),
    sa.Column("targeted_workout_id", UUID(as_uuid=True), nullable=False),
    sa.Column("clip_order", sa.Integer(), nullable=False),
    sa.Column("title", sa.String(200), nullable=False),
    sa.Column("description", sa.Text(), nullable=True),
    sa.Column("exercise", sa.String(100), nullable=False),
    sa.Column("duration", sa.Integer(), nullable=False),
    sa.Column("video_key", sa.String(100), nullable=False),
    sa.Column("thumbnail_key", sa.String(100), nullable=True),
    sa.Column("instructions", sa.Text(), nullable=True),
    sa.Column("tips", sa.Text(), nullable=True),
    sa.Column("calories_burned", sa.Integer(), nullable=True),
    sa.Column("is_active", sa.Boolean(), nullable=False),
    sa.Column("original_video_asset_id", UUID(as_uuid=True), nullable=True),
    sa.Column("thumbnail_asset_id", UUID(as_uuid=True), nullable=True),
    *_timestamps(),
)
