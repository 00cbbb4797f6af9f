from __future__ import annotations

import uuid

import pytest
import sqlalchemy as sa
from sqlalchemy.exc import IntegrityError

from fitness_db import migrate
from fitness_db.seeders import programs as program_seeder
from fitness_db.seeders import users as user_seeder
from fitness_db.seeders import workout_videos as video_seeder
from fitness_db.seeders.context import SeedContext


TABLES = {
    "users",
    "admins",
    "programs",
    "workout_videos",
    "media_assets",
    "activity_history",
    "subscriptions",
    "video_processing_queue",
    "admin_activity_logs",
    "admin_invites",
    "nutrition",
    "activity_logs",
    "targeted_workouts",
    "targeted_workout_clips",
}


def _tables(engine) -> set[str]:
    return set(sa.inspect(engine).get_table_names()) - {"alembic_version"}


def _enum_types(engine) -> set[str]:
    with engine.connect() as conn:
        return set(
            conn.execute(sa.text("SELECT typname FROM pg_type WHERE typtype = 'e' AND typname LIKE 'enum_%'")).scalars()
        )


def _fk_names(engine) -> set[str]:
    with engine.connect() as conn:
        return set(
            conn.execute(
                sa.text("SELECT conname FROM pg_constraint WHERE contype = 'f' AND connamespace = 'public'::regnamespace")
            ).scalars()
        )


def test_upgrade_head_builds_full_schema(migrated_engine, database_url) -> None:
    assert _tables(migrated_engine) == TABLES
    assert migrate.current(database_url) == migrate.head()
    assert "enum_activity_history_activity_type" in _enum_types(migrated_engine)
    assert "enum_nutrition_difficulty" in _enum_types(migrated_engine)


def test_full_round_trip_leaves_no_tables_or_enum_types(migrated_engine, migrate_down, migrate_to) -> None:
    migrate_down("base")
    assert _tables(migrated_engine) == set()
    assert _enum_types(migrated_engine) == set()

    # And the chain applies cleanly a second time.
    migrate_to("head")
    assert _tables(migrated_engine) == TABLES


def test_relationship_graph_is_two_phase(engine, migrate_to, migrate_down) -> None:
    migrate_to("20251213214509")
    assert _fk_names(engine) == set()

    migrate_to("20251213214510")
    fks = _fk_names(engine)
    assert len(fks) == 14
    assert {"fk_workout_videos_original_asset", "fk_media_assets_workout_video", "fk_media_assets_admin"} <= fks

    migrate_down("20251213214509")
    assert _fk_names(engine) == set()


def test_orphan_rows_allowed_before_relationship_graph(engine, migrate_to) -> None:
    migrate_to("20251213214509")
    with engine.begin() as conn:
        conn.execute(
            sa.text(
                "INSERT INTO activity_history (id, user_id, workout_video_id) "
                "VALUES (:id, :user_id, :video_id)"
            ),
            {"id": uuid.uuid4(), "user_id": uuid.uuid4(), "video_id": uuid.uuid4()},
        )

    # Constraint creation validates existing rows.
    with pytest.raises(IntegrityError):
        migrate_to("20251213214510")


def test_id_defaults_arrive_with_uuid_fix(engine, migrate_to) -> None:
    insert = sa.text("INSERT INTO programs (slug, name) VALUES (:slug, :name)")

    migrate_to("20251213214512")
    with pytest.raises(IntegrityError):
        with engine.begin() as conn:
            conn.execute(insert, {"slug": "no-default", "name": "No default"})

    migrate_to("20251228154348")
    with engine.begin() as conn:
        conn.execute(insert, {"slug": "with-default", "name": "With default"})
        assert conn.execute(sa.text("SELECT id FROM programs WHERE slug = 'with-default'")).scalar_one() is not None


def test_admin_username_tightened_later(engine, migrate_to) -> None:
    insert = sa.text(
        "INSERT INTO admins (name, email, username, password) VALUES (:name, :email, 'ops', 'x')"
    )
    migrate_to("20260103070000")
    with engine.begin() as conn:
        conn.execute(insert, {"name": "A", "email": "a@example.com"})
        conn.execute(insert, {"name": "B", "email": "b@example.com"})
        conn.execute(sa.text("DELETE FROM admins"))

    migrate_to("20260103071334")
    with engine.begin() as conn:
        conn.execute(insert, {"name": "A", "email": "a@example.com"})
    with pytest.raises(IntegrityError):
        with engine.begin() as conn:
            conn.execute(insert, {"name": "B", "email": "b@example.com"})


def test_activity_history_backfill_and_activity_type(engine, migrate_to) -> None:
    migrate_to("20260103071337")
    ctx = SeedContext()
    with engine.begin() as conn:
        user_seeder.seed(conn, ctx)
        program_seeder.seed(conn, ctx)
        video_seeder.seed(conn, ctx)
        user_id = conn.execute(sa.text("SELECT id FROM users ORDER BY phone_formatted LIMIT 1")).scalar_one()
        video_id, program_id = conn.execute(
            sa.text("SELECT id, program_id FROM workout_videos WHERE day = 2 LIMIT 1")
        ).one()
        conn.execute(
            sa.text("INSERT INTO activity_history (user_id, workout_video_id, day) VALUES (:u, :v, 2)"),
            {"u": user_id, "v": video_id},
        )

    migrate_to("20260103071338")
    with engine.connect() as conn:
        assert conn.execute(sa.text("SELECT program_id FROM activity_history")).scalar_one() == program_id

    migrate_to("20260103071339")
    with engine.connect() as conn:
        assert conn.execute(sa.text("SELECT activity_type::text FROM activity_history")).scalar_one() == "PROGRAM_WORKOUT"


def test_relationship_graph_downgrade_tolerates_missing_constraint(engine, migrate_to, migrate_down) -> None:
    migrate_to("20251213214510")
    with engine.begin() as conn:
        conn.execute(sa.text("ALTER TABLE workout_videos DROP CONSTRAINT fk_workout_videos_program"))
    assert "fk_workout_videos_program" not in _fk_names(engine)

    migrate_down("20251213214509")
    assert _fk_names(engine) == set()
