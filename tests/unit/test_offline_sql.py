from __future__ import annotations

import io

from alembic import command

from fitness_db import migrate
from fitness_db.enums import create_type_if_missing


def _render_upgrade() -> str:
    cfg = migrate.make_config("postgresql://u:p@localhost:5432/fitness", configure_logger=False)
    cfg.output_buffer = io.StringIO()
    command.upgrade(cfg, "head", sql=True)
    return cfg.output_buffer.getvalue()


def test_upgrade_head_renders_as_sql_without_a_database() -> None:
    sql = _render_upgrade()
    assert "CREATE TYPE enum_activity_history_activity_type AS ENUM ('PROGRAM_WORKOUT', 'TARGETED_WORKOUT')" in sql
    assert "CREATE TYPE enum_nutrition_difficulty AS ENUM ('beginner', 'intermediate', 'advanced')" in sql
    assert sql.count("DO $$") == 2
    assert migrate.head() in sql


def test_create_type_if_missing_checks_pg_type() -> None:
    statement = create_type_if_missing("enum_nutrition_difficulty")
    assert "WHERE typname = 'enum_nutrition_difficulty'" in statement
    assert statement.startswith("DO $$") and statement.endswith("END $$")


def test_alembic_ini_sets_path_separator() -> None:
    assert migrate.make_config("postgresql://u:p@localhost/fitness").get_main_option("path_separator") == "os"
