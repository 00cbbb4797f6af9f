"""Thin CLI over Alembic so the migrations run without an alembic.ini in the cwd."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
import sqlalchemy as sa
from sqlalchemy.pool import NullPool

from fitness_db.logging import configure_logging, logger
from fitness_db.settings import SETTINGS, normalize_database_url


ALEMBIC_INI = Path(__file__).resolve().parent / "migrations" / "alembic.ini"


def make_config(database_url: str, *, configure_logger: bool = True) -> Config:
    cfg = Config(str(ALEMBIC_INI))
    cfg.attributes["database_url"] = normalize_database_url(database_url)
    cfg.attributes["configure_logger"] = configure_logger
    return cfg


def upgrade(database_url: str, revision: str = "head") -> None:
    command.upgrade(make_config(database_url), revision)
    logger.info("migrated", direction="upgrade", target=revision)


def downgrade(database_url: str, revision: str = "-1") -> None:
    command.downgrade(make_config(database_url), revision)
    logger.info("migrated", direction="downgrade", target=revision)


def current(database_url: str) -> str | None:
    engine = sa.create_engine(normalize_database_url(database_url), poolclass=NullPool)
    try:
        with engine.connect() as conn:
            return MigrationContext.configure(conn).get_current_revision()
    finally:
        engine.dispose()


def head() -> str | None:
    return ScriptDirectory.from_config(Config(str(ALEMBIC_INI))).get_current_head()


def main() -> None:
    parser = argparse.ArgumentParser(description="Apply or roll back fitness-db schema migrations.")
    parser.add_argument("--database-url", default=os.getenv("DATABASE_URL") or SETTINGS.database_url)
    sub = parser.add_subparsers(dest="action", required=True)

    up = sub.add_parser("upgrade", help="Apply pending revisions.")
    up.add_argument("revision", nargs="?", default="head")

    down = sub.add_parser("downgrade", help="Revert revisions, newest first.")
    down.add_argument("revision", nargs="?", default="-1")

    sub.add_parser("current", help="Print the applied revision.")
    args = parser.parse_args()

    configure_logging(SETTINGS.log_level, SETTINGS.log_format)

    if args.action == "upgrade":
        upgrade(args.database_url, args.revision)
    elif args.action == "downgrade":
        downgrade(args.database_url, args.revision)
    else:
        rev = current(args.database_url)
        logger.info("current_revision", revision=rev, head=head())


if __name__ == "__main__":
    main()
