from __future__ import annotations

import uuid
from collections.abc import Callable

import pytest
import sqlalchemy as sa
from alembic import command
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

from fitness_db.migrate import make_config
from fitness_db.settings import normalize_database_url


@pytest.fixture(scope="session")
def postgres_url() -> str:
    with PostgresContainer("postgres:16") as pg:
        # Testcontainers may hand back postgresql+psycopg2://; migrations run on psycopg3.
        yield normalize_database_url(pg.get_connection_url())


@pytest.fixture()
def database_url(postgres_url: str) -> str:
    """A fresh, empty database per test so revisions can be walked from base."""
    name = f"t_{uuid.uuid4().hex[:12]}"
    admin = sa.create_engine(postgres_url, poolclass=NullPool, isolation_level="AUTOCOMMIT")
    with admin.connect() as conn:
        conn.execute(sa.text(f'CREATE DATABASE "{name}"'))
    url = make_url(postgres_url).set(database=name).render_as_string(hide_password=False)
    try:
        yield url
    finally:
        with admin.connect() as conn:
            conn.execute(sa.text(f'DROP DATABASE IF EXISTS "{name}" WITH (FORCE)'))
        admin.dispose()


@pytest.fixture()
def engine(database_url: str) -> Engine:
    eng = sa.create_engine(database_url, poolclass=NullPool)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture()
def migrate_to(database_url: str) -> Callable[[str], None]:
    def _upgrade(revision: str) -> None:
        command.upgrade(make_config(database_url, configure_logger=False), revision)

    return _upgrade


@pytest.fixture()
def migrate_down(database_url: str) -> Callable[[str], None]:
    def _downgrade(revision: str) -> None:
        command.downgrade(make_config(database_url, configure_logger=False), revision)

    return _downgrade


@pytest.fixture()
def migrated_engine(engine: Engine, migrate_to) -> Engine:
    migrate_to("head")
    return engine
