from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

import sqlalchemy as sa
from sqlalchemy.engine import Connection

from fitness_db.assets import AssetPools
from fitness_db.logging import logger


def _now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(frozen=True)
class SeedContext:
    # One timestamp per run so relative dates line up across seeders.
    now: datetime = field(default_factory=_now)
    pools: AssetPools = field(default_factory=AssetPools)
    include_failed_subscription: bool = True


def row_count(conn: Connection, table: sa.Table) -> int:
    return conn.execute(sa.select(sa.func.count()).select_from(table)).scalar_one()


def insert_rows(conn: Connection, table: sa.Table, rows: list[dict]) -> int:
    if rows:
        conn.execute(table.insert(), rows)
    logger.info("seeded", table=table.name, rows=len(rows))
    return len(rows)


def skip(table: sa.Table, *, missing: str) -> int:
    logger.warning("seed_skipped", table=table.name, reason=f"no rows in {missing}")
    return 0


def delete_all(conn: Connection, table: sa.Table) -> int:
    deleted = conn.execute(table.delete()).rowcount
    logger.info("unseeded", table=table.name, rows=deleted)
    return deleted
