from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.engine import Engine

from fitness_db.logging import configure_logging, logger
from fitness_db.seeders import SEEDER_NAMES, SEEDERS, SeedContext
from fitness_db.settings import SETTINGS, normalize_database_url


def select_seeders(names: Sequence[str] | None = None):
    if not names:
        return list(SEEDERS)
    unknown = sorted(set(names) - set(SEEDER_NAMES))
    if unknown:
        raise ValueError(f"unknown seeders: {', '.join(unknown)} (known: {', '.join(SEEDER_NAMES)})")
    # Registry order wins over the order given on the command line.
    return [s for s in SEEDERS if s.name in names]


def run_seeders(
    engine: Engine,
    names: Sequence[str] | None = None,
    ctx: SeedContext | None = None,
    *,
    undo: bool = False,
) -> dict[str, int]:
    """
    Run seeders (or their undo) in registry order, reversed for undo.

    Each seeder commits in its own transaction, so a failure leaves earlier
    seeders' rows in place.
    """
    ctx = ctx or SeedContext(pools=SETTINGS.asset_pools)
    selected = select_seeders(names)
    if undo:
        selected = list(reversed(selected))

    counts: dict[str, int] = {}
    for seeder in selected:
        with engine.begin() as conn:
            counts[seeder.name] = seeder.unseed(conn) if undo else seeder.seed(conn, ctx)
    return counts


def main() -> None:
    parser = argparse.ArgumentParser(description="Load or remove fitness demo data.")
    parser.add_argument("--database-url", default=os.getenv("DATABASE_URL") or SETTINGS.database_url)
    parser.add_argument("--only", default=None, help=f"Comma-separated subset of: {','.join(SEEDER_NAMES)}.")
    parser.add_argument("--undo", action="store_true", help="Delete seeded tables in reverse order.")
    parser.add_argument(
        "--no-failed-subscription",
        action="store_true",
        help="Skip the failed-payment subscription for the fourth user.",
    )
    args = parser.parse_args()

    configure_logging(SETTINGS.log_level, SETTINGS.log_format)

    names = None
    if args.only:
        names = [x.strip() for x in str(args.only).split(",") if x.strip()]

    ctx = SeedContext(pools=SETTINGS.asset_pools, include_failed_subscription=not args.no_failed_subscription)
    engine = sa.create_engine(normalize_database_url(args.database_url), future=True)
    try:
        counts = run_seeders(engine, names, ctx, undo=args.undo)
    finally:
        engine.dispose()
    logger.info("seed_finished", undo=args.undo, counts=counts)


if __name__ == "__main__":
    main()
