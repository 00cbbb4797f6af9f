"""
Subscriptions for the seeded users.

Users are matched to plans by ordinal position after sorting on
phone_formatted, so the pairing depends on phone numbers, not on which user
holds which plan snapshot. Today that sorts the inactive user third.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import sqlalchemy as sa
from sqlalchemy.engine import Connection, Row

from fitness_db.seeders.context import SeedContext, delete_all, insert_rows, skip
from fitness_db.tables import subscriptions, users


# (product id, plan, amount in kobo, telco, days since start, fallback days left)
ACTIVE_PLANS = [
    (1, "daily", 10_000, "MTN", 3, 1),
    (2, "weekly", 50_000, "AIRTEL", 5, 7),
    (3, "monthly", 150_000, "MTN", 15, 30),
]


def build_subscription_rows(user_rows: list[Row], now: datetime, *, include_failed: bool = True) -> list[dict]:
    rows: list[dict] = []
    for index, (user, plan) in enumerate(zip(user_rows, ACTIVE_PLANS)):
        product_id, plan_type, amount, telco, days_since_start, days_left = plan
        # The daily plan always ends tomorrow; longer plans follow the user's snapshot.
        if index == 0:
            end_date = now + timedelta(days=days_left)
        else:
            end_date = user.subscription_end_date or now + timedelta(days=days_left)
        n = index + 1
        rows.append(
            {
                "user_id": user.id,
                "aggregator_product_id": product_id,
                "aggregator_transaction_id": f"TRX-{n:03d}",
                "telco_ref": f"REF-{n:03d}",
                "plan_type": plan_type,
                "amount": amount,
                "status": "active",
                "channel": "SMS",
                "telco": telco,
                "phone": user.phone_formatted,
                "start_date": now - timedelta(days=days_since_start),
                "end_date": end_date,
                "auto_renewal": True,
                "telco_status_code": "0",
                "telco_status_message": "Success",
                "aggregator_response": {"source": "seed_data", "test_user": True, "user_index": index},
                "created_at": now,
                "updated_at": now,
            }
        )

    if include_failed and len(user_rows) > 3:
        user = user_rows[3]
        rows.append(
            {
                "user_id": user.id,
                "aggregator_product_id": 1,
                "aggregator_transaction_id": "TRX-004",
                "telco_ref": "REF-004",
                "plan_type": "daily",
                "amount": 10_000,
                "status": "failed",
                "channel": "SMS",
                "telco": "MTN",
                "phone": user.phone_formatted,
                "start_date": now - timedelta(days=1),
                "end_date": None,
                "auto_renewal": False,
                "telco_status_code": "500",
                "telco_status_message": "Payment failed",
                "aggregator_response": {
                    "source": "seed_data",
                    "test_user": True,
                    "user_index": 3,
                    "failure_reason": "Insufficient balance",
                },
                "created_at": now,
                "updated_at": now,
            }
        )
    return rows


def seed(conn: Connection, ctx: SeedContext) -> int:
    user_rows = conn.execute(
        sa.select(users.c.id, users.c.phone_formatted, users.c.subscription_end_date).order_by(users.c.phone_formatted)
    ).all()
    if not user_rows:
        return skip(subscriptions, missing="users")
    rows = build_subscription_rows(user_rows, ctx.now, include_failed=ctx.include_failed_subscription)
    return insert_rows(conn, subscriptions, rows)


def unseed(conn: Connection) -> int:
    return delete_all(conn, subscriptions)
