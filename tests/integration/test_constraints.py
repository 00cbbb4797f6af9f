from __future__ import annotations

import uuid
from datetime import UTC, datetime

import pytest
import sqlalchemy as sa
from sqlalchemy.exc import DataError, IntegrityError

from fitness_db.enums import ENUM_VALUES
from fitness_db.seed import run_seeders
from fitness_db.tables import (
    activity_history,
    admin_invites,
    admins,
    media_assets,
    programs,
    subscriptions,
    targeted_workout_clips,
    targeted_workouts,
    users,
    workout_videos,
)


def _user(conn, phone: str = "2347000000001", email: str | None = None) -> uuid.UUID:
    return conn.execute(
        users.insert()
        .values(phone=phone[-11:], phone_formatted=phone, email=email)
        .returning(users.c.id)
    ).scalar_one()


def _admin(conn) -> uuid.UUID:
    return conn.execute(
        admins.insert()
        .values(name="Ops", email="ops@example.com", username="ops", password="x")
        .returning(admins.c.id)
    ).scalar_one()


def test_enum_rejects_unknown_value(migrated_engine) -> None:
    with pytest.raises(DataError):
        with migrated_engine.begin() as conn:
            conn.execute(
                sa.text(
                    "INSERT INTO users (phone, phone_formatted, subscription_status) "
                    "VALUES ('07000000000', '2347000000000', 'lapsed')"
                )
            )


@pytest.mark.parametrize("type_name", sorted(ENUM_VALUES))
def test_every_enum_type_is_closed(migrated_engine, type_name: str) -> None:
    with migrated_engine.connect() as conn:
        labels = conn.execute(
            sa.text(
                "SELECT e.enumlabel FROM pg_enum e JOIN pg_type t ON t.oid = e.enumtypid "
                "WHERE t.typname = :name ORDER BY e.enumsortorder"
            ),
            {"name": type_name},
        ).scalars().all()
    assert tuple(labels) == ENUM_VALUES[type_name]

    with pytest.raises(DataError):
        with migrated_engine.connect() as conn:
            conn.execute(sa.text(f"SELECT CAST('not_a_label' AS {type_name})"))


def test_phone_formatted_unique(migrated_engine) -> None:
    with migrated_engine.begin() as conn:
        _user(conn, "2347000000001")
    with pytest.raises(IntegrityError):
        with migrated_engine.begin() as conn:
            _user(conn, "2347000000001")


def test_email_unique_only_when_present(migrated_engine) -> None:
    with migrated_engine.begin() as conn:
        _user(conn, "2347000000001")
        _user(conn, "2347000000002")
        _user(conn, "2347000000003", email="a@example.com")
    with pytest.raises(IntegrityError):
        with migrated_engine.begin() as conn:
            _user(conn, "2347000000004", email="a@example.com")


def test_user_delete_cascades_to_subscriptions_and_activity(migrated_engine) -> None:
    run_seeders(migrated_engine, ["programs", "workout_videos"])
    with migrated_engine.begin() as conn:
        user_id = _user(conn)
        video_id, program_id = conn.execute(
            sa.select(workout_videos.c.id, workout_videos.c.program_id).where(workout_videos.c.day == 1).limit(1)
        ).one()
        conn.execute(
            subscriptions.insert().values(
                user_id=user_id,
                aggregator_product_id=1,
                aggregator_transaction_id="TRX-X",
                plan_type="daily",
                amount=10_000,
                status="active",
                channel="SMS",
                telco="MTN",
                phone="2347000000001",
            )
        )
        conn.execute(
            activity_history.insert().values(
                user_id=user_id,
                workout_video_id=video_id,
                program_id=program_id,
                day=1,
                activity_type="PROGRAM_WORKOUT",
            )
        )

        conn.execute(users.delete().where(users.c.id == user_id))
        assert conn.execute(sa.select(sa.func.count()).select_from(subscriptions)).scalar_one() == 0
        assert conn.execute(sa.select(sa.func.count()).select_from(activity_history)).scalar_one() == 0
        assert conn.execute(sa.select(sa.func.count()).select_from(programs)).scalar_one() == 10
        assert conn.execute(sa.select(workout_videos.c.id).where(workout_videos.c.id == video_id)).scalar_one() == video_id


def test_admin_with_uploads_cannot_be_deleted(migrated_engine) -> None:
    with migrated_engine.begin() as conn:
        admin_id = _admin(conn)
        conn.execute(
            media_assets.insert().values(
                uploaded_by=admin_id,
                storage_key="video/a.mp4",
                filename="a.mp4",
                file_extension="mp4",
                file_size=1024,
                mime_type="video/mp4",
                asset_type="video",
                file_purpose="original",
            )
        )
    with pytest.raises(IntegrityError):
        with migrated_engine.begin() as conn:
            conn.execute(admins.delete().where(admins.c.id == admin_id))


def test_deleting_media_asset_nulls_clip_references(migrated_engine) -> None:
    run_seeders(migrated_engine, ["targeted_workouts", "targeted_workout_clips"])
    with migrated_engine.begin() as conn:
        admin_id = _admin(conn)
        asset_id = conn.execute(
            media_assets.insert()
            .values(
                uploaded_by=admin_id,
                storage_key="thumbnail/x.jpg",
                filename="x.jpg",
                file_extension="jpg",
                file_size=10,
                mime_type="image/jpeg",
                asset_type="image",
                file_purpose="thumbnail",
            )
            .returning(media_assets.c.id)
        ).scalar_one()
        clip_id = conn.execute(sa.select(targeted_workout_clips.c.id).limit(1)).scalar_one()
        conn.execute(
            targeted_workout_clips.update()
            .where(targeted_workout_clips.c.id == clip_id)
            .values(thumbnail_asset_id=asset_id)
        )

        conn.execute(media_assets.delete().where(media_assets.c.id == asset_id))
        assert (
            conn.execute(
                sa.select(targeted_workout_clips.c.thumbnail_asset_id).where(targeted_workout_clips.c.id == clip_id)
            ).scalar_one()
            is None
        )


def test_clip_order_unique_per_workout(migrated_engine) -> None:
    run_seeders(migrated_engine, ["targeted_workouts", "targeted_workout_clips"])
    with migrated_engine.connect() as conn:
        clip = conn.execute(
            sa.select(targeted_workout_clips).where(targeted_workout_clips.c.clip_order == 1).limit(1)
        ).one()
    with pytest.raises(IntegrityError):
        with migrated_engine.begin() as conn:
            conn.execute(
                targeted_workout_clips.insert().values(
                    targeted_workout_id=clip.targeted_workout_id,
                    clip_order=1,
                    title="Duplicate",
                    exercise="Plank",
                    video_key="video/dup.mp4",
                )
            )


def test_deleting_workout_cascades_to_clips(migrated_engine) -> None:
    run_seeders(migrated_engine, ["targeted_workouts", "targeted_workout_clips"])
    with migrated_engine.begin() as conn:
        workout_id = conn.execute(
            sa.select(targeted_workouts.c.id).where(targeted_workouts.c.sort_order == 1)
        ).scalar_one()
        conn.execute(targeted_workouts.delete().where(targeted_workouts.c.id == workout_id))
        remaining = conn.execute(
            sa.select(sa.func.count())
            .select_from(targeted_workout_clips)
            .where(targeted_workout_clips.c.targeted_workout_id == workout_id)
        ).scalar_one()
        assert remaining == 0


def test_program_delete_nulls_workout_video_program(migrated_engine) -> None:
    run_seeders(migrated_engine, ["programs", "workout_videos"])
    with migrated_engine.begin() as conn:
        program_id = conn.execute(sa.select(programs.c.id).where(programs.c.sort_order == 9)).scalar_one()
        video_ids = conn.execute(
            sa.select(workout_videos.c.id).where(workout_videos.c.program_id == program_id)
        ).scalars().all()
        assert len(video_ids) == 8

        conn.execute(programs.delete().where(programs.c.id == program_id))
        orphaned = conn.execute(
            sa.select(workout_videos.c.program_id).where(workout_videos.c.id.in_(video_ids))
        ).scalars().all()
        assert orphaned == [None] * 8


def test_workout_video_and_media_asset_reference_each_other(migrated_engine) -> None:
    run_seeders(migrated_engine, ["programs", "workout_videos"])
    with migrated_engine.begin() as conn:
        admin_id = _admin(conn)
        video_id = conn.execute(sa.select(workout_videos.c.id).where(workout_videos.c.day == 0).limit(1)).scalar_one()
        asset_id = conn.execute(
            media_assets.insert()
            .values(
                uploaded_by=admin_id,
                workout_video_id=video_id,
                storage_key="video/original.mp4",
                filename="original.mp4",
                file_extension="mp4",
                file_size=2048,
                mime_type="video/mp4",
                asset_type="video",
                file_purpose="original",
            )
            .returning(media_assets.c.id)
        ).scalar_one()
        conn.execute(
            workout_videos.update().where(workout_videos.c.id == video_id).values(original_video_asset_id=asset_id)
        )

        conn.execute(media_assets.delete().where(media_assets.c.id == asset_id))
        assert (
            conn.execute(
                sa.select(workout_videos.c.original_video_asset_id).where(workout_videos.c.id == video_id)
            ).scalar_one()
            is None
        )


def test_slug_and_storage_key_unique(migrated_engine) -> None:
    run_seeders(migrated_engine, ["programs"])
    with pytest.raises(IntegrityError):
        with migrated_engine.begin() as conn:
            conn.execute(programs.insert().values(slug="7-day-abs-challenge", name="Copy"))

    asset = {
        "storage_key": "video/same.mp4",
        "filename": "same.mp4",
        "file_extension": "mp4",
        "file_size": 1,
        "mime_type": "video/mp4",
        "asset_type": "video",
        "file_purpose": "original",
    }
    with migrated_engine.begin() as conn:
        admin_id = _admin(conn)
        conn.execute(media_assets.insert().values(uploaded_by=admin_id, **asset))
    with pytest.raises(IntegrityError):
        with migrated_engine.begin() as conn:
            conn.execute(media_assets.insert().values(uploaded_by=admin_id, **asset))


def test_admin_invite_token_unique(migrated_engine) -> None:
    invite = {
        "token": "invite-token-1",
        "expires_at": datetime(2026, 2, 1, tzinfo=UTC),
    }
    with migrated_engine.begin() as conn:
        admin_id = _admin(conn)
        conn.execute(admin_invites.insert().values(invited_by=admin_id, email="a@example.com", **invite))
    with pytest.raises(IntegrityError):
        with migrated_engine.begin() as conn:
            conn.execute(admin_invites.insert().values(invited_by=admin_id, email="b@example.com", **invite))
