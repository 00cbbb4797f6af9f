from __future__ import annotations

from uuid import UUID

import pytest
from pydantic import ValidationError

from fitness_db import assets
from fitness_db.assets import AssetPools


PROGRAM_ID = UUID("1b000000-0000-4000-8000-000000000000")  # '1' -> 49, 'b' -> 98


def test_char_code_reads_canonical_uuid_string() -> None:
    assert assets.char_code(PROGRAM_ID, 0) == ord("1")
    assert assets.char_code(str(PROGRAM_ID), 1) == ord("b")


def test_program_video_key_uses_gender_pool_then_neutral_pool() -> None:
    pools = AssetPools()
    pool = pools.video_categories["female"] + pools.video_categories["both"]
    for day in range(1, 8):
        assert assets.program_video_key(pools, PROGRAM_ID, "female", day) == pool[(49 + day) % len(pool)]


def test_program_video_key_for_both_repeats_neutral_pool() -> None:
    pools = AssetPools()
    neutral = pools.video_categories["both"]
    # Six entries: the neutral pool twice.
    assert assets.program_video_key(pools, PROGRAM_ID, "both", 1) == (neutral + neutral)[(49 + 1) % 6]


def test_program_video_key_falls_back_to_full_list_without_categories() -> None:
    pools = AssetPools(video_categories={})
    assert assets.program_video_key(pools, PROGRAM_ID, "male", 3) == pools.videos[3 % len(pools.videos)]


def test_thumbnail_key_uses_stride() -> None:
    pools = AssetPools()
    day = 4
    expected = pools.thumbnails[(98 + day * assets.THUMBNAIL_STRIDE) % len(pools.thumbnails)]
    assert assets.program_thumbnail_key(pools, PROGRAM_ID, day) == expected
    assert assets.clip_thumbnail_key(pools, PROGRAM_ID, day) == expected


def test_welcome_keys_ignore_day() -> None:
    pools = AssetPools()
    pool = pools.video_categories["both"] + pools.videos
    assert assets.welcome_video_key(pools, PROGRAM_ID) == pool[49 % len(pool)]
    assert assets.welcome_thumbnail_key(pools, PROGRAM_ID) == pools.thumbnails[98 % len(pools.thumbnails)]


def test_clip_video_key_prefers_gender_pool_and_falls_back_to_neutral() -> None:
    pools = AssetPools(video_categories={"male": [], "both": ["video/n1.mp4", "video/n2.mp4"]})
    assert assets.clip_video_key(pools, PROGRAM_ID, "male", 1) == ["video/n1.mp4", "video/n2.mp4"][(49 + 1) % 2]

    default = AssetPools()
    male = default.video_categories["male"]
    assert assets.clip_video_key(default, PROGRAM_ID, "male", 2) == male[(49 + 2) % len(male)]


def test_selection_is_stable_for_same_parent() -> None:
    pools = AssetPools()
    first = [assets.clip_video_key(pools, PROGRAM_ID, "female", n) for n in range(1, 11)]
    second = [assets.clip_video_key(pools, PROGRAM_ID, "female", n) for n in range(1, 11)]
    assert first == second
    assert len(set(first)) > 1


def test_cover_key_cycles_by_sort_order() -> None:
    pools = AssetPools()
    female = pools.cover_categories["female"]
    assert assets.cover_key(pools, "female", 1) == female[1 % len(female)]
    assert assets.cover_key(pools, "both", 9) == pools.cover_categories["both"][0]


@pytest.mark.parametrize("field", ["videos", "thumbnails", "covers"])
def test_empty_pool_rejected(field: str) -> None:
    with pytest.raises(ValidationError):
        AssetPools(**{field: []})
