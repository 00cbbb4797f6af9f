"""
Deterministic media asset selection for generated seed rows.

Every choice here is a pure function of (parent id, day or clip order) and the
configured pools: index arithmetic over the character codes of the parent id's
canonical string form. Re-running a seeder against the same parent rows picks
the same keys without persisting a mapping table, while days/clips within one
parent still vary.
"""

from __future__ import annotations

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


Gender = Literal["male", "female", "both"]

# Stride applied to day/clip order when picking thumbnails, so they drift apart from the video choice.
THUMBNAIL_STRIDE = 13


DEFAULT_VIDEOS = [
    "video/5114742_Running_Runner_3840x2160.mp4",
    "video/6003946_Man_Woman_3840x2160.mp4",
    "video/Q_Woman_Fitness_2160x3840.mp4",
    "video/6003937_Man_Woman_3840x2160.mp4",
    "video/393687_Fitness_Gym_2048x1080.mp4",
    "video/4783798_Woman_Gym_1920x1080.mp4",
    "video/4783840_Woman_Gym_3840x2160.mp4",
    "video/6003962_Man_African_American_3840x2160.mp4",
]

DEFAULT_THUMBNAILS = [
    "thumbnail/thum1.jpg",
    "thumbnail/thum2.jpg",
    "thumbnail/thum3.jpg",
    "thumbnail/thum4.jpg",
    "thumbnail/thum5.jpg",
    "thumbnail/thum6.jpg",
]

DEFAULT_VIDEO_CATEGORIES: dict[str, list[str]] = {
    "male": [
        "video/5114742_Running_Runner_3840x2160.mp4",
        "video/6003962_Man_African_American_3840x2160.mp4",
    ],
    "female": [
        "video/Q_Woman_Fitness_2160x3840.mp4",
        "video/4783798_Woman_Gym_1920x1080.mp4",
        "video/4783840_Woman_Gym_3840x2160.mp4",
    ],
    "both": [
        "video/6003946_Man_Woman_3840x2160.mp4",
        "video/6003937_Man_Woman_3840x2160.mp4",
        "video/393687_Fitness_Gym_2048x1080.mp4",
    ],
}

DEFAULT_COVERS = [
    "cover/plus-size-person-working-out.jpg",
    "cover/portrait-athletic-man-doing-box-jump-exercise-crossfit-sport-healt.jpg",
    "cover/handsome-black-man-is-engaged-gym.jpg",
    "cover/athletic-man-practicing-gymnastics-keep-fit.jpg",
    "cover/full-shot-man-doing-exercise-gym.jpg",
    "cover/side-view-man-training-with-dumbbells.jpg",
    "cover/handsome-black-man-is-engaged-gym.jpg",
    "cover/beautiful-black-girl-is-engaged-gym.jpg",
    "cover/full-shot-woman-training-outdoors.jpg",
    "cover/full-shot-man-training-outdoors.jpg",
    "cover/side-view-athlete-holding-weights-with-copy-space.jpg",
]

DEFAULT_COVER_CATEGORIES: dict[str, list[str]] = {
    "male": [
        "cover/handsome-black-man-is-engaged-gym.jpg",
        "cover/full-shot-man-training-outdoors.jpg",
        "cover/full-shot-man-doing-exercise-gym.jpg",
        "cover/side-view-man-training-with-dumbbells.jpg",
        "cover/portrait-athletic-man-doing-box-jump-exercise-crossfit-sport-healt.jpg",
        "cover/athletic-man-practicing-gymnastics-keep-fit.jpg",
    ],
    "female": [
        "cover/beautiful-black-girl-is-engaged-gym.jpg",
        "cover/full-shot-woman-training-outdoors.jpg",
        "cover/plus-size-person-working-out.jpg",
    ],
    "both": [
        "cover/side-view-athlete-holding-weights-with-copy-space.jpg",
    ],
}


class AssetPools(BaseModel):
    """Storage keys the seeders may reference. Categories are keyed by gender target."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    videos: list[str] = Field(default_factory=lambda: list(DEFAULT_VIDEOS), min_length=1)
    thumbnails: list[str] = Field(default_factory=lambda: list(DEFAULT_THUMBNAILS), min_length=1)
    covers: list[str] = Field(default_factory=lambda: list(DEFAULT_COVERS), min_length=1)
    video_categories: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_VIDEO_CATEGORIES.items()}
    )
    cover_categories: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_COVER_CATEGORIES.items()}
    )

    def video_category(self, gender: str) -> list[str]:
        return self.video_categories.get(gender, [])

    def cover_category(self, gender: str) -> list[str]:
        return self.cover_categories.get(gender, [])


def char_code(identifier: UUID | str, position: int) -> int:
    return ord(str(identifier)[position])


def program_video_key(pools: AssetPools, program_id: UUID | str, gender_target: str, day: int) -> str:
    # Gender pool first, then the neutral pool; for "both" the neutral pool appears twice.
    pool = [*pools.video_category(gender_target), *pools.video_category("both")]
    if not pool:
        return pools.videos[day % len(pools.videos)]
    return pool[(char_code(program_id, 0) + day) % len(pool)]


def program_thumbnail_key(pools: AssetPools, program_id: UUID | str, day: int) -> str:
    index = (char_code(program_id, 1) + day * THUMBNAIL_STRIDE) % len(pools.thumbnails)
    return pools.thumbnails[index]


def welcome_video_key(pools: AssetPools, program_id: UUID | str) -> str:
    pool = [*pools.video_category("both"), *pools.videos]
    return pool[char_code(program_id, 0) % len(pool)]


def welcome_thumbnail_key(pools: AssetPools, program_id: UUID | str) -> str:
    return pools.thumbnails[char_code(program_id, 1) % len(pools.thumbnails)]


def clip_video_key(pools: AssetPools, workout_id: UUID | str, gender_target: str, clip_order: int) -> str:
    if gender_target in ("male", "female"):
        pool = pools.video_category(gender_target) or pools.video_category("both")
    else:
        pool = pools.video_category("both")
    if not pool:
        pool = pools.videos
    return pool[(char_code(workout_id, 0) + clip_order) % len(pool)]


def clip_thumbnail_key(pools: AssetPools, workout_id: UUID | str, clip_order: int) -> str:
    return program_thumbnail_key(pools, workout_id, clip_order)


def cover_key(pools: AssetPools, gender_target: str, sort_order: int) -> str:
    if gender_target in ("male", "female"):
        pool = pools.cover_category(gender_target)
    else:
        pool = pools.cover_category("both")
    if not pool:
        pool = pools.covers
    return pool[sort_order % len(pool)]
