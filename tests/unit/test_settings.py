from __future__ import annotations

import pytest

from fitness_db.settings import DbSettings, normalize_database_url


@pytest.mark.parametrize(
    "url",
    [
        "postgresql://u:p@h:5432/db",
        "postgres://u:p@h:5432/db",
        "postgresql+psycopg2://u:p@h:5432/db",
        "postgresql+asyncpg://u:p@h:5432/db",
        "postgresql+psycopg://u:p@h:5432/db",
    ],
)
def test_normalize_database_url(url: str) -> None:
    assert normalize_database_url(url) == "postgresql+psycopg://u:p@h:5432/db"


def test_asset_pools_override_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASSET_POOLS__THUMBNAILS", '["thumbnail/only.jpg"]')
    settings = DbSettings()
    assert settings.asset_pools.thumbnails == ["thumbnail/only.jpg"]
    assert len(settings.asset_pools.videos) == 8


def test_database_url_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://x:y@db:5432/fit")
    assert DbSettings().database_url == "postgresql://x:y@db:5432/fit"
