from __future__ import annotations

from pexelhub.config.settings import Settings


def make(**values) -> Settings:
    return Settings.model_validate({"database_url": "sqlite+aiosqlite:///x.db", **values})


def test_postgres_url_gets_asyncpg_driver():
    settings = make(database_url="postgres://u:p@db/pexelhub")
    assert settings.database_url == "postgresql+asyncpg://u:p@db/pexelhub"
    settings = make(database_url="postgresql://u:p@db/pexelhub")
    assert settings.database_url == "postgresql+asyncpg://u:p@db/pexelhub"


def test_explicit_driver_kept():
    settings = make(database_url="postgresql+psycopg://u:p@db/pexelhub")
    assert settings.database_url == "postgresql+psycopg://u:p@db/pexelhub"


def test_key_prefix_always_ends_with_slash():
    assert make(s3_key_prefix="uploads").s3_key_prefix == "uploads/"
    assert make().s3_key_prefix == "images/"


def test_defaults():
    settings = make()
    assert settings.s3_signed_url_expires == 600
    assert settings.page_size_default == 5
    assert settings.max_upload_bytes == 10 * 1024 * 1024


def test_cors_origins_list():
    assert make(cors_allow_origins="https://a.test, https://b.test,").cors_allow_origins_list == [
        "https://a.test",
        "https://b.test",
    ]
