from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from pexelhub.application.errors import StorageError
from pexelhub.config.settings import Settings
from pexelhub.infrastructure.db.base import Base
from pexelhub.infrastructure.db.orm import photo  # noqa: F401
from pexelhub.infrastructure.storage.ports import StoredObject
from pexelhub.interfaces.http.main import create_app


@dataclass
class InMemoryStorage:
    """Object store double that records calls and can be told to fail."""

    objects: dict[str, StoredObject] = field(default_factory=dict)
    contents: dict[str, tuple[bytes, str]] = field(default_factory=dict)
    put_calls: int = 0
    fail_put: bool = False
    fail_sign: bool = False
    signed_expirations: list[int | None] = field(default_factory=list)

    async def put_object(self, key: str, data: bytes, content_type: str) -> None:
        self.put_calls += 1
        if self.fail_put:
            raise StorageError("Unable to store object")
        self.contents[key] = (data, content_type)
        self.objects[key] = StoredObject(key=key, last_modified=datetime.now(timezone.utc))

    async def get_presigned_url(self, key: str, *, expires_seconds: int | None = None) -> str:
        if self.fail_sign:
            raise StorageError("Unable to sign object URL")
        self.signed_expirations.append(expires_seconds)
        return f"https://bucket.test/{key}?X-Amz-Expires={expires_seconds}"

    async def list_objects(self, prefix: str) -> list[StoredObject]:
        return [obj for key, obj in self.objects.items() if key.startswith(prefix)]

    async def delete_object(self, key: str) -> None:
        self.objects.pop(key, None)
        self.contents.pop(key, None)


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
            "s3_signed_url_expires": 600,
            "max_upload_bytes": 1024,
        }
    )


@pytest.fixture()
def app(test_settings: Settings, storage: InMemoryStorage):
    return create_app(settings=test_settings, storage_service=storage)


@pytest.fixture()
async def session_factory(app):
    engine = app.state.engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield app.state.session_factory
    await engine.dispose()


@pytest.fixture()
async def client(app, session_factory) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
