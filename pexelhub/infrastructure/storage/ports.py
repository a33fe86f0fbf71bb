from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(slots=True)
class StoredObject:
    key: str
    last_modified: datetime


class StorageService(Protocol):
    async def put_object(self, key: str, data: bytes, content_type: str) -> None: ...

    async def get_presigned_url(self, key: str, *, expires_seconds: int | None = None) -> str: ...

    async def list_objects(self, prefix: str) -> list[StoredObject]: ...

    async def delete_object(self, key: str) -> None: ...
