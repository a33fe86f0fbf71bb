from __future__ import annotations

from typing import Protocol

from pexelhub.application.interfaces.repositories.photos import PhotosRepository


class UnitOfWork(Protocol):
    photos: PhotosRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
