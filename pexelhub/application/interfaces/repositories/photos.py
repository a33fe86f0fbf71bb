from __future__ import annotations

from typing import Protocol

from pexelhub.domain.models.photo import Photo, PhotoPage


class PhotosRepository(Protocol):
    async def save(self, photo: Photo) -> Photo: ...

    async def list_page(self, page_number: int, page_size: int) -> PhotoPage: ...

    async def list_all(self) -> list[Photo]: ...

    async def count(self) -> int: ...

    async def exists_by_storage_key(self, storage_key: str) -> bool: ...
