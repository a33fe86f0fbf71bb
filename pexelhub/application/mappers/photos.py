from __future__ import annotations

from dataclasses import dataclass

from pexelhub.domain.models.photo import Photo
from pexelhub.infrastructure.storage.ports import StorageService


@dataclass(slots=True)
class PhotoView:
    signed_url: str
    description: str


@dataclass(slots=True)
class PhotoMapper:
    """Turns stored photos into client views carrying a freshly signed URL."""

    storage: StorageService
    url_expires_seconds: int = 600

    async def to_response(self, photo: Photo | None) -> PhotoView | None:
        if photo is None:
            return None
        url = await self.storage.get_presigned_url(
            photo.storage_key, expires_seconds=self.url_expires_seconds
        )
        return PhotoView(signed_url=url, description=photo.description or "")
