from __future__ import annotations

import logging
import re
import uuid
from dataclasses import dataclass

from pexelhub.application.errors import (
    ConflictError,
    InfrastructureError,
    PayloadTooLarge,
    ValidationError,
)
from pexelhub.application.interfaces.unit_of_work import UnitOfWork
from pexelhub.domain.models.photo import Photo
from pexelhub.infrastructure.storage.ports import StorageService

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "images/"
_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


@dataclass(slots=True)
class UploadPhotoInput:
    data: bytes
    content_type: str | None
    original_name: str | None
    description: str | None = None


def ensure_uploadable(payload: UploadPhotoInput, max_bytes: int | None = None) -> None:
    if not payload.data:
        raise ValidationError("File cannot be empty")
    if not payload.content_type or not payload.content_type.startswith("image/"):
        raise ValidationError("Only image files are allowed")
    if max_bytes is not None and len(payload.data) > max_bytes:
        raise PayloadTooLarge(
            "File size exceeds the maximum allowed limit", details={"max_bytes": max_bytes}
        )


def build_storage_key(original_name: str | None, prefix: str = DEFAULT_KEY_PREFIX) -> str:
    """Derive a unique object key from an uploaded file name.

    The name is rejected when missing or when it carries a parent-directory
    segment. Every character outside ``[a-zA-Z0-9.-]`` becomes ``_`` and a
    random UUID is prepended so repeated names never collide.
    """
    if not original_name or ".." in original_name:
        raise ValidationError("Invalid file name")
    sanitized = _UNSAFE_CHARS.sub("_", original_name)
    return f"{prefix}{uuid.uuid4()}-{sanitized}"


async def execute(
    uow: UnitOfWork,
    storage: StorageService,
    payload: UploadPhotoInput,
    *,
    key_prefix: str = DEFAULT_KEY_PREFIX,
    max_bytes: int | None = None,
) -> Photo:
    ensure_uploadable(payload, max_bytes)
    storage_key = build_storage_key(payload.original_name, key_prefix)
    photo = Photo.create(storage_key=storage_key, description=payload.description)

    await storage.put_object(storage_key, payload.data, payload.content_type)

    try:
        created = await uow.photos.save(photo)
        await uow.commit()
    except Exception as exc:
        # Object is already in the bucket; the orphan sweep reclaims it.
        logger.error(
            "Metadata persistence failed after object write; orphaned storage_key=%s",
            storage_key,
        )
        if isinstance(exc, ConflictError):
            # the key is generated server side, so a clash is not the caller's fault
            raise InfrastructureError(
                "Unable to persist photo metadata", details={"storage_key": storage_key}
            ) from exc
        raise
    logger.info("Photo uploaded id=%s storage_key=%s", created.id, created.storage_key)
    return created
