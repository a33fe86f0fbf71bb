from __future__ import annotations

from dataclasses import dataclass

from pexelhub.application.errors import ValidationError
from pexelhub.application.interfaces.unit_of_work import UnitOfWork
from pexelhub.application.mappers.photos import PhotoMapper, PhotoView


@dataclass(slots=True)
class PhotoPageEnvelope:
    photos: list[PhotoView]
    has_more: bool
    total_elements: int
    current_offset: int
    next_offset: int


async def execute(
    uow: UnitOfWork,
    mapper: PhotoMapper,
    *,
    offset: int,
    limit: int,
) -> PhotoPageEnvelope:
    if limit <= 0:
        raise ValidationError("limit must be greater than zero")
    if offset < 0:
        raise ValidationError("offset must be zero or greater")

    # Exact only when offset is a multiple of limit
    page_number = offset // limit
    page = await uow.photos.list_page(page_number, limit)
    photos = [await mapper.to_response(item) for item in page.items]
    return PhotoPageEnvelope(
        photos=photos,
        has_more=page.has_next,
        total_elements=page.total,
        current_offset=offset,
        next_offset=offset + limit,
    )
