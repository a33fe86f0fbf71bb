from __future__ import annotations

from pexelhub.application.interfaces.unit_of_work import UnitOfWork
from pexelhub.application.mappers.photos import PhotoMapper, PhotoView


async def execute(uow: UnitOfWork, mapper: PhotoMapper) -> list[PhotoView]:
    items = await uow.photos.list_all()
    return [await mapper.to_response(item) for item in items]
