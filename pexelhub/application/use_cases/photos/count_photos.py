from __future__ import annotations

from pexelhub.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork) -> int:
    return await uow.photos.count()
