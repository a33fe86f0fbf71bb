from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pexelhub.application.errors import ConflictError
from pexelhub.application.interfaces.repositories.photos import PhotosRepository
from pexelhub.domain.models.photo import Photo, PhotoPage
from pexelhub.infrastructure.db.orm.photo import PhotoORM


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class PhotosSQLAlchemyRepository(PhotosRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PhotoORM) -> Photo:
        return Photo(
            id=orm.id,
            storage_key=orm.storage_key,
            description=orm.description,
            created_at=_as_utc(orm.created_at),
            updated_at=_as_utc(orm.updated_at),
        )

    async def save(self, photo: Photo) -> Photo:
        now = datetime.now(timezone.utc)
        orm = await self.session.get(PhotoORM, photo.id)
        if orm is None:
            orm = PhotoORM(
                id=photo.id,
                storage_key=photo.storage_key,
                description=photo.description,
                created_at=photo.created_at,
                updated_at=max(photo.updated_at, photo.created_at),
            )
            self.session.add(orm)
        else:
            # storage_key and created_at are immutable once persisted
            orm.description = photo.description
            orm.updated_at = now
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                "Storage key already exists", details={"storage_key": photo.storage_key}
            ) from exc
        return self._to_domain(orm)

    async def list_page(self, page_number: int, page_size: int) -> PhotoPage:
        stmt = (
            select(PhotoORM)
            .order_by(PhotoORM.created_at.desc(), PhotoORM.id.desc())
            .offset(page_number * page_size)
            .limit(page_size)
        )
        result = await self.session.execute(stmt)
        items = [self._to_domain(r) for r in result.scalars().all()]
        total = await self.count()
        return PhotoPage(
            items=items,
            total=total,
            has_next=(page_number + 1) * page_size < total,
        )

    async def list_all(self) -> list[Photo]:
        result = await self.session.execute(select(PhotoORM))
        return [self._to_domain(r) for r in result.scalars().all()]

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(PhotoORM))
        return int(result.scalar_one())

    async def exists_by_storage_key(self, storage_key: str) -> bool:
        stmt = select(PhotoORM.id).where(PhotoORM.storage_key == storage_key)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
