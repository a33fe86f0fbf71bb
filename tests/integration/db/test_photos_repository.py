from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from pexelhub.application.errors import ConflictError
from pexelhub.domain.models.photo import Photo
from pexelhub.infrastructure.db.session import SQLAlchemyUnitOfWork

BASE_TIME = datetime(2020, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_photo(index: int) -> Photo:
    photo = Photo.create(storage_key=f"images/{index}-p.png", description=f"p{index}")
    photo.created_at = photo.updated_at = BASE_TIME + timedelta(seconds=index)
    return photo


async def seed(session_factory, count: int) -> list[Photo]:
    photos = [make_photo(i) for i in range(count)]
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        for photo in photos:
            await uow.photos.save(photo)
        await uow.commit()
    return photos


async def test_list_page_orders_newest_first(session_factory):
    await seed(session_factory, 7)
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        first = await uow.photos.list_page(0, 5)
        second = await uow.photos.list_page(1, 5)

    assert [p.description for p in first.items] == ["p6", "p5", "p4", "p3", "p2"]
    assert first.total == 7
    assert first.has_next is True
    assert [p.description for p in second.items] == ["p1", "p0"]
    assert second.has_next is False


async def test_equal_timestamps_page_without_overlap(session_factory):
    photos = [make_photo(i) for i in range(4)]
    for photo in photos:
        photo.created_at = photo.updated_at = BASE_TIME
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        for photo in photos:
            await uow.photos.save(photo)
        await uow.commit()

    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        first = await uow.photos.list_page(0, 2)
        second = await uow.photos.list_page(1, 2)

    listed = [p.id for p in first.items + second.items]
    assert len(set(listed)) == 4
    assert listed == sorted((p.id for p in photos), reverse=True)


async def test_new_record_comes_first_on_page_zero(session_factory):
    await seed(session_factory, 3)
    newest = Photo.create(storage_key="images/new.png", description="newest")
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        await uow.photos.save(newest)
        await uow.commit()
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        page = await uow.photos.list_page(0, 5)
    assert page.items[0].id == newest.id


async def test_empty_store(session_factory):
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        page = await uow.photos.list_page(0, 5)
        assert page.items == []
        assert page.total == 0
        assert page.has_next is False
        assert await uow.photos.list_all() == []


async def test_save_inserts_then_updates(session_factory):
    (photo,) = await seed(session_factory, 1)

    photo.description = "edited"
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        updated = await uow.photos.save(photo)
        await uow.commit()

    assert updated.id == photo.id
    assert updated.storage_key == photo.storage_key
    assert updated.description == "edited"
    assert updated.created_at == BASE_TIME
    assert updated.updated_at > updated.created_at

    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        assert await uow.photos.count() == 1


async def test_duplicate_storage_key_conflicts(session_factory):
    await seed(session_factory, 1)
    clash = Photo.create(storage_key="images/0-p.png")
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        with pytest.raises(ConflictError):
            await uow.photos.save(clash)


async def test_count_and_list_all(session_factory):
    await seed(session_factory, 4)
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        assert await uow.photos.count() == 4
        assert await uow.photos.count() == 4
        assert len(await uow.photos.list_all()) == 4


async def test_exists_by_storage_key(session_factory):
    await seed(session_factory, 1)
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        assert await uow.photos.exists_by_storage_key("images/0-p.png") is True
        assert await uow.photos.exists_by_storage_key("images/missing.png") is False
