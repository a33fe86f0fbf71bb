from __future__ import annotations

import pytest

from pexelhub.application.errors import StorageError
from pexelhub.application.mappers.photos import PhotoMapper
from pexelhub.domain.models.photo import Photo


@pytest.mark.asyncio
async def test_maps_photo_with_signed_url(storage):
    mapper = PhotoMapper(storage=storage, url_expires_seconds=300)
    photo = Photo.create(storage_key="images/abc-cat.png", description="Cat")

    view = await mapper.to_response(photo)

    assert view.signed_url == "https://bucket.test/images/abc-cat.png?X-Amz-Expires=300"
    assert view.description == "Cat"
    assert storage.signed_expirations == [300]


@pytest.mark.asyncio
async def test_missing_description_becomes_empty_string(storage):
    view = await PhotoMapper(storage=storage).to_response(
        Photo.create(storage_key="images/k.png")
    )
    assert view.description == ""


@pytest.mark.asyncio
async def test_no_photo_short_circuits(storage):
    assert await PhotoMapper(storage=storage).to_response(None) is None
    assert storage.signed_expirations == []


@pytest.mark.asyncio
async def test_signing_failure_propagates(storage):
    storage.fail_sign = True
    with pytest.raises(StorageError):
        await PhotoMapper(storage=storage).to_response(Photo.create(storage_key="images/k.png"))
