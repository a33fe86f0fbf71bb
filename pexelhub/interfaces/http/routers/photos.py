from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from pexelhub.application.mappers.photos import PhotoMapper
from pexelhub.application.use_cases.photos import list_photos, upload_photo
from pexelhub.config.settings import Settings
from pexelhub.infrastructure.storage.ports import StorageService
from pexelhub.interfaces.http.deps import (
    get_app_settings,
    get_photo_mapper,
    get_storage_service,
    get_uow,
)
from pexelhub.interfaces.http.schemas.photos import PhotosPageResponse, UploadResponse

router = APIRouter(tags=["photos"])


@router.post("/upload", response_model=UploadResponse)
async def upload(
    file: UploadFile = File(...),
    description: str = Form(""),
    settings: Settings = Depends(get_app_settings),
    storage: StorageService = Depends(get_storage_service),
    uow=Depends(get_uow),
) -> UploadResponse:
    # one byte past the ceiling is enough to reject an oversized body
    data = await file.read(settings.max_upload_bytes + 1)
    await upload_photo.execute(
        uow,
        storage,
        upload_photo.UploadPhotoInput(
            data=data,
            content_type=file.content_type,
            original_name=file.filename,
            description=description,
        ),
        key_prefix=settings.s3_key_prefix,
        max_bytes=settings.max_upload_bytes,
    )
    return UploadResponse(message="Photo uploaded successfully")


@router.get("/photos/more", response_model=PhotosPageResponse)
async def more_photos(
    offset: int = Query(0, description="Zero-based index of the first photo"),
    limit: int | None = Query(None, description="Page size"),
    settings: Settings = Depends(get_app_settings),
    mapper: PhotoMapper = Depends(get_photo_mapper),
    uow=Depends(get_uow),
) -> PhotosPageResponse:
    result = await list_photos.execute(
        uow,
        mapper,
        offset=offset,
        limit=limit if limit is not None else settings.page_size_default,
    )
    return PhotosPageResponse.model_validate(result)
