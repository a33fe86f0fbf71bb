from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from pexelhub.application.mappers.photos import PhotoMapper
from pexelhub.config.settings import Settings
from pexelhub.infrastructure.db.session import SQLAlchemyUnitOfWork
from pexelhub.infrastructure.pages.renderer import PageRenderer
from pexelhub.infrastructure.storage.ports import StorageService


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage_service(request: Request) -> StorageService:
    service = getattr(request.app.state, "storage_service", None)
    if service is None:
        raise RuntimeError("Storage service not configured")
    return service


def get_photo_mapper(request: Request) -> PhotoMapper:
    settings = get_app_settings(request)
    return PhotoMapper(
        storage=get_storage_service(request),
        url_expires_seconds=settings.s3_signed_url_expires,
    )


def get_page_renderer(request: Request) -> PageRenderer:
    renderer = getattr(request.app.state, "page_renderer", None)
    if renderer is None:
        raise RuntimeError("Page renderer not configured")
    return renderer
