from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from pexelhub.config.settings import Settings, get_settings
from pexelhub.infrastructure.db.session import create_engine, create_session_factory
from pexelhub.infrastructure.pages.renderer import STATIC_DIR, PageRenderer
from pexelhub.infrastructure.storage.ports import StorageService
from pexelhub.interfaces.http.deps import get_app_settings
from pexelhub.interfaces.http.routers import photos, web
from pexelhub.interfaces.middleware.error_handler import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    # Align common libraries
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine"):
        logging.getLogger(name).setLevel(level)
    # botocore is chatty at DEBUG
    logging.getLogger("botocore").setLevel(max(level, logging.INFO))


def _build_storage_service(settings: Settings) -> StorageService | None:
    if not (settings.s3_bucket and settings.s3_region):
        logger.warning("S3 storage not configured; upload and listing endpoints will fail")
        return None
    from pexelhub.infrastructure.storage.s3 import S3StorageService

    return S3StorageService(
        bucket=settings.s3_bucket,
        region=settings.s3_region,
        endpoint_url=settings.s3_endpoint_url,
        signed_url_expires=settings.s3_signed_url_expires,
    )


def create_app(
    *,
    settings: Settings | None = None,
    storage_service: StorageService | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="PexelHub Backend",
        version="0.1.0",
        description="Photo gallery API: uploads to S3, metadata in SQL, signed listings",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.storage_service = storage_service or _build_storage_service(settings)
    app.state.page_renderer = PageRenderer.create_default()
    register_error_handlers(app)

    # Group all API routes behind a single versioned prefix
    api = APIRouter(prefix="/api/v1")
    api.include_router(photos.router)

    @api.get("/health", tags=["health"])
    async def health(_: Settings = Depends(get_app_settings)) -> dict[str, str]:  # noqa: ANN001
        return {"status": "ok"}

    app.include_router(api)
    app.include_router(web.router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
