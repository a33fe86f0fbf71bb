from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from pexelhub.application.mappers.photos import PhotoMapper
from pexelhub.application.use_cases.photos import count_photos, list_photos
from pexelhub.config.settings import Settings
from pexelhub.infrastructure.pages.renderer import PageRenderer
from pexelhub.interfaces.http.deps import (
    get_app_settings,
    get_page_renderer,
    get_photo_mapper,
    get_uow,
)

router = APIRouter(tags=["web"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home(
    settings: Settings = Depends(get_app_settings),
    mapper: PhotoMapper = Depends(get_photo_mapper),
    renderer: PageRenderer = Depends(get_page_renderer),
    uow=Depends(get_uow),
) -> HTMLResponse:
    """Render the gallery with the first page of photos embedded."""
    page = await list_photos.execute(
        uow,
        mapper,
        offset=0,
        limit=settings.page_size_default,
    )
    total = await count_photos.execute(uow)
    html = renderer.render(
        "index.html.j2",
        {
            "photos": page.photos,
            "has_more": page.has_more,
            "next_offset": page.next_offset,
            "page_size": settings.page_size_default,
            "total_photos": total,
        },
    )
    return HTMLResponse(content=html)
