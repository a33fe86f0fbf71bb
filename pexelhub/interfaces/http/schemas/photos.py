from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class PhotoResponse(CamelModel):
    signed_url: str
    description: str


class PhotosPageResponse(CamelModel):
    photos: list[PhotoResponse]
    has_more: bool
    total_elements: int
    current_offset: int
    next_offset: int


class UploadResponse(BaseModel):
    message: str
