from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from pexelhub.infrastructure.db.base import Base


class PhotoORM(Base):
    __tablename__ = "images"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    storage_key: Mapped[str] = mapped_column(
        String(1024), unique=True, index=True, nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
