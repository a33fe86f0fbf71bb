from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from pexelhub.application.errors import ValidationError

DESCRIPTION_MAX_LENGTH = 500


@dataclass(slots=True)
class Photo:
    id: UUID
    storage_key: str
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, *, storage_key: str, description: str | None = None) -> Photo:
        if not storage_key:
            raise ValidationError("Storage key cannot be empty")
        if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters",
                details={"max_length": DESCRIPTION_MAX_LENGTH},
            )
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            storage_key=storage_key,
            description=description,
            created_at=now,
            updated_at=now,
        )


@dataclass(slots=True)
class PhotoPage:
    items: list[Photo]
    total: int
    has_next: bool
