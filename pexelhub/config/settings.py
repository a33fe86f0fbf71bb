from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str
    log_level: str = "INFO"
    environment: str = "dev"
    # S3 storage
    s3_bucket: str | None = None
    s3_region: str | None = None
    s3_endpoint_url: str | None = None  # e.g. MinIO or R2 endpoint
    s3_key_prefix: str = "images/"
    s3_signed_url_expires: int = 600
    # Uploads and listing
    max_upload_bytes: int = 10 * 1024 * 1024
    page_size_default: int = 5
    # CORS
    cors_allow_origins: str = "*"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def ensure_asyncpg_scheme(cls, value: str) -> str:
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql+asyncpg://", 1)
        if value.startswith("postgresql://") and "+" not in value.split("://", 1)[0]:
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value

    @field_validator("s3_key_prefix")
    @classmethod
    def ensure_trailing_slash(cls, value: str) -> str:
        if value and not value.endswith("/"):
            return f"{value}/"
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
