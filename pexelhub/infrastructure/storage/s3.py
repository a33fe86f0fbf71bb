from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from pexelhub.application.errors import StorageError
from pexelhub.infrastructure.storage.ports import StorageService, StoredObject

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class S3StorageService(StorageService):
    bucket: str
    region: str
    endpoint_url: str | None = None
    signed_url_expires: int = 600
    client: Any = None

    def __post_init__(self) -> None:
        if self.client is None:
            self.client = boto3.client(
                "s3", region_name=self.region, endpoint_url=self.endpoint_url
            )

    async def put_object(self, key: str, data: bytes, content_type: str) -> None:
        try:
            await asyncio.to_thread(
                self.client.put_object,
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error("S3 put_object failed for key=%s: %s", key, exc)
            raise StorageError("Unable to store object") from exc
        logger.info("Stored object key=%s size=%d type=%s", key, len(data), content_type)

    async def get_presigned_url(self, key: str, *, expires_seconds: int | None = None) -> str:
        try:
            return await asyncio.to_thread(
                self.client.generate_presigned_url,
                "get_object",
                Params={"Bucket": self.bucket, "Key": key},
                ExpiresIn=expires_seconds or self.signed_url_expires,
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error("S3 presign failed for key=%s: %s", key, exc)
            raise StorageError("Unable to sign object URL") from exc

    async def list_objects(self, prefix: str) -> list[StoredObject]:
        def _collect() -> list[StoredObject]:
            objects: list[StoredObject] = []
            paginator = self.client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
                objects.extend(
                    StoredObject(key=obj["Key"], last_modified=obj["LastModified"])
                    for obj in page.get("Contents", [])
                )
            return objects

        try:
            return await asyncio.to_thread(_collect)
        except (BotoCoreError, ClientError) as exc:
            logger.error("S3 list failed for prefix=%s: %s", prefix, exc)
            raise StorageError("Unable to list objects") from exc

    async def delete_object(self, key: str) -> None:
        try:
            await asyncio.to_thread(self.client.delete_object, Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as exc:
            logger.error("S3 delete_object failed for key=%s: %s", key, exc)
            raise StorageError("Unable to delete object") from exc
