from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from pexelhub.infrastructure.db.session import SQLAlchemyUnitOfWork
from pexelhub.infrastructure.storage.ports import StorageService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SweepReport:
    scanned: int = 0
    orphaned: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)


async def sweep_orphaned_objects(
    session_factory: Callable[[], AsyncSession],
    storage: StorageService,
    *,
    prefix: str,
    min_age: timedelta = timedelta(hours=1),
    dry_run: bool = False,
) -> SweepReport:
    """Remove stored objects that have no metadata row.

    Uploads write the object before the row, so objects younger than
    ``min_age`` are skipped to leave in-flight uploads alone.
    """
    cutoff = datetime.now(timezone.utc) - min_age
    report = SweepReport()
    objects = await storage.list_objects(prefix)
    report.scanned = len(objects)

    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        for obj in objects:
            if obj.last_modified > cutoff:
                continue
            if await uow.photos.exists_by_storage_key(obj.key):
                continue
            report.orphaned.append(obj.key)

    for key in report.orphaned:
        if dry_run:
            logger.info("Orphaned object (dry run): %s", key)
            continue
        await storage.delete_object(key)
        report.deleted.append(key)
        logger.info("Deleted orphaned object: %s", key)

    logger.info(
        "Orphan sweep finished: scanned=%d orphaned=%d deleted=%d",
        report.scanned,
        len(report.orphaned),
        len(report.deleted),
    )
    return report
