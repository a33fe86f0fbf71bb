#!/usr/bin/env python3
"""
Delete stored images that have no metadata row.

An upload writes the object first and the database row second. When the row
write fails the object is left behind and the failure is logged; this script
reclaims those objects.

Usage:
  python scripts/sweep_orphans.py [--dry-run] [--min-age-minutes 60]
"""

import asyncio
import logging
import sys
from datetime import timedelta
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pexelhub.config.settings import get_settings
from pexelhub.infrastructure.db.session import create_engine, create_session_factory
from pexelhub.infrastructure.scheduler.orphan_sweep import sweep_orphaned_objects
from pexelhub.infrastructure.storage.s3 import S3StorageService


async def run(dry_run: bool, min_age_minutes: int) -> int:
    settings = get_settings()
    if not (settings.s3_bucket and settings.s3_region):
        print("❌ S3_BUCKET and S3_REGION must be configured")
        return 1

    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    storage = S3StorageService(
        bucket=settings.s3_bucket,
        region=settings.s3_region,
        endpoint_url=settings.s3_endpoint_url,
        signed_url_expires=settings.s3_signed_url_expires,
    )
    try:
        report = await sweep_orphaned_objects(
            session_factory,
            storage,
            prefix=settings.s3_key_prefix,
            min_age=timedelta(minutes=min_age_minutes),
            dry_run=dry_run,
        )
    finally:
        await engine.dispose()

    print(f"Scanned:  {report.scanned}")
    print(f"Orphaned: {len(report.orphaned)}")
    for key in report.orphaned:
        print(f"   - {key}")
    print(f"Deleted:  {len(report.deleted)}")
    return 0


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="Delete stored images that have no metadata row",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report orphans without deleting anything
  python scripts/sweep_orphans.py --dry-run

  # Delete orphans older than one day
  python scripts/sweep_orphans.py --min-age-minutes 1440
        """,
    )
    parser.add_argument("--dry-run", action="store_true", help="Only report orphaned objects")
    parser.add_argument(
        "--min-age-minutes",
        type=int,
        default=60,
        help="Skip objects newer than this (in-flight uploads)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    sys.exit(asyncio.run(run(args.dry_run, args.min_age_minutes)))
