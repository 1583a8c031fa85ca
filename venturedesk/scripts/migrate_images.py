#!/usr/bin/env python3
"""Upload local images to object storage and point database rows at them.

Usage:
    venturedesk-migrate-images                  # upload, then rewrite URLs
    venturedesk-migrate-images --cache-headers  # re-stamp cache headers on every object
"""
from __future__ import annotations

import argparse

from venturedesk.core.config import settings
from venturedesk.core.database import get_db
from venturedesk.core.logsetup import configure_logging
from venturedesk.services.assets import AssetMigrator, ObjectStore, refresh_cache_headers


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Migrate local images to S3-compatible storage.")
    parser.add_argument(
        "--cache-headers",
        action="store_true",
        help="Only rewrite Cache-Control/Content-Type on objects already in the bucket",
    )
    args = parser.parse_args(argv)

    configure_logging()
    store = ObjectStore.from_settings(settings)

    if args.cache_headers:
        print(f"Updating cache headers on {settings.R2_BUCKET_NAME}...")
        updated, failed = refresh_cache_headers(store)
        print(f"\nDone! Updated {updated} objects, {failed} failed.")
        return

    print("Image Migration")
    print("===============")
    print(f"Endpoint:   {settings.r2_endpoint}")
    print(f"Bucket:     {store.bucket}")
    print(f"Public URL: {store.public_url}")
    print(f"Images Dir: {settings.IMAGES_DIR}")

    migrator = AssetMigrator(store, settings.IMAGES_DIR)
    migrator.upload_all()

    with get_db() as db:
        counts = migrator.update_database(db)

    print("\n=== Summary ===")
    for table, count in counts.items():
        print(f"{table}: {count}")
    print(f"Total: {sum(counts.values())}")
    print("\nMigration complete!")


if __name__ == "__main__":
    main()
