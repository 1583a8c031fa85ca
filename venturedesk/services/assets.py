"""
Move local images into S3-compatible object storage and repoint the database.

Uploads are idempotent: a file already present in the bucket is not sent
again, but its public URL is still recorded so stored references can be
rewritten to it.
"""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterator, Optional
from urllib.parse import urlparse

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from sqlalchemy.orm import Session

from venturedesk.core.config import Settings
from venturedesk.core.errors import StorageError
from venturedesk.models.candidate import Candidate
from venturedesk.models.job import Job
from venturedesk.models.news import Announcement
from venturedesk.models.portfolio import Affiliation, Investment

logger = logging.getLogger(__name__)

IMAGE_MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
}

# "" is the images root itself; subfolders are walked one level deep.
IMAGE_FOLDERS = ("", "candidates", "companies", "network", "investments")

CACHE_CONTROL = "public, max-age=31536000, immutable"

# Every column that stores an image reference
IMAGE_FIELDS = (
    (Job, "company_logo"),
    (Candidate, "image"),
    (Announcement, "company_logo"),
    (Investment, "logo"),
    (Affiliation, "logo"),
)

R2_PUBLIC_DOMAIN = "r2.dev"


def content_type_for(name: str) -> str:
    return IMAGE_MIME_TYPES.get(Path(name).suffix.lower(), "application/octet-stream")


class ObjectStore:
    """The handful of S3 operations the migration needs."""

    def __init__(self, client, bucket: str, public_url: str):
        self.client = client
        self.bucket = bucket
        self.public_url = public_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "ObjectStore":
        client = boto3.client(
            "s3",
            region_name="auto",
            endpoint_url=settings.r2_endpoint,
            aws_access_key_id=settings.require("R2_ACCESS_KEY_ID"),
            aws_secret_access_key=settings.require("R2_SECRET_ACCESS_KEY"),
        )
        return cls(client, settings.R2_BUCKET_NAME, settings.require("R2_PUBLIC_URL"))

    def url_for(self, key: str) -> str:
        return f"{self.public_url}/{key}"

    def exists(self, key: str) -> bool:
        try:
            self.client.head_object(Bucket=self.bucket, Key=key)
        except ClientError:
            return False
        return True

    def put(self, key: str, body: bytes, content_type: str) -> None:
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
                CacheControl=CACHE_CONTROL,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"put {key} failed: {exc}") from exc

    def keys(self, page_size: int = 20) -> Iterator[str]:
        paginator = self.client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=self.bucket, PaginationConfig={"PageSize": page_size}):
            for obj in page.get("Contents", []):
                yield obj["Key"]

    def rewrite_metadata(self, key: str, content_type: str, cache_control: str = CACHE_CONTROL) -> None:
        """Copy an object onto itself with replaced headers."""
        try:
            self.client.copy_object(
                Bucket=self.bucket,
                Key=key,
                CopySource={"Bucket": self.bucket, "Key": key},
                ContentType=content_type,
                CacheControl=cache_control,
                MetadataDirective="REPLACE",
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"copy {key} failed: {exc}") from exc


class AssetMigrator:
    def __init__(self, store: ObjectStore, images_dir: Path | str, folders=IMAGE_FOLDERS):
        self.store = store
        self.images_dir = Path(images_dir)
        self.folders = folders
        # local file path -> public URL, for files handled in this run
        self.uploaded: dict[str, str] = {}
        # stored reference ("/images/x.png" and "images/x.png") -> public URL
        self.path_mapping: dict[str, str] = {}

    def upload_file(self, local_path: Path, key: str) -> str:
        """Upload unless already uploaded this run or present in the bucket."""
        cache_key = str(local_path)
        if cache_key in self.uploaded:
            return self.uploaded[cache_key]

        url = self.store.url_for(key)
        if self.store.exists(key):
            logger.info("  [skip] Already exists: %s", key)
        else:
            body = local_path.read_bytes()
            self.store.put(key, body, content_type_for(local_path.name))
            logger.info("  [upload] %s (%.1fKB)", key, len(body) / 1024)

        self.uploaded[cache_key] = url
        return url

    def _image_files(self, folder: str) -> list[Path]:
        directory = self.images_dir / folder if folder else self.images_dir
        if not directory.is_dir():
            return []
        return sorted(
            path for path in directory.iterdir()
            if path.is_file() and path.suffix.lower() in IMAGE_MIME_TYPES
        )

    def upload_all(self) -> dict[str, str]:
        """Upload every image in the known folders and return the path mapping."""
        logger.info("=== Uploading images ===")
        for folder in self.folders:
            files = self._image_files(folder)
            if not files:
                continue
            logger.info("%s/: %d images", folder or "root", len(files))

            for path in files:
                key = f"{folder}/{path.name}" if folder else path.name
                try:
                    url = self.upload_file(path, key)
                except Exception as exc:
                    logger.error("  [error] Failed to upload %s: %s", path.name, exc)
                    continue
                relative = f"/images/{key}"
                self.path_mapping[relative] = url
                self.path_mapping[relative[1:]] = url

        logger.info("Uploaded %d unique files", len(self.uploaded))
        return self.path_mapping

    def is_remote(self, value: str) -> bool:
        store_host = urlparse(self.store.public_url).netloc
        return (
            R2_PUBLIC_DOMAIN in value
            or (bool(store_host) and store_host in value)
            or value.startswith(("http://", "https://"))
        )

    def convert_path(self, value: Optional[str]) -> Optional[str]:
        """Map a stored image reference to its object-store URL.

        Remote URLs pass through untouched. Known local paths use the upload
        mapping. Anything else gets a URL built by stripping the images/
        prefix, which is not checked against the bucket.
        """
        if not value:
            return None
        if self.is_remote(value):
            return value

        mapped = self.path_mapping.get(value) or self.path_mapping.get(value.lstrip("/"))
        if mapped:
            return mapped

        clean = value
        for prefix in ("/images/", "images/"):
            if clean.startswith(prefix):
                clean = clean[len(prefix):]
                break
        return self.store.url_for(clean)

    def update_database(self, session: Session) -> dict[str, int]:
        """Rewrite image columns, touching only rows whose value changes."""
        logger.info("=== Updating database records ===")
        counts: dict[str, int] = {}
        for model, field in IMAGE_FIELDS:
            column = getattr(model, field)
            updated = 0
            for row in session.query(model).filter(column.is_not(None)).all():
                current = getattr(row, field)
                new_value = self.convert_path(current)
                if new_value and new_value != current:
                    setattr(row, field, new_value)
                    updated += 1
            session.commit()
            counts[model.__tablename__] = updated
            logger.info("  Updated %d %s", updated, model.__tablename__)
        return counts


def refresh_cache_headers(store: ObjectStore, pause: float = 0.05) -> tuple[int, int]:
    """Re-stamp every object with long-lived cache headers. Returns (updated, failed)."""
    updated = failed = 0
    for key in store.keys():
        try:
            store.rewrite_metadata(key, content_type_for(key))
        except StorageError as exc:
            failed += 1
            logger.error("  Error updating %s: %s", key, exc)
        else:
            updated += 1
            logger.info("  %d. %s", updated, key)
        if pause:
            # R2 rate-limits bursts of CopyObject
            time.sleep(pause)
    return updated, failed
