# Standard library imports
from datetime import UTC, datetime
from io import BytesIO
from typing import Protocol
from uuid import UUID

# Third-party imports
from fastapi.concurrency import run_in_threadpool
from minio import Minio

# Local application imports
from nagrik.core.monitoring.logging import get_contextual_logger
from nagrik.settings import settings
from nagrik.utils.validators.file_validator import normalize_file_name

logger = get_contextual_logger(__name__)


def build_photo_key(user_id: UUID, file_name: str | None, now: datetime | None = None) -> str:
    """Storage key for an evidence photo: ``issues/<user>/<timestamp>_<name>``."""
    stamp = (now or datetime.now(UTC)).strftime("%Y%m%dT%H%M%S%f")
    name = normalize_file_name(file_name) or "photo"
    return f"issues/{user_id}/{stamp}_{name}"


class PhotoStorage(Protocol):
    async def upload_photo(self, user_id: UUID, file_name: str | None, data: bytes, content_type: str) -> str: ...


class S3PhotoStorage:
    """Evidence photos in an S3-compatible bucket (minio client)."""

    def __init__(self, client: Minio | None = None, bucket_name: str | None = None):
        self.client = client or Minio(
            settings.S3_URL.replace("http://", "").replace("https://", ""),
            access_key=settings.S3_ACCESS_KEY_ID,
            secret_key=settings.S3_SECRET_ACCESS_KEY,
            secure=settings.S3_SECURE,
        )
        self.bucket_name = bucket_name or settings.S3_PUBLIC_BUCKET_NAME
        self._bucket_checked = False

    def _ensure_bucket_exists(self) -> None:
        if self._bucket_checked:
            return
        if not self.client.bucket_exists(self.bucket_name):
            self.client.make_bucket(self.bucket_name)
        self._bucket_checked = True

    def _put(self, key: str, data: bytes, content_type: str) -> None:
        self._ensure_bucket_exists()
        self.client.put_object(self.bucket_name, key, BytesIO(data), len(data), content_type=content_type)

    async def upload_photo(self, user_id: UUID, file_name: str | None, data: bytes, content_type: str) -> str:
        """Upload one photo and return its public URL"""
        key = build_photo_key(user_id, file_name)
        # minio is blocking
        await run_in_threadpool(self._put, key, data, content_type)
        logger.info(f"Uploaded photo {key} ({len(data)} bytes)")
        return f"{settings.S3_URL.rstrip('/')}/{self.bucket_name}/{key}"
