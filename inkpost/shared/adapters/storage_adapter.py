"""
Storage adapter - S3 image uploads.

Provides:
- Image upload under a unique key
- Public URL construction for the stored object

Blog cover images and profile pictures both go through here. Only the URL
is persisted in Postgres.
"""

import logging
import mimetypes
import uuid
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from inkpost.config.settings import settings
from inkpost.shared.core.exceptions import ExternalServiceError, ValidationError

logger = logging.getLogger(__name__)


ALLOWED_IMAGE_TYPES = frozenset({
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
})


class StorageAdapter:
    """
    Adapter for S3 object storage.
    """

    def __init__(
        self,
        bucket: Optional[str] = None,
        region: Optional[str] = None,
        public_base_url: Optional[str] = None,
        client=None,
    ):
        """
        Initialize storage adapter.

        Args:
            bucket: Bucket name
            region: AWS region
            public_base_url: URL prefix objects are served from (CDN)
            client: Pre-built boto3 S3 client (tests, custom endpoints)
        """
        self.bucket = bucket or settings.S3_BUCKET_NAME
        self.region = region or settings.AWS_REGION
        self.public_base_url = (public_base_url or settings.S3_PUBLIC_BASE_URL).rstrip("/")
        self._client = client

    @property
    def client(self):
        """Lazy-loaded S3 client."""
        if self._client is None:
            if settings.AWS_ACCESS_KEY_ID and settings.AWS_SECRET_ACCESS_KEY:
                self._client = boto3.client(
                    "s3",
                    region_name=self.region,
                    aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                    aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                )
            else:
                self._client = boto3.client("s3", region_name=self.region)
        return self._client

    def public_url(self, key: str) -> str:
        """URL under which an uploaded object is served."""
        if self.public_base_url:
            return f"{self.public_base_url}/{key}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"

    def upload_image(
        self,
        data: bytes,
        content_type: Optional[str],
        folder: str,
    ) -> str:
        """
        Upload an image and return its public URL.

        Args:
            data: Raw file bytes
            content_type: MIME type reported by the client
            folder: Key prefix, e.g. "blogs" or "profiles"

        Returns:
            Public URL of the stored image

        Raises:
            ValidationError: If the payload is empty or not an image
            ExternalServiceError: If S3 rejects the upload
        """
        if not data:
            raise ValidationError("Uploaded file is empty", details={"field": "file"})
        if content_type not in ALLOWED_IMAGE_TYPES:
            raise ValidationError(
                "Only image uploads are allowed",
                details={"field": "file", "content_type": content_type},
            )

        extension = mimetypes.guess_extension(content_type) or ""
        key = f"{folder}/{uuid.uuid4().hex}{extension}"

        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to upload %s to %s: %s", key, self.bucket, e)
            raise ExternalServiceError("S3", "Image upload failed") from e

        logger.info("Uploaded image %s (%d bytes)", key, len(data))
        return self.public_url(key)


_storage_adapter: Optional[StorageAdapter] = None


def get_storage_adapter() -> StorageAdapter:
    """Get or create storage adapter singleton."""
    global _storage_adapter
    if _storage_adapter is None:
        _storage_adapter = StorageAdapter()
    return _storage_adapter
