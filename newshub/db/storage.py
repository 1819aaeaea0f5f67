"""Object storage for article images and attachments (S3 API)."""

import logging
from typing import Literal
from urllib.parse import quote

import aioboto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from newshub.config import Settings, get_settings
from newshub.exceptions import RemoteOperationError

logger = logging.getLogger(__name__)

FileKind = Literal["image", "attachment"]


class ObjectStorage:
    """Async client for the two public upload buckets."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.session = aioboto3.Session(
            aws_access_key_id=self.settings.aws_access_key_id or None,
            aws_secret_access_key=self.settings.aws_secret_access_key or None,
            region_name=self.settings.aws_region,
        )
        # Failed uploads are reported to the user, never retried
        self.config = Config(retries={"max_attempts": 1, "mode": "standard"})

    def get_client(self):
        """Get S3 client context manager."""
        kwargs = {"config": self.config}
        if self.settings.storage_endpoint_url:
            kwargs["endpoint_url"] = self.settings.storage_endpoint_url
        return self.session.client("s3", **kwargs)

    def bucket_for(self, kind: FileKind) -> str:
        """Images and generic attachments live in separate buckets."""
        if kind == "image":
            return self.settings.images_bucket
        return self.settings.attachments_bucket

    def public_url(self, bucket: str, name: str) -> str:
        """Resolve the publicly readable URL of an uploaded object."""
        key = quote(name)
        if self.settings.storage_public_url:
            return f"{self.settings.storage_public_url.rstrip('/')}/{bucket}/{key}"
        return f"https://{bucket}.s3.{self.settings.aws_region}.amazonaws.com/{key}"

    async def upload(
        self,
        kind: FileKind,
        name: str,
        data: bytes,
        content_type: str | None = None,
    ) -> str:
        """Store ``data`` under ``name`` and return its public URL."""
        bucket = self.bucket_for(kind)
        extra = {"ContentType": content_type} if content_type else {}
        try:
            async with self.get_client() as client:
                await client.put_object(Bucket=bucket, Key=name, Body=data, **extra)
        except (BotoCoreError, ClientError) as e:
            logger.exception("Upload of %s to bucket %s failed", name, bucket)
            raise RemoteOperationError("Failed to upload file") from e

        logger.info("Uploaded %s to %s (%d bytes)", name, bucket, len(data))
        return self.public_url(bucket, name)

    async def ensure_buckets(self) -> None:
        """Create the upload buckets if they don't exist."""
        create_kwargs = {}
        if self.settings.aws_region != "us-east-1":
            create_kwargs["CreateBucketConfiguration"] = {
                "LocationConstraint": self.settings.aws_region
            }

        async with self.get_client() as client:
            for bucket in (self.settings.images_bucket, self.settings.attachments_bucket):
                try:
                    await client.head_bucket(Bucket=bucket)
                except ClientError:
                    await client.create_bucket(Bucket=bucket, **create_kwargs)
                    logger.info("Created bucket %s", bucket)


_storage: ObjectStorage | None = None


def get_storage() -> ObjectStorage:
    """Dependency returning the shared storage client."""
    global _storage
    if _storage is None:
        _storage = ObjectStorage()
    return _storage
