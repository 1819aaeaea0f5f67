"""Tests for the object storage client."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from newshub.config import Settings
from newshub.db.storage import ObjectStorage
from newshub.exceptions import RemoteOperationError


def _client_context(client: MagicMock) -> MagicMock:
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=client)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


@pytest.fixture
def settings() -> Settings:
    return Settings(aws_region="eu-west-1", storage_public_url=None)


@pytest.fixture
def s3_client() -> MagicMock:
    client = MagicMock()
    client.put_object = AsyncMock()
    client.head_bucket = AsyncMock()
    client.create_bucket = AsyncMock()
    return client


@pytest.fixture
def object_storage(settings, s3_client) -> ObjectStorage:
    store = ObjectStorage(settings)
    with patch.object(ObjectStorage, "get_client", return_value=_client_context(s3_client)):
        yield store


class TestBuckets:
    def test_bucket_per_kind(self, settings):
        store = ObjectStorage(settings)
        assert store.bucket_for("image") == "article-images"
        assert store.bucket_for("attachment") == "article-attachments"


class TestPublicUrl:
    def test_virtual_hosted_s3_url(self, settings):
        store = ObjectStorage(settings)
        assert (
            store.public_url("article-images", "1-abc.png")
            == "https://article-images.s3.eu-west-1.amazonaws.com/1-abc.png"
        )

    def test_configured_public_base(self):
        store = ObjectStorage(Settings(storage_public_url="https://files.example.com/public/"))
        assert (
            store.public_url("article-attachments", "1-abc.pdf")
            == "https://files.example.com/public/article-attachments/1-abc.pdf"
        )


class TestUpload:
    @pytest.mark.asyncio
    async def test_puts_object_and_returns_url(self, object_storage, s3_client):
        url = await object_storage.upload("attachment", "1-abc.pdf", b"%PDF", "application/pdf")

        s3_client.put_object.assert_awaited_once_with(
            Bucket="article-attachments",
            Key="1-abc.pdf",
            Body=b"%PDF",
            ContentType="application/pdf",
        )
        assert url.endswith("/1-abc.pdf")

    @pytest.mark.asyncio
    async def test_store_rejection_is_reported(self, object_storage, s3_client):
        s3_client.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject"
        )

        with pytest.raises(RemoteOperationError, match="Failed to upload file"):
            await object_storage.upload("image", "1-abc.png", b"x")


class TestEnsureBuckets:
    @pytest.mark.asyncio
    async def test_creates_missing_buckets(self, object_storage, s3_client):
        s3_client.head_bucket.side_effect = [
            None,
            ClientError({"Error": {"Code": "404", "Message": "Not Found"}}, "HeadBucket"),
        ]

        await object_storage.ensure_buckets()

        s3_client.create_bucket.assert_awaited_once_with(
            Bucket="article-attachments",
            CreateBucketConfiguration={"LocationConstraint": "eu-west-1"},
        )
