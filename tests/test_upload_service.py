"""Tests for the upload helper."""

import re

import pytest

from newshub.exceptions import RemoteOperationError, UploadTooLargeError
from newshub.services.upload_service import check_size, generate_object_name, upload_file

NAME_RE = re.compile(r"^\d+-[0-9a-z]{11}\.[^.]+$")


class TestGenerateObjectName:
    def test_timestamp_suffix_and_extension(self):
        name = generate_object_name("Quarterly Report.PDF", now_ms=1700000000000)

        assert name.startswith("1700000000000-")
        assert name.endswith(".PDF")
        assert NAME_RE.match(name)

    def test_names_do_not_collide(self):
        names = {generate_object_name("a.png", now_ms=1) for _ in range(50)}
        assert len(names) == 50

    def test_uses_last_extension(self):
        assert generate_object_name("archive.tar.gz").endswith(".gz")


class TestCheckSize:
    def test_at_ceiling_is_accepted(self):
        check_size(1024, 1024, "a.png", "image")

    def test_over_ceiling_is_rejected(self):
        with pytest.raises(UploadTooLargeError) as excinfo:
            check_size(6 * 1024 * 1024, 5 * 1024 * 1024, "a.png", "image")

        assert excinfo.value.message == "File size must be less than 5MB"


class TestUploadFile:
    @pytest.mark.asyncio
    async def test_image_upload_returns_public_reference(self, storage):
        attachment = await upload_file(
            storage, b"\x89PNG", "cover.png", "image", max_bytes=1024, content_type="image/png"
        )

        storage.upload.assert_awaited_once()
        kind, name, data = storage.upload.call_args.args
        assert kind == "image"
        assert NAME_RE.match(name)
        assert data == b"\x89PNG"
        assert storage.upload.call_args.kwargs == {"content_type": "image/png"}
        assert attachment.url == f"https://cdn.example.com/image/{name}"
        assert attachment.filename == "cover.png"
        assert attachment.kind == "image"

    @pytest.mark.asyncio
    async def test_file_at_ceiling_is_accepted(self, storage):
        attachment = await upload_file(storage, b"x" * 10, "notes.pdf", "attachment", max_bytes=10)
        assert attachment.kind == "attachment"

    @pytest.mark.asyncio
    async def test_oversized_file_is_never_sent(self, storage):
        with pytest.raises(UploadTooLargeError) as excinfo:
            await upload_file(
                storage, b"x" * (5 * 1024 * 1024 + 1), "big.png", "image", max_bytes=5 * 1024 * 1024
            )

        assert excinfo.value.message == "File size must be less than 5MB"
        storage.upload.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, storage):
        storage.upload.side_effect = RemoteOperationError("Failed to upload file")

        with pytest.raises(RemoteOperationError):
            await upload_file(storage, b"x", "a.pdf", "attachment", max_bytes=10)
