"""File uploads to the article buckets."""

import logging
import secrets
import string
import time

from newshub.db.storage import FileKind, ObjectStorage
from newshub.exceptions import UploadTooLargeError
from newshub.schemas.article import Attachment

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_lowercase


def _random_suffix(length: int = 11) -> str:
    return "".join(secrets.choice(_BASE36) for _ in range(length))


def generate_object_name(filename: str, now_ms: int | None = None) -> str:
    """
    Collision-resistant storage name: ``{epoch_ms}-{random}.{ext}``.

    The extension is whatever follows the last dot of the original name
    (the whole name when there is no dot).
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    extension = filename.rsplit(".", 1)[-1]
    return f"{now_ms}-{_random_suffix()}.{extension}"


def check_size(size: int, max_bytes: int, filename: str, kind: FileKind) -> None:
    """Raise ``UploadTooLargeError`` for a file over ``max_bytes``."""
    if size > max_bytes:
        logger.info("Rejected %s upload %r: %d > %d bytes", kind, filename, size, max_bytes)
        raise UploadTooLargeError(size, max_bytes)


async def upload_file(
    storage: ObjectStorage,
    data: bytes,
    filename: str,
    kind: FileKind,
    max_bytes: int,
    content_type: str | None = None,
) -> Attachment:
    """
    Validate and store a single file.

    Raises ``UploadTooLargeError`` before anything is transmitted when the
    file is over ``max_bytes``; store failures surface as
    ``RemoteOperationError`` from the storage client.
    """
    check_size(len(data), max_bytes, filename, kind)

    name = generate_object_name(filename)
    url = await storage.upload(kind, name, data, content_type=content_type)
    return Attachment(url=url, filename=filename, kind=kind)
