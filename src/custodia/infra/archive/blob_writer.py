"""S3 adapter for the blob writer port.

Stores each backup with a single ``PutObject`` call, so an object is
either fully written or not visible at all. The boto3 client is blocking;
calls run in a worker thread to keep the event loop free.

Example:
    >>> from custodia.infra.archive import S3BlobWriter
    >>> writer = S3BlobWriter.from_settings()
    >>> await writer.put_text("user-data-backup", "REQ1-1700000000000/profile--0.json", "{}")
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import boto3
from botocore.config import Config as BotoConfig

from custodia.infra.archive.settings import get_archive_settings

if TYPE_CHECKING:
    from custodia.infra.archive.settings import ArchiveSettings

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class S3BlobWriter:
    """Blob writer backed by an S3-compatible object store.

    Attributes:
        _client: boto3 S3 client, created lazily unless injected.
        _client_kwargs: Arguments used to build the client.
    """

    def __init__(self, client: Any = None, **client_kwargs: Any) -> None:
        """Initialize the writer.

        Args:
            client: Prebuilt boto3 S3 client. Built on first use when omitted.
            **client_kwargs: Arguments forwarded to ``boto3.client``.
        """
        self._client = client
        self._client_kwargs = {"service_name": "s3", **client_kwargs}

    @classmethod
    def from_settings(cls, settings: ArchiveSettings | None = None) -> S3BlobWriter:
        """Create a writer configured from ``ArchiveSettings``."""
        if settings is None:
            settings = get_archive_settings()
        return cls(**settings.client_kwargs())

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = boto3.client(
                **self._client_kwargs,
                config=BotoConfig(retries={"max_attempts": 3, "mode": "standard"}),
            )
        return self._client

    async def put_text(self, container: str, path: str, text: str) -> None:
        """Write ``text`` as the object ``path`` of bucket ``container``.

        Raises:
            botocore.exceptions.BotoCoreError: On transport errors.
            botocore.exceptions.ClientError: When the server rejects the write.
        """
        client = self._get_client()
        body = text.encode("utf-8")

        def _put() -> None:
            client.put_object(
                Bucket=container,
                Key=path,
                Body=body,
                ContentType=JSON_CONTENT_TYPE,
            )

        await asyncio.to_thread(_put)
        logger.debug(
            "blob_written",
            extra={"container": container, "path": path, "size": len(body)},
        )
