"""Backup of single records into the user-data archive container.

Each record becomes one JSON object. Objects of one deletion request share
a folder named ``<request id>-<epoch milliseconds>`` so that a request can
be restored or inspected as a unit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TypeVar

from pydantic_core import to_json

from custodia.foundation.domain.failures import BlobCreationFailure, Err, Ok

if TYPE_CHECKING:
    from custodia.foundation.domain.failures import Result
    from custodia.foundation.domain.ports import BlobWriterPort

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ArchiveDestination:
    """Where backups of one deletion request are written.

    Attributes:
        blob_writer: Adapter performing the actual put.
        container_name: Target container (bucket).
        folder: Optional folder prefix, without trailing slash.
    """

    blob_writer: BlobWriterPort
    container_name: str
    folder: str | None = None


def backup_folder_name(request_id: str, processed_at: datetime | None = None) -> str:
    """Build the per-request backup folder name.

    Args:
        request_id: Identifier of the user-data deletion request.
        processed_at: Processing time; defaults to now (UTC).

    Returns:
        ``<request_id>-<epoch milliseconds>``.
    """
    moment = processed_at or datetime.now(UTC)
    return f"{request_id}-{int(moment.timestamp() * 1000)}"


def blob_path(folder: str | None, blob_name: str) -> str:
    """Return the object path of ``blob_name`` inside ``folder``."""
    return f"{folder}/{blob_name}" if folder else blob_name


async def save_data_to_blob(
    destination: ArchiveDestination,
    blob_name: str,
    data: T,
) -> Result[T, BlobCreationFailure]:
    """Save a record into its dedicated backup object.

    Args:
        destination: Container and folder to write into.
        blob_name: Object name, relative to the destination folder.
        data: Serializable record (pydantic model or JSON-compatible value).

    Returns:
        ``Ok(data)`` with the untouched record, or ``Err(BlobCreationFailure)``.
    """
    path = blob_path(destination.folder, blob_name)
    try:
        payload = to_json(data, by_alias=True).decode("utf-8")
        await destination.blob_writer.put_text(destination.container_name, path, payload)
    except Exception as exc:
        return Err(BlobCreationFailure(reason=str(exc) or type(exc).__name__))

    logger.debug(
        "user_data_backup_saved",
        extra={"container": destination.container_name, "path": path},
    )
    return Ok(data)
