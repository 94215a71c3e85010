"""Custodia Infra Archive -- S3-compatible cold storage for user-data backups."""

from custodia.infra.archive.blob_writer import S3BlobWriter
from custodia.infra.archive.settings import ArchiveSettings, get_archive_settings

__all__ = [
    "ArchiveSettings",
    "S3BlobWriter",
    "get_archive_settings",
]
