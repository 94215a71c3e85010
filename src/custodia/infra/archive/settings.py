"""User-data archive configuration using Pydantic settings.

Provides type-safe configuration for the cold-storage container that
receives record backups before deletion. Settings are loaded from
environment variables with the ``USER_DATA_BACKUP_`` prefix.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ArchiveSettings(BaseSettings):
    """Configuration for the user-data backup storage.

    Environment Variables:
        USER_DATA_BACKUP_CONTAINER_NAME: Bucket receiving backups (required)
        USER_DATA_BACKUP_ENDPOINT_URL: S3-compatible endpoint (default: AWS)
        USER_DATA_BACKUP_REGION_NAME: Storage region (optional)
        USER_DATA_BACKUP_ACCESS_KEY_ID: Access key (optional, falls back to
            the default credential chain)
        USER_DATA_BACKUP_SECRET_ACCESS_KEY: Secret key (hidden in logs)

    Example:
        >>> settings = ArchiveSettings(container_name="user-data-backup")
        >>> settings.client_kwargs()
        {'service_name': 's3'}
    """

    model_config = SettingsConfigDict(
        env_prefix="USER_DATA_BACKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    container_name: str = Field(
        description="Bucket receiving user-data backups",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="S3-compatible endpoint URL",
    )
    region_name: str | None = Field(
        default=None,
        description="Storage region",
    )
    access_key_id: str | None = Field(
        default=None,
        description="Access key id",
    )
    secret_access_key: SecretStr | None = Field(
        default=None,
        description="Secret access key (hidden in logs)",
    )

    @field_validator("container_name")
    @classmethod
    def validate_container_name(cls, v: str) -> str:
        """Reject blank container names."""
        if not v.strip():
            msg = "container_name must not be empty"
            raise ValueError(msg)
        return v

    def client_kwargs(self) -> dict[str, str]:
        """Keyword arguments for ``boto3.client``.

        Returns:
            Only the options that are set, so boto3 defaults apply otherwise.
        """
        kwargs = {"service_name": "s3"}
        if self.endpoint_url:
            kwargs["endpoint_url"] = self.endpoint_url
        if self.region_name:
            kwargs["region_name"] = self.region_name
        if self.access_key_id:
            kwargs["aws_access_key_id"] = self.access_key_id
        if self.secret_access_key is not None:
            kwargs["aws_secret_access_key"] = self.secret_access_key.get_secret_value()
        return kwargs


@lru_cache(maxsize=1)
def get_archive_settings() -> ArchiveSettings:
    """Get cached archive settings singleton.

    Returns:
        ArchiveSettings instance loaded from environment.

    Raises:
        pydantic.ValidationError: If the container name is not configured.
    """
    return ArchiveSettings()  # type: ignore[call-arg]
