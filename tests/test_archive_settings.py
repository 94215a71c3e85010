"""Unit tests for custodia.infra.archive.settings."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from custodia.infra.archive.settings import ArchiveSettings, get_archive_settings


@pytest.mark.unit
class TestArchiveSettings:
    def test_container_name_is_required(self) -> None:
        with patch.dict("os.environ", {}, clear=True), pytest.raises(ValidationError):
            ArchiveSettings(_env_file=None)  # type: ignore[call-arg]

    def test_blank_container_name_rejected(self) -> None:
        with pytest.raises(ValidationError, match="container_name must not be empty"):
            ArchiveSettings(container_name="  ")

    def test_from_env_vars(self) -> None:
        env = {
            "USER_DATA_BACKUP_CONTAINER_NAME": "user-data-backup",
            "USER_DATA_BACKUP_ENDPOINT_URL": "http://localhost:9000",
            "USER_DATA_BACKUP_SECRET_ACCESS_KEY": "s3cr3t",
        }
        with patch.dict("os.environ", env, clear=True):
            settings = ArchiveSettings()  # type: ignore[call-arg]
        assert settings.container_name == "user-data-backup"
        assert settings.endpoint_url == "http://localhost:9000"
        assert "s3cr3t" not in repr(settings)

    def test_client_kwargs_minimal(self) -> None:
        settings = ArchiveSettings(container_name="user-data-backup")
        assert settings.client_kwargs() == {"service_name": "s3"}

    def test_client_kwargs_full(self) -> None:
        settings = ArchiveSettings(
            container_name="user-data-backup",
            endpoint_url="http://localhost:9000",
            region_name="eu-south-1",
            access_key_id="AKIA",
            secret_access_key="s3cr3t",
        )
        assert settings.client_kwargs() == {
            "service_name": "s3",
            "endpoint_url": "http://localhost:9000",
            "region_name": "eu-south-1",
            "aws_access_key_id": "AKIA",
            "aws_secret_access_key": "s3cr3t",
        }

    def test_get_archive_settings_is_cached(self) -> None:
        get_archive_settings.cache_clear()
        env = {"USER_DATA_BACKUP_CONTAINER_NAME": "user-data-backup"}
        with patch.dict("os.environ", env, clear=True):
            assert get_archive_settings() is get_archive_settings()
        get_archive_settings.cache_clear()
