"""Custodia Infra Observability -- structlog logging for the deletion worker."""

from __future__ import annotations

from custodia.infra.observability.logging import (
    LoggingSettings,
    configure_logging,
    get_logger,
)

__all__ = [
    "LoggingSettings",
    "configure_logging",
    "get_logger",
]
