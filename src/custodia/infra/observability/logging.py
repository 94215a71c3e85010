"""Structured logging configuration using structlog.

This module provides environment-aware structured logging with:
- JSON output for production environments
- Console output with colors for development
- Personal data redaction (fiscal codes, credentials)
- Standard library records rendered through the same processor chain

Usage:
    # During worker startup
    from custodia.infra.observability.logging import configure_logging
    configure_logging()

    # In application code
    from custodia.infra.observability import get_logger
    logger = get_logger(__name__)
    logger.info("deletion_started", request_id="REQ1")
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from collections.abc import MutableMapping

# Type alias for structlog processor
Processor = structlog.types.Processor

# Field names whose values never reach the logs
SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "fiscal_code",
        "fiscalcode",
        "password",
        "token",
        "authorization",
        "api_key",
        "secret",
        "secret_access_key",
        "credential",
    }
)

REDACTED_VALUE: str = "***REDACTED***"


class LoggingSettings(BaseSettings):
    """Logging configuration settings from environment variables.

    Loads configuration from environment variables:
    - LOG_LEVEL: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Environment name (development, staging, production, test)

    Example:
        >>> settings = LoggingSettings(log_level="DEBUG", environment="production")
        >>> settings.use_json_logs
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Minimum log level to output",
    )
    environment: str = Field(
        default="development",
        alias="ENVIRONMENT",
        description="Environment name for format selection",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase."""
        if isinstance(v, str):
            return v.upper()
        return str(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level.

        Raises:
            ValueError: If log level is not a valid Python logging level.
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v not in valid_levels:
            msg = f"log_level must be one of {valid_levels}"
            raise ValueError(msg)
        return v

    @property
    def use_json_logs(self) -> bool:
        """JSON logs in production, console rendering elsewhere."""
        return self.environment == "production"

    @property
    def log_level_int(self) -> int:
        """Convert log level string to logging module constant."""
        return getattr(logging, self.log_level, logging.INFO)


class SensitiveDataProcessor:
    """Structlog processor to redact personal and secret fields.

    Redacts values for fields matching:
    1. Exact field names in SENSITIVE_FIELDS (case-insensitive)
    2. Field names containing "fiscal_code", "password" or "token"

    Example:
        >>> processor = SensitiveDataProcessor()
        >>> event_dict = {"event": "deleting", "fiscal_code": "AAAAAA00A00A000A"}
        >>> processor(None, "info", event_dict)["fiscal_code"]
        '***REDACTED***'
    """

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        for key in list(event_dict.keys()):
            if self._is_sensitive(key):
                event_dict[key] = REDACTED_VALUE
        return event_dict

    def _is_sensitive(self, key: str) -> bool:
        key_lower = key.lower()
        if key_lower in SENSITIVE_FIELDS:
            return True
        return any(part in key_lower for part in ("fiscal_code", "password", "token"))


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached LoggingSettings instance.

    Clear cache with ``get_logging_settings.cache_clear()`` for testing.
    """
    return LoggingSettings()


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        SensitiveDataProcessor(),
    ]


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog, and route standard library logging through it.

    Should be called once during worker startup.

    Args:
        settings: Optional LoggingSettings instance. If not provided,
            settings are loaded from environment variables.
    """
    if settings is None:
        settings = get_logging_settings()

    renderer: Processor
    if settings.use_json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    processors = _shared_processors()
    processors.append(structlog.processors.format_exc_info)
    processors.append(renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_int),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Records from logging.getLogger() (domain modules, boto3, taskiq)
    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.stdlib.ExtraAdder(),
                *_shared_processors(),
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(settings.log_level_int)


def get_logger(name: str | None = None) -> structlog.typing.WrappedLogger:
    """Get a structlog logger bound to the given name.

    Args:
        name: Logger name (typically __name__ from calling module).
            If None, returns unbound logger.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("message_cascade_started", message_id="01H")
    """
    logger = structlog.get_logger()
    if name is not None:
        logger = logger.bind(logger=name)
    return logger
