"""TaskIQ configuration using Pydantic settings.

Provides type-safe configuration for the broker that delivers
delete-user-data activity invocations to workers. Settings are loaded
from environment variables with ``TASKIQ_`` prefix.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TaskIQSettings(BaseSettings):
    """Configuration for the TaskIQ broker.

    Environment Variables:
        TASKIQ_REDIS_URL: Redis URL for the broker
            (default: redis://localhost:6379/1)
        TASKIQ_RESULT_TTL: Result backend TTL in seconds (default: 3600)
        TASKIQ_STREAM_PREFIX: Redis stream name (default: custodia)

    Example:
        >>> settings = TaskIQSettings()
        >>> settings.redis_url
        'redis://localhost:6379/1'
    """

    model_config = SettingsConfigDict(
        env_prefix="TASKIQ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    redis_url: str = Field(
        default="redis://localhost:6379/1",
        description="Redis URL for TaskIQ broker (database 1 by default)",
    )
    result_ttl: int = Field(
        default=3600,
        ge=60,
        le=86400,
        description="Result backend TTL in seconds",
    )
    stream_prefix: str = Field(
        default="custodia",
        description="Redis stream name",
    )


@lru_cache(maxsize=1)
def get_taskiq_settings() -> TaskIQSettings:
    """Get cached TaskIQ settings singleton."""
    return TaskIQSettings()
