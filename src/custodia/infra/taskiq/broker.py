"""TaskIQ broker configuration with Redis Stream.

Factory functions for the broker and result backend that carry
delete-user-data activity invocations. Redis Stream gives reliable
delivery with acknowledgements, so an activity interrupted mid-way is
re-delivered; the cascade is safe to re-run.

Usage:
    # Start worker (the module must register the activity task)
    # taskiq worker myapp.worker:broker
"""

from __future__ import annotations

from functools import lru_cache

from taskiq_redis import RedisAsyncResultBackend, RedisStreamBroker

from custodia.infra.taskiq.settings import get_taskiq_settings


@lru_cache(maxsize=1)
def get_result_backend() -> RedisAsyncResultBackend[object]:
    """Get or create the TaskIQ result backend."""
    settings = get_taskiq_settings()
    return RedisAsyncResultBackend(
        redis_url=settings.redis_url,
        result_ex_time=settings.result_ttl,
    )


@lru_cache(maxsize=1)
def get_broker() -> RedisStreamBroker:
    """Get or create the TaskIQ broker.

    Returns:
        RedisStreamBroker configured from TaskIQSettings with result backend.
    """
    settings = get_taskiq_settings()
    return RedisStreamBroker(
        url=settings.redis_url,
        queue_name=settings.stream_prefix,
    ).with_result_backend(get_result_backend())
