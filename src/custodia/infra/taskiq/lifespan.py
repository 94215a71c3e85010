"""Broker startup/shutdown for hosts that enqueue activities.

Workers started by the ``taskiq`` CLI manage the broker themselves; a
host process that only kicks tasks wraps its lifetime in
:func:`broker_lifespan`.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from custodia.infra.taskiq.broker import get_broker
from custodia.infra.taskiq.errors import BrokerError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from taskiq import AsyncBroker

logger = logging.getLogger(__name__)


@asynccontextmanager
async def broker_lifespan(broker: AsyncBroker | None = None) -> AsyncIterator[AsyncBroker]:
    """Manage broker lifecycle.

    Startup: call broker.startup()
    Shutdown: call broker.shutdown(), also when the body raises.

    Args:
        broker: Broker to manage; defaults to :func:`get_broker`.

    Raises:
        BrokerError: If the broker fails to start.
    """
    _broker = broker if broker is not None else get_broker()
    try:
        await _broker.startup()
    except Exception as exc:
        msg = f"broker startup failed: {exc}"
        raise BrokerError(msg) from exc
    logger.info("taskiq_lifespan: broker started")

    try:
        yield _broker
    finally:
        await _broker.shutdown()
        logger.info("taskiq_lifespan: broker shut down")
