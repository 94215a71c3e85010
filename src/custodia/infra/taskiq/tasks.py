"""Registration of the delete-user-data activity as a TaskIQ task.

The activity's collaborators (record stores, archive writer) belong to the
host application, so the task is registered at runtime against the
host's handler instead of being declared at import time.

Usage:
    from custodia.domain.user_data import create_delete_user_data_activity_handler
    from custodia.infra.taskiq import get_broker, register_delete_user_data_task

    broker = get_broker()
    handler = create_delete_user_data_activity_handler(...)
    delete_user_data = register_delete_user_data_task(broker, handler)

    # Orchestrator side
    task = await delete_user_data.kiq(
        {"fiscalCode": "AAAAAA00A00A000A", "userDataDeleteRequestId": "REQ1"}
    )
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError
from taskiq import TaskiqEvents

from custodia.foundation.domain.failures import parse_activity_result
from custodia.infra.observability.logging import configure_logging
from custodia.infra.taskiq.errors import ResultError, SerializationError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from taskiq import AsyncBroker, AsyncTaskiqDecoratedTask, TaskiqState

    from custodia.foundation.domain.failures import ActivityResult

DELETE_USER_DATA_TASK_NAME = "delete_user_data"

logger = logging.getLogger(__name__)


async def _configure_worker_logging(state: TaskiqState) -> None:
    configure_logging()
    logger.info("worker_logging_configured")


def install_worker_hooks(broker: AsyncBroker) -> None:
    """Configure structured logging when a worker process starts."""
    broker.add_event_handler(TaskiqEvents.WORKER_STARTUP, _configure_worker_logging)


def register_delete_user_data_task(
    broker: AsyncBroker,
    handler: Callable[[object], Awaitable[ActivityResult]],
    task_name: str = DELETE_USER_DATA_TASK_NAME,
) -> AsyncTaskiqDecoratedTask[[dict[str, Any]], dict[str, Any]]:
    """Expose the activity handler as a broker task.

    The task returns the activity result as a plain mapping (``kind`` plus
    failure fields, unset ones omitted) so it survives any result backend
    serializer. Decode it with
    :func:`custodia.foundation.domain.failures.parse_activity_result`.

    Args:
        broker: Broker the task is registered on.
        handler: Activity function built by
            ``create_delete_user_data_activity_handler``.
        task_name: Name the orchestrator uses to invoke the task.

    Returns:
        The decorated task, ready for ``.kiq(...)``.
    """

    async def delete_user_data(activity_input: dict[str, Any]) -> dict[str, Any]:
        result = await handler(activity_input)
        try:
            return result.model_dump(mode="json", exclude_none=True)
        except PydanticSerializationError as exc:
            msg = f"cannot serialize activity result of kind {result.kind}"
            raise SerializationError(msg) from exc

    return broker.task(task_name=task_name)(delete_user_data)


def decode_task_result(value: object) -> ActivityResult:
    """Turn the mapping returned by the task back into an activity result.

    Raises:
        ResultError: If the value is not a known activity result.
    """
    try:
        return parse_activity_result(value)
    except ValidationError as exc:
        msg = f"malformed delete_user_data result: {value!r}"
        raise ResultError(msg) from exc
