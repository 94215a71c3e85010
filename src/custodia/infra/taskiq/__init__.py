"""Custodia Infra TaskIQ -- broker and task registration for the deletion activity."""

from custodia.infra.taskiq.broker import get_broker, get_result_backend
from custodia.infra.taskiq.errors import (
    BrokerError,
    ResultError,
    SerializationError,
    TaskRuntimeError,
)
from custodia.infra.taskiq.lifespan import broker_lifespan
from custodia.infra.taskiq.settings import TaskIQSettings, get_taskiq_settings
from custodia.infra.taskiq.tasks import (
    DELETE_USER_DATA_TASK_NAME,
    decode_task_result,
    install_worker_hooks,
    register_delete_user_data_task,
)

__all__ = [
    "DELETE_USER_DATA_TASK_NAME",
    "BrokerError",
    "ResultError",
    "SerializationError",
    "TaskIQSettings",
    "TaskRuntimeError",
    "broker_lifespan",
    "decode_task_result",
    "get_broker",
    "get_result_backend",
    "get_taskiq_settings",
    "install_worker_hooks",
    "register_delete_user_data_task",
]
