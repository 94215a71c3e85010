"""Error hierarchy of the activity task runtime.

Activity failures (query, blob, delete...) are results, not exceptions.
These exceptions cover the runtime around them and carry a ``transient``
flag that tells the orchestrator whether re-delivery can help.
"""

from __future__ import annotations


class TaskRuntimeError(Exception):
    """Base exception for all task runtime errors."""

    #: Whether this error type is considered transient (retryable).
    transient: bool = False


class BrokerError(TaskRuntimeError):
    """Raised when broker startup/shutdown or connection fails."""

    transient: bool = True


class SerializationError(TaskRuntimeError):
    """Raised when a task result cannot be serialized.

    Permanent -- retrying won't fix a serialization mismatch.
    """

    transient: bool = False


class ResultError(TaskRuntimeError):
    """Raised when a task result is missing or malformed."""

    transient: bool = True
