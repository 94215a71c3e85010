"""Activity result model and the result type used to chain fallible steps.

Every step of the backup-and-delete pipeline returns either ``Ok(value)``
or ``Err(failure)``. Ordinary failures never travel as exceptions: a caller
checks the variant and returns early on ``Err``, so the first failure
short-circuits everything after it.

The failure kinds form a closed union discriminated on ``kind``. Consumers
must handle all of them and end their ``match`` with ``typing.assert_never``.

Example:
    >>> from custodia.foundation.domain.failures import Err, Ok, QueryFailure
    >>> result = Err(QueryFailure(reason="timeout", query="findMessages"))
    >>> isinstance(result, Ok)
    False
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

__all__ = [
    "ActivityResult",
    "ActivityResultFailure",
    "ActivityResultSuccess",
    "BlobCreationFailure",
    "DocumentDeleteFailure",
    "Err",
    "InvalidInputFailure",
    "Ok",
    "QueryFailure",
    "Result",
    "UserNotFoundFailure",
    "parse_activity_result",
]

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying the step's value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying a typed failure."""

    failure: E


Result = Ok[T] | Err[E]


class _Outcome(BaseModel):
    model_config = ConfigDict(frozen=True)


class ActivityResultSuccess(_Outcome):
    """Every record was archived and deleted."""

    kind: Literal["SUCCESS"] = "SUCCESS"


class InvalidInputFailure(_Outcome):
    """The activity input could not be decoded. Not retryable as is."""

    kind: Literal["INVALID_INPUT_FAILURE"] = "INVALID_INPUT_FAILURE"
    reason: str

    @property
    def retryable(self) -> bool:
        return False


class QueryFailure(_Outcome):
    """A read or enumeration against the live store failed.

    Attributes:
        reason: Error message reported by the store.
        query: Name of the query that failed, when known.
    """

    kind: Literal["QUERY_FAILURE"] = "QUERY_FAILURE"
    reason: str
    query: str | None = None

    @property
    def retryable(self) -> bool:
        return True


class BlobCreationFailure(_Outcome):
    """Writing a backup object to cold storage failed.

    Retrying is safe because archive writes overwrite the same object.
    """

    kind: Literal["BLOB_FAILURE"] = "BLOB_FAILURE"
    reason: str

    @property
    def retryable(self) -> bool:
        return True


class UserNotFoundFailure(_Outcome):
    """The target user does not exist. Reserved, not raised by the cascade."""

    kind: Literal["USER_NOT_FOUND_FAILURE"] = "USER_NOT_FOUND_FAILURE"

    @property
    def retryable(self) -> bool:
        return False


class DocumentDeleteFailure(_Outcome):
    """Deleting a record failed after its backup was written."""

    kind: Literal["DELETE_FAILURE"] = "DELETE_FAILURE"
    reason: str

    @property
    def retryable(self) -> bool:
        return True


ActivityResultFailure = Annotated[
    UserNotFoundFailure
    | QueryFailure
    | InvalidInputFailure
    | BlobCreationFailure
    | DocumentDeleteFailure,
    Field(discriminator="kind"),
]

ActivityResult = Annotated[
    ActivityResultSuccess
    | UserNotFoundFailure
    | QueryFailure
    | InvalidInputFailure
    | BlobCreationFailure
    | DocumentDeleteFailure,
    Field(discriminator="kind"),
]

_activity_result_adapter: TypeAdapter[ActivityResult] = TypeAdapter(ActivityResult)


def parse_activity_result(data: object) -> ActivityResult:
    """Decode a serialized activity result back into its model.

    Args:
        data: A mapping as produced by ``model_dump()``.

    Returns:
        The success or failure model selected by ``kind``.

    Raises:
        pydantic.ValidationError: If ``kind`` is unknown or fields are missing.
    """
    return _activity_result_adapter.validate_python(data)
