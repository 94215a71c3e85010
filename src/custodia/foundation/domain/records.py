"""Read-only models of the records a user-data deletion touches.

The records are read from the live store and written verbatim into the
archive, so every model keeps the extra fields it was loaded with.
Validation here covers only what the cascade relies on: the keys used to
delete a record and the parts of its archive object name.
"""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints

# Italian fiscal code (codice fiscale), omocodia letters included.
FISCAL_CODE_PATTERN = re.compile(
    r"^[A-Z]{6}[0-9LMNPQRSTUV]{2}[ABCDEHLMPRST][0-9LMNPQRSTUV]{2}[A-Z][0-9LMNPQRSTUV]{3}[A-Z]$"
)


def _validate_fiscal_code(value: str) -> str:
    if not FISCAL_CODE_PATTERN.match(value):
        msg = f"Invalid fiscal code: {value!r}"
        raise ValueError(msg)
    return value


FiscalCode = Annotated[str, AfterValidator(_validate_fiscal_code)]
NonEmptyString = Annotated[str, StringConstraints(min_length=1)]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class RetrievedProfile(_Record):
    """One stored version of a user profile."""

    fiscal_code: FiscalCode = Field(alias="fiscalCode")
    id: NonEmptyString
    version: int = Field(ge=0)


class RetrievedMessage(_Record):
    """A message sent to a user, without its content."""

    fiscal_code: FiscalCode = Field(alias="fiscalCode")
    id: NonEmptyString


class RetrievedMessageStatus(_Record):
    """One stored version of the status of a message."""

    message_id: NonEmptyString = Field(alias="messageId")
    id: NonEmptyString
    version: int = Field(ge=0)


class RetrievedNotification(_Record):
    """A notification generated for a message.

    Not processed by the current cascade.
    """

    fiscal_code: FiscalCode = Field(alias="fiscalCode")
    message_id: NonEmptyString = Field(alias="messageId")
    id: NonEmptyString


class RetrievedNotificationStatus(_Record):
    """One stored version of a notification's delivery status.

    Not processed by the current cascade.
    """

    notification_id: NonEmptyString = Field(alias="notificationId")
    id: NonEmptyString
    version: int = Field(ge=0)


class ActivityInput(BaseModel):
    """Validated input of the delete-user-data activity.

    Accepts the camelCase field names used on the wire as well as the
    Python attribute names.

    Example:
        >>> ActivityInput.model_validate(
        ...     {"fiscalCode": "AAAAAA00A00A000A", "userDataDeleteRequestId": "REQ1"}
        ... ).user_data_delete_request_id
        'REQ1'
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    fiscal_code: FiscalCode = Field(alias="fiscalCode")
    user_data_delete_request_id: NonEmptyString = Field(alias="userDataDeleteRequestId")
