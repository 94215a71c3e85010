"""Delete-user-data activity: backup and delete everything a user owns.

Walks the user's record tree and runs every record through
backup-then-delete, children before parents:

1. Validate the activity input.
2. Find all messages of the user.
3. For each message: content, then status versions, then the message.
4. Every version of the user's profile.

The first failure anywhere aborts the remaining steps and becomes the
activity result. Failures are logged once, right before being returned.
Re-running a failed activity is safe: backups overwrite the same objects
and deletes of missing records succeed.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Any, assert_never

from pydantic import ValidationError

from custodia.domain.user_data.archive import ArchiveDestination, backup_folder_name
from custodia.domain.user_data.cascades import (
    backup_and_delete_message,
    backup_and_delete_message_content,
    backup_and_delete_message_status,
    backup_and_delete_profile,
)
from custodia.foundation.domain.failures import (
    ActivityResultSuccess,
    BlobCreationFailure,
    DocumentDeleteFailure,
    Err,
    InvalidInputFailure,
    Ok,
    QueryFailure,
    UserNotFoundFailure,
)
from custodia.foundation.domain.records import ActivityInput

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from datetime import datetime

    from custodia.domain.user_data.steps import CascadeFailure
    from custodia.foundation.domain.failures import (
        ActivityResult,
        ActivityResultFailure,
        Result,
    )
    from custodia.foundation.domain.ports import (
        BlobWriterPort,
        MessageStatusStorePort,
        MessageStorePort,
        NotificationStatusStorePort,
        NotificationStorePort,
        ProfileStorePort,
    )

LOG_PREFIX = "DeleteUserDataActivity"
FIND_MESSAGES_QUERY = "findMessages"

logger = logging.getLogger(__name__)


class ActivityState(StrEnum):
    """Stages of one activity invocation. DONE and FAILED are terminal."""

    VALIDATING = "VALIDATING"
    QUERYING_MESSAGES = "QUERYING_MESSAGES"
    PROCESSING_MESSAGES = "PROCESSING_MESSAGES"
    PROCESSING_PROFILE = "PROCESSING_PROFILE"
    DONE = "DONE"
    FAILED = "FAILED"


def readable_report(error: ValidationError) -> str:
    """Flatten pydantic validation errors into one line."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "<root>"
        parts.append(f"value at '{location}' is not valid: {detail['msg']}")
    return "; ".join(parts)


def decode_input(raw_input: object) -> Result[ActivityInput, InvalidInputFailure]:
    """Validate the raw activity input."""
    try:
        return Ok(ActivityInput.model_validate(raw_input))
    except ValidationError as exc:
        return Err(InvalidInputFailure(reason=readable_report(exc)))


def log_failure(failure: ActivityResultFailure, log: Any = None) -> None:
    """Log a failure once, with a message chosen by its kind.

    Args:
        failure: The failure about to be returned by the activity.
        log: Logger exposing ``error(msg, *args)``; stdlib and structlog
            loggers both qualify. Defaults to this module's logger.
    """
    log = log if log is not None else logger
    match failure:
        case InvalidInputFailure(reason=reason):
            log.error("%s|Error decoding input|ERROR=%s", LOG_PREFIX, reason)
        case QueryFailure(reason=reason, query=query):
            log.error("%s|Error %s query error|ERROR=%s", LOG_PREFIX, query, reason)
        case BlobCreationFailure(reason=reason):
            log.error("%s|Error saving blob|ERROR=%s", LOG_PREFIX, reason)
        case UserNotFoundFailure():
            log.error("%s|Error user not found|ERROR=", LOG_PREFIX)
        case DocumentDeleteFailure(reason=reason):
            log.error("%s|Error deleting data|ERROR=%s", LOG_PREFIX, reason)
        case _:
            assert_never(failure)


async def backup_and_delete_all_user_data(
    *,
    message_store: MessageStorePort,
    message_status_store: MessageStatusStorePort,
    profile_store: ProfileStorePort,
    destination: ArchiveDestination,
    fiscal_code: str,
    on_state: Callable[[ActivityState], None] | None = None,
) -> Result[None, CascadeFailure]:
    """Backup and delete every record of a user, children before parents.

    A message is only processed after all of its status versions were
    backed up and deleted, and the profile only after every message.

    Args:
        message_store: Live store of messages.
        message_status_store: Live store of message statuses.
        profile_store: Live store of profile versions.
        destination: Where backups are written.
        fiscal_code: Identifier of the user.
        on_state: Optional callback notified when a new stage starts.

    Returns:
        ``Ok(None)`` if everything was deleted, otherwise the first failure.
    """
    notify = on_state or (lambda _state: None)

    notify(ActivityState.QUERYING_MESSAGES)
    try:
        messages = await message_store.find_messages(fiscal_code)
    except Exception as exc:
        return Err(
            QueryFailure(reason=str(exc) or type(exc).__name__, query=FIND_MESSAGES_QUERY)
        )

    notify(ActivityState.PROCESSING_MESSAGES)
    for index, message in enumerate(messages):
        logger.debug(
            "message_cascade_started",
            extra={"message_index": index, "message_id": message.id},
        )
        content = await backup_and_delete_message_content(message)
        if isinstance(content, Err):
            return content

        statuses = await backup_and_delete_message_status(
            message_status_store=message_status_store,
            destination=destination,
            message=message,
        )
        if isinstance(statuses, Err):
            return statuses

        deleted = await backup_and_delete_message(
            message_store=message_store,
            destination=destination,
            message=message,
        )
        if isinstance(deleted, Err):
            return deleted

    notify(ActivityState.PROCESSING_PROFILE)
    profile = await backup_and_delete_profile(
        profile_store=profile_store,
        destination=destination,
        fiscal_code=fiscal_code,
    )
    if isinstance(profile, Err):
        return profile
    return Ok(None)


class DeleteUserDataActivity:
    """Activity entry point bound to its collaborators.

    Notification stores and the message content writer are accepted so the
    activity can be wired with the full set of user-data stores, but the
    current cascade does not use them.

    Attributes:
        state: Stage reached by the last invocation.
    """

    def __init__(
        self,
        *,
        message_store: MessageStorePort,
        message_status_store: MessageStatusStorePort,
        profile_store: ProfileStorePort,
        user_data_backup_blob_writer: BlobWriterPort,
        user_data_backup_container_name: str,
        notification_store: NotificationStorePort | None = None,
        notification_status_store: NotificationStatusStorePort | None = None,
        message_content_blob_writer: BlobWriterPort | None = None,
        clock: Callable[[], datetime] | None = None,
        log: Any = None,
    ) -> None:
        self._message_store = message_store
        self._message_status_store = message_status_store
        self._profile_store = profile_store
        self._backup_writer = user_data_backup_blob_writer
        self._container_name = user_data_backup_container_name
        self._notification_store = notification_store
        self._notification_status_store = notification_status_store
        self._message_content_writer = message_content_blob_writer
        self._clock = clock
        self._log = log
        self.state = ActivityState.VALIDATING

    def _enter(self, state: ActivityState) -> None:
        self.state = state
        logger.debug("delete_user_data_state", extra={"state": str(state)})

    async def run(self, raw_input: object) -> ActivityResult:
        """Run the activity on an undecoded input.

        Args:
            raw_input: Mapping with ``fiscalCode`` and ``userDataDeleteRequestId``.

        Returns:
            ``ActivityResultSuccess`` or the first failure encountered.
        """
        self._enter(ActivityState.VALIDATING)
        decoded = decode_input(raw_input)
        if isinstance(decoded, Err):
            return self._fail(decoded.failure)

        activity_input = decoded.value
        processed_at = self._clock() if self._clock is not None else None
        destination = ArchiveDestination(
            blob_writer=self._backup_writer,
            container_name=self._container_name,
            folder=backup_folder_name(activity_input.user_data_delete_request_id, processed_at),
        )

        outcome = await backup_and_delete_all_user_data(
            message_store=self._message_store,
            message_status_store=self._message_status_store,
            profile_store=self._profile_store,
            destination=destination,
            fiscal_code=activity_input.fiscal_code,
            on_state=self._enter,
        )
        if isinstance(outcome, Err):
            return self._fail(outcome.failure)

        self._enter(ActivityState.DONE)
        logger.info(
            "user_data_deleted",
            extra={"request_id": activity_input.user_data_delete_request_id},
        )
        return ActivityResultSuccess()

    def _fail(self, failure: ActivityResultFailure) -> ActivityResultFailure:
        self._enter(ActivityState.FAILED)
        log_failure(failure, self._log)
        return failure

    async def __call__(self, raw_input: object) -> ActivityResult:
        return await self.run(raw_input)


def create_delete_user_data_activity_handler(
    **dependencies: Any,
) -> Callable[[object], Awaitable[ActivityResult]]:
    """Build the activity function from its collaborators.

    Accepts the keyword arguments of :class:`DeleteUserDataActivity`.
    Each call of the returned function is an independent invocation.
    """
    DeleteUserDataActivity(**dependencies)

    async def handler(raw_input: object) -> ActivityResult:
        return await DeleteUserDataActivity(**dependencies).run(raw_input)

    return handler

