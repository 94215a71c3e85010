"""Per-entity backup-and-delete cascades.

Each cascade knows how one entity type is enumerated, how its backup
object is named and how it is deleted. Object names are a pure function of
(entity type, id, version), so a re-run writes to the same paths.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from custodia.domain.user_data.archive import save_data_to_blob
from custodia.domain.user_data.steps import backup_then_delete, process_all
from custodia.foundation.domain.failures import Ok

if TYPE_CHECKING:
    from custodia.domain.user_data.archive import ArchiveDestination
    from custodia.domain.user_data.steps import CascadeFailure, StepFailure
    from custodia.foundation.domain.failures import Result
    from custodia.foundation.domain.ports import (
        MessageStatusStorePort,
        MessageStorePort,
        ProfileStorePort,
    )
    from custodia.foundation.domain.records import (
        RetrievedMessage,
        RetrievedMessageStatus,
        RetrievedProfile,
    )

logger = logging.getLogger(__name__)

FIND_PROFILE_VERSIONS_QUERY = "find_all_profile_versions"
FIND_MESSAGE_STATUS_VERSIONS_QUERY = "find_all_message_status_versions"


def profile_blob_name(profile: RetrievedProfile) -> str:
    return f"profile--{profile.version}.json"


def message_blob_name(message: RetrievedMessage) -> str:
    return f"message--{message.id}.json"


def message_status_blob_name(status: RetrievedMessageStatus) -> str:
    return f"message-status--{status.id}--{status.version}.json"


async def backup_and_delete_profile(
    *,
    profile_store: ProfileStorePort,
    destination: ArchiveDestination,
    fiscal_code: str,
) -> Result[list[RetrievedProfile], CascadeFailure]:
    """Backup and delete every version of a user's profile.

    Args:
        profile_store: Live store holding the profile versions.
        destination: Where backups are written.
        fiscal_code: Identifier of the user.
    """

    async def archive(item: RetrievedProfile) -> Result[RetrievedProfile, StepFailure]:
        return await save_data_to_blob(destination, profile_blob_name(item), item)

    async def delete(item: RetrievedProfile) -> None:
        await profile_store.delete_profile_version(item.fiscal_code, item.id)

    async def step(item: RetrievedProfile) -> Result[RetrievedProfile, StepFailure]:
        return await backup_then_delete(item, archive, delete)

    result = await process_all(
        profile_store.find_all_versions_by_model_id(fiscal_code),
        step,
        FIND_PROFILE_VERSIONS_QUERY,
    )
    if isinstance(result, Ok):
        logger.info(
            "profile_versions_deleted",
            extra={"versions_deleted": len(result.value)},
        )
    return result


async def backup_and_delete_message_status(
    *,
    message_status_store: MessageStatusStorePort,
    destination: ArchiveDestination,
    message: RetrievedMessage,
) -> Result[list[RetrievedMessageStatus], CascadeFailure]:
    """Find all versions of a message status, then backup and delete each."""

    async def archive(
        item: RetrievedMessageStatus,
    ) -> Result[RetrievedMessageStatus, StepFailure]:
        return await save_data_to_blob(destination, message_status_blob_name(item), item)

    async def delete(item: RetrievedMessageStatus) -> None:
        await message_status_store.delete_message_status_version(item.message_id, item.id)

    async def step(
        item: RetrievedMessageStatus,
    ) -> Result[RetrievedMessageStatus, StepFailure]:
        return await backup_then_delete(item, archive, delete)

    return await process_all(
        message_status_store.find_all_versions_by_model_id(message.id),
        step,
        FIND_MESSAGE_STATUS_VERSIONS_QUERY,
    )


async def backup_and_delete_message(
    *,
    message_store: MessageStorePort,
    destination: ArchiveDestination,
    message: RetrievedMessage,
) -> Result[RetrievedMessage, StepFailure]:
    """Backup and delete a single message. Messages are not versioned."""

    async def archive(item: RetrievedMessage) -> Result[RetrievedMessage, StepFailure]:
        return await save_data_to_blob(destination, message_blob_name(item), item)

    async def delete(item: RetrievedMessage) -> None:
        await message_store.delete_message(item.fiscal_code, item.id)

    return await backup_then_delete(message, archive, delete)


async def backup_and_delete_message_content(
    message: RetrievedMessage,
) -> Result[None, StepFailure]:
    """Placeholder for the backup of a message's content.

    Message content lives in a separate storage and is not archived yet;
    this step always succeeds without touching it.
    """
    return Ok(None)

