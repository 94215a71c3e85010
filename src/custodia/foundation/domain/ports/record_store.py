"""Port interfaces for the live record store.

The deletion cascade never talks to a database driver directly. It depends
on these protocols, which enumerate records for a parent key and delete a
single record. Implementations raise on any store error; the cascade turns
those exceptions into typed failures.

Versioned collections (profiles, message statuses) are enumerated through a
:class:`RecordCursor` so that only one page is held in memory at a time.

Example:
    >>> from custodia.foundation.domain.ports import RecordCursor
    >>> async def drain(cursor: RecordCursor[str]) -> list[str]:
    ...     items: list[str] = []
    ...     while page := await cursor.next_page():
    ...         items.extend(page)
    ...     return items
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from custodia.foundation.domain.records import (
        RetrievedMessage,
        RetrievedMessageStatus,
        RetrievedNotification,
        RetrievedNotificationStatus,
        RetrievedProfile,
    )

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class RecordCursor(Protocol[T_co]):
    """Stateful, paged enumeration over a live-store query."""

    async def next_page(self) -> Sequence[T_co] | None:
        """Fetch the next page of records.

        Returns:
            The next page, or None once the query is exhausted. An empty
            sequence is treated as exhaustion as well.
        """
        ...


@runtime_checkable
class ProfileStorePort(Protocol):
    """Access to the versions of a user profile."""

    def find_all_versions_by_model_id(
        self, fiscal_code: str
    ) -> RecordCursor[RetrievedProfile]:
        """Open a cursor over every stored version of a profile.

        Args:
            fiscal_code: Identifier of the user owning the profile.
        """
        ...

    async def delete_profile_version(self, fiscal_code: str, version_id: str) -> None:
        """Delete one profile version.

        Deleting a version that is already gone must succeed.
        """
        ...


@runtime_checkable
class MessageStorePort(Protocol):
    """Access to the messages sent to a user."""

    async def find_messages(self, fiscal_code: str) -> Sequence[RetrievedMessage]:
        """Return every message of a user in the store's natural order."""
        ...

    async def delete_message(self, fiscal_code: str, message_id: str) -> None:
        """Delete one message.

        Deleting a message that is already gone must succeed.
        """
        ...


@runtime_checkable
class MessageStatusStorePort(Protocol):
    """Access to the versions of a message status."""

    def find_all_versions_by_model_id(
        self, message_id: str
    ) -> RecordCursor[RetrievedMessageStatus]:
        """Open a cursor over every stored status version of a message."""
        ...

    async def delete_message_status_version(
        self, message_id: str, version_id: str
    ) -> None:
        """Delete one status version."""
        ...


@runtime_checkable
class NotificationStorePort(Protocol):
    """Access to notifications. Wired for configuration, not yet cascaded."""

    async def find_notifications_by_message_id(
        self, message_id: str
    ) -> Sequence[RetrievedNotification]:
        """Return every notification generated for a message."""
        ...


@runtime_checkable
class NotificationStatusStorePort(Protocol):
    """Access to notification statuses. Wired for configuration, not yet cascaded."""

    def find_all_versions_by_model_id(
        self, notification_id: str
    ) -> RecordCursor[RetrievedNotificationStatus]:
        """Open a cursor over every status version of a notification."""
        ...
