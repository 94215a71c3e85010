"""Shared fakes and fixtures for the user-data deletion tests.

Every fake appends to one ``journal`` list so tests can assert on the
relative order of archive writes and deletes across collaborators.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import Any

import pytest

from custodia.domain.user_data.activity import DeleteUserDataActivity
from custodia.foundation.domain.records import (
    RetrievedMessage,
    RetrievedMessageStatus,
    RetrievedProfile,
)

FISCAL_CODE = "AAAAAA00A00A000A"
REQUEST_ID = "REQ1"
PROCESSED_AT = datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)
BACKUP_FOLDER = "REQ1-1700000000000"
CONTAINER = "user-data-backup"

Journal = list[tuple[Any, ...]]


class FakeCursor:
    """Cursor returning preset pages, then None."""

    def __init__(
        self,
        pages: Sequence[Sequence[Any]],
        journal: Journal | None = None,
        fail_on_page: int | None = None,
    ) -> None:
        self._pages = list(pages)
        self._journal = journal if journal is not None else []
        self._fail_on_page = fail_on_page
        self.fetches = 0

    async def next_page(self) -> Sequence[Any] | None:
        index = self.fetches
        self.fetches += 1
        self._journal.append(("next_page", index))
        if self._fail_on_page == index:
            raise RuntimeError("cursor broken")
        if index < len(self._pages):
            return self._pages[index]
        return None


class FakeBlobWriter:
    def __init__(
        self,
        journal: Journal,
        fail_when: Callable[[str], bool] | None = None,
    ) -> None:
        self._journal = journal
        self._fail_when = fail_when
        self.objects: dict[tuple[str, str], str] = {}

    async def put_text(self, container: str, path: str, text: str) -> None:
        if self._fail_when is not None and self._fail_when(path):
            self._journal.append(("put_failed", path))
            raise RuntimeError("storage unavailable")
        self._journal.append(("put", path))
        self.objects[(container, path)] = text


class FakeProfileStore:
    def __init__(self, journal: Journal, pages: Sequence[Sequence[RetrievedProfile]]) -> None:
        self._journal = journal
        self._pages = pages
        self.fail_delete = False
        self.cursor_requests: list[str] = []

    def find_all_versions_by_model_id(self, fiscal_code: str) -> FakeCursor:
        self.cursor_requests.append(fiscal_code)
        self._journal.append(("find_profile_versions", fiscal_code))
        return FakeCursor(self._pages, self._journal)

    async def delete_profile_version(self, fiscal_code: str, version_id: str) -> None:
        if self.fail_delete:
            raise RuntimeError("profile delete refused")
        self._journal.append(("delete_profile", fiscal_code, version_id))


class FakeMessageStore:
    def __init__(self, journal: Journal, messages: Sequence[RetrievedMessage]) -> None:
        self._journal = journal
        self._messages = messages
        self.fail_find = False
        self.fail_delete_for: set[str] = set()

    async def find_messages(self, fiscal_code: str) -> Sequence[RetrievedMessage]:
        self._journal.append(("find_messages", fiscal_code))
        if self.fail_find:
            raise RuntimeError("messages collection unreachable")
        return self._messages

    async def delete_message(self, fiscal_code: str, message_id: str) -> None:
        if message_id in self.fail_delete_for:
            raise RuntimeError("message delete refused")
        self._journal.append(("delete_message", fiscal_code, message_id))


class FakeMessageStatusStore:
    def __init__(
        self,
        journal: Journal,
        statuses: dict[str, Sequence[Sequence[RetrievedMessageStatus]]],
    ) -> None:
        self._journal = journal
        self._statuses = statuses
        self.fail_delete_for: set[str] = set()

    def find_all_versions_by_model_id(self, message_id: str) -> FakeCursor:
        self._journal.append(("find_status_versions", message_id))
        return FakeCursor(self._statuses.get(message_id, []), self._journal)

    async def delete_message_status_version(self, message_id: str, version_id: str) -> None:
        if message_id in self.fail_delete_for:
            raise RuntimeError("status delete refused")
        self._journal.append(("delete_status", message_id, version_id))


class RecordingNotificationStore:
    def __init__(self) -> None:
        self.calls = 0

    async def find_notifications_by_message_id(self, message_id: str) -> Sequence[Any]:
        self.calls += 1
        return []

    def find_all_versions_by_model_id(self, notification_id: str) -> FakeCursor:
        self.calls += 1
        return FakeCursor([])


def make_profile(version: int, **extra: Any) -> RetrievedProfile:
    return RetrievedProfile.model_validate(
        {"fiscalCode": FISCAL_CODE, "id": f"{FISCAL_CODE}-{version:016d}", "version": version, **extra}
    )


def make_message(message_id: str) -> RetrievedMessage:
    return RetrievedMessage.model_validate({"fiscalCode": FISCAL_CODE, "id": message_id})


def make_status(message_id: str, version: int) -> RetrievedMessageStatus:
    return RetrievedMessageStatus.model_validate(
        {"messageId": message_id, "id": f"{message_id}-{version:016d}", "version": version}
    )


def kinds(journal: Journal, kind: str) -> list[tuple[Any, ...]]:
    return [entry for entry in journal if entry[0] == kind]


@pytest.fixture()
def journal() -> Journal:
    return []


@pytest.fixture()
def messages() -> list[RetrievedMessage]:
    return [make_message("MSG01"), make_message("MSG02")]


@pytest.fixture()
def blob_writer(journal: Journal) -> FakeBlobWriter:
    return FakeBlobWriter(journal)


@pytest.fixture()
def profile_store(journal: Journal) -> FakeProfileStore:
    return FakeProfileStore(journal, [[make_profile(0), make_profile(1)]])


@pytest.fixture()
def message_store(journal: Journal, messages: list[RetrievedMessage]) -> FakeMessageStore:
    return FakeMessageStore(journal, messages)


@pytest.fixture()
def message_status_store(journal: Journal) -> FakeMessageStatusStore:
    return FakeMessageStatusStore(
        journal,
        {
            "MSG01": [[make_status("MSG01", 0)]],
            "MSG02": [[make_status("MSG02", 0)]],
        },
    )


@pytest.fixture()
def notification_store() -> RecordingNotificationStore:
    return RecordingNotificationStore()


@pytest.fixture()
def notification_status_store() -> RecordingNotificationStore:
    return RecordingNotificationStore()


@pytest.fixture()
def activity_dependencies(
    message_store: FakeMessageStore,
    message_status_store: FakeMessageStatusStore,
    profile_store: FakeProfileStore,
    blob_writer: FakeBlobWriter,
    notification_store: RecordingNotificationStore,
    notification_status_store: RecordingNotificationStore,
) -> dict[str, Any]:
    return {
        "message_store": message_store,
        "message_status_store": message_status_store,
        "profile_store": profile_store,
        "user_data_backup_blob_writer": blob_writer,
        "user_data_backup_container_name": CONTAINER,
        "notification_store": notification_store,
        "notification_status_store": notification_status_store,
        "clock": lambda: PROCESSED_AT,
    }


@pytest.fixture()
def activity(activity_dependencies: dict[str, Any]) -> DeleteUserDataActivity:
    return DeleteUserDataActivity(**activity_dependencies)


@pytest.fixture()
def valid_input() -> dict[str, str]:
    return {"fiscalCode": FISCAL_CODE, "userDataDeleteRequestId": REQUEST_ID}
