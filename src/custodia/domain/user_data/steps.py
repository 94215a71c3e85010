"""Backup-then-delete building blocks shared by every cascade.

``backup_then_delete`` handles one record; ``process_all`` drains a paged
cursor through it. Both stop at the first failure and report it as a value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from custodia.foundation.domain.failures import (
    BlobCreationFailure,
    DocumentDeleteFailure,
    Err,
    Ok,
    QueryFailure,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from custodia.foundation.domain.failures import Result
    from custodia.foundation.domain.ports import RecordCursor

T = TypeVar("T")

StepFailure = BlobCreationFailure | DocumentDeleteFailure
CascadeFailure = QueryFailure | BlobCreationFailure | DocumentDeleteFailure


def _reason(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


async def backup_then_delete(
    item: T,
    archive: Callable[[T], Awaitable[Result[T, BlobCreationFailure]]],
    delete: Callable[[T], Awaitable[object]],
) -> Result[T, StepFailure]:
    """Archive ``item`` and, only once that succeeded, delete it.

    A failed delete after a successful archive leaves the record archived
    but still live. Running the cascade again overwrites the same archive
    object and retries the delete.

    Args:
        item: Record to process.
        archive: Writes the backup of ``item``.
        delete: Removes ``item`` from the live store; raises on error.

    Returns:
        ``Ok(item)`` once both phases succeeded, otherwise the failure of
        the first phase that failed.
    """
    archived = await archive(item)
    if isinstance(archived, Err):
        return archived

    try:
        await delete(item)
    except Exception as exc:
        return Err(DocumentDeleteFailure(reason=_reason(exc)))
    return Ok(item)


async def process_all(
    cursor: RecordCursor[T],
    step: Callable[[T], Awaitable[Result[T, StepFailure]]],
    query_name: str,
) -> Result[list[T], CascadeFailure]:
    """Drain ``cursor`` page by page, running ``step`` on every record.

    Only one page is fetched at a time. Records of a page are processed in
    page order and the first failing record stops the whole traversal: the
    records after it are left untouched and no further page is requested.

    Args:
        cursor: Paged enumeration of the records to process.
        step: Backup-then-delete for a single record.
        query_name: Name reported in a ``QueryFailure`` when a page fetch fails.

    Returns:
        ``Ok`` with every processed record in enumeration order, or the
        first failure.
    """
    processed: list[T] = []
    while True:
        try:
            page = await cursor.next_page()
        except Exception as exc:
            return Err(QueryFailure(reason=_reason(exc), query=query_name))

        if not page:
            return Ok(processed)

        for item in page:
            outcome = await step(item)
            if isinstance(outcome, Err):
                return outcome
            processed.append(outcome.value)
