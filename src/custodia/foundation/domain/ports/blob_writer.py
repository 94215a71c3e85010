"""Port interface for writing objects to cold storage.

Example:
    >>> from custodia.foundation.domain.ports import BlobWriterPort
    >>> async def backup(writer: BlobWriterPort, text: str) -> None:
    ...     await writer.put_text("user-data-backup", "REQ1-1700000000000/a.json", text)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BlobWriterPort(Protocol):
    """Port for single-object writes into a storage container.

    A write is one atomic put: readers see either the previous object or
    the new one. Writing an existing path overwrites it.
    """

    async def put_text(self, container: str, path: str, text: str) -> None:
        """Store ``text`` as the object at ``path`` inside ``container``.

        Args:
            container: Container (bucket) name.
            path: Object path, folder segments separated by ``/``.
            text: Serialized payload, stored as UTF-8.

        Raises:
            Adapter-specific exceptions on transport or server errors.
        """
        ...
