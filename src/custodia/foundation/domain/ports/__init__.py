"""Domain port interfaces for hexagonal architecture.

Ports define abstract interfaces that the domain layer uses to interact
with the live record store and the archive. Implementations (adapters)
live in infrastructure or are provided by the host application.
"""

from custodia.foundation.domain.ports.blob_writer import BlobWriterPort
from custodia.foundation.domain.ports.record_store import (
    MessageStatusStorePort,
    MessageStorePort,
    NotificationStatusStorePort,
    NotificationStorePort,
    ProfileStorePort,
    RecordCursor,
)

__all__ = [
    "BlobWriterPort",
    "MessageStatusStorePort",
    "MessageStorePort",
    "NotificationStatusStorePort",
    "NotificationStorePort",
    "ProfileStorePort",
    "RecordCursor",
]
