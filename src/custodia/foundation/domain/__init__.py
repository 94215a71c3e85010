"""Custodia Foundation Domain -- pure Python domain primitives.

This package provides the building blocks shared by the user-data
deletion cascade: the activity result model, the record models, and the
port interfaces of the live store and the archive.
"""

from custodia.foundation.domain.failures import (
    ActivityResult,
    ActivityResultFailure,
    ActivityResultSuccess,
    BlobCreationFailure,
    DocumentDeleteFailure,
    Err,
    InvalidInputFailure,
    Ok,
    QueryFailure,
    Result,
    UserNotFoundFailure,
    parse_activity_result,
)
from custodia.foundation.domain.ports import (
    BlobWriterPort,
    MessageStatusStorePort,
    MessageStorePort,
    NotificationStatusStorePort,
    NotificationStorePort,
    ProfileStorePort,
    RecordCursor,
)
from custodia.foundation.domain.records import (
    ActivityInput,
    RetrievedMessage,
    RetrievedMessageStatus,
    RetrievedNotification,
    RetrievedNotificationStatus,
    RetrievedProfile,
)

__all__ = [
    "ActivityInput",
    "ActivityResult",
    "ActivityResultFailure",
    "ActivityResultSuccess",
    "BlobCreationFailure",
    "BlobWriterPort",
    "DocumentDeleteFailure",
    "Err",
    "InvalidInputFailure",
    "MessageStatusStorePort",
    "MessageStorePort",
    "NotificationStatusStorePort",
    "NotificationStorePort",
    "Ok",
    "ProfileStorePort",
    "QueryFailure",
    "RecordCursor",
    "Result",
    "RetrievedMessage",
    "RetrievedMessageStatus",
    "RetrievedNotification",
    "RetrievedNotificationStatus",
    "RetrievedProfile",
    "UserNotFoundFailure",
    "parse_activity_result",
]
