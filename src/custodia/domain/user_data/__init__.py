"""Custodia Domain User Data -- backup-then-delete cascade for a user's records."""

from custodia.domain.user_data.activity import (
    ActivityState,
    DeleteUserDataActivity,
    backup_and_delete_all_user_data,
    create_delete_user_data_activity_handler,
    log_failure,
)
from custodia.domain.user_data.archive import (
    ArchiveDestination,
    backup_folder_name,
    blob_path,
    save_data_to_blob,
)
from custodia.domain.user_data.cascades import (
    backup_and_delete_message,
    backup_and_delete_message_content,
    backup_and_delete_message_status,
    backup_and_delete_profile,
)
from custodia.domain.user_data.steps import backup_then_delete, process_all

__all__ = [
    "ActivityState",
    "ArchiveDestination",
    "DeleteUserDataActivity",
    "backup_and_delete_all_user_data",
    "backup_and_delete_message",
    "backup_and_delete_message_content",
    "backup_and_delete_message_status",
    "backup_and_delete_profile",
    "backup_folder_name",
    "backup_then_delete",
    "blob_path",
    "create_delete_user_data_activity_handler",
    "log_failure",
    "process_all",
    "save_data_to_blob",
]
