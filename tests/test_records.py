"""Unit tests for custodia.foundation.domain.records."""

from __future__ import annotations

import pytest
from conftest import FISCAL_CODE
from pydantic import ValidationError

from custodia.foundation.domain.records import (
    ActivityInput,
    RetrievedMessage,
    RetrievedMessageStatus,
    RetrievedNotification,
    RetrievedProfile,
)


@pytest.mark.unit
class TestActivityInput:
    def test_accepts_wire_names(self) -> None:
        decoded = ActivityInput.model_validate(
            {"fiscalCode": FISCAL_CODE, "userDataDeleteRequestId": "REQ1"}
        )
        assert decoded.fiscal_code == FISCAL_CODE
        assert decoded.user_data_delete_request_id == "REQ1"

    def test_accepts_python_names(self) -> None:
        decoded = ActivityInput(fiscal_code=FISCAL_CODE, user_data_delete_request_id="REQ1")
        assert decoded.fiscal_code == FISCAL_CODE

    def test_accepts_omocode_fiscal_code(self) -> None:
        decoded = ActivityInput.model_validate(
            {"fiscalCode": "RSSMRA85T10A56NS", "userDataDeleteRequestId": "R"}
        )
        assert decoded.fiscal_code == "RSSMRA85T10A56NS"

    @pytest.mark.parametrize(
        "fiscal_code",
        ["", "aaaaaa00a00a000a", "AAAAAA00A00A000", "AAAAAA00Z00A000A", "not-a-code"],
    )
    def test_rejects_malformed_fiscal_code(self, fiscal_code: str) -> None:
        with pytest.raises(ValidationError):
            ActivityInput.model_validate(
                {"fiscalCode": fiscal_code, "userDataDeleteRequestId": "REQ1"}
            )

    def test_rejects_empty_request_id(self) -> None:
        with pytest.raises(ValidationError):
            ActivityInput.model_validate({"fiscalCode": FISCAL_CODE, "userDataDeleteRequestId": ""})

    def test_rejects_missing_fields(self) -> None:
        with pytest.raises(ValidationError):
            ActivityInput.model_validate({"fiscalCode": FISCAL_CODE})

    def test_rejects_non_mapping(self) -> None:
        with pytest.raises(ValidationError):
            ActivityInput.model_validate("invalid")


@pytest.mark.unit
class TestRetrievedRecords:
    def test_profile_keeps_extra_fields(self) -> None:
        profile = RetrievedProfile.model_validate(
            {"fiscalCode": FISCAL_CODE, "id": "p-0", "version": 0, "email": "a@example.com"}
        )
        dumped = profile.model_dump(by_alias=True)
        assert dumped["email"] == "a@example.com"
        assert dumped["fiscalCode"] == FISCAL_CODE

    def test_profile_rejects_negative_version(self) -> None:
        with pytest.raises(ValidationError):
            RetrievedProfile.model_validate({"fiscalCode": FISCAL_CODE, "id": "p", "version": -1})

    def test_message_status_requires_message_id(self) -> None:
        with pytest.raises(ValidationError):
            RetrievedMessageStatus.model_validate({"id": "s", "version": 0})

    def test_message_is_frozen(self) -> None:
        message = RetrievedMessage.model_validate({"fiscalCode": FISCAL_CODE, "id": "m"})
        with pytest.raises(ValidationError):
            message.id = "other"  # type: ignore[misc]

    def test_notification_model(self) -> None:
        notification = RetrievedNotification.model_validate(
            {"fiscalCode": FISCAL_CODE, "messageId": "m", "id": "n"}
        )
        assert notification.message_id == "m"
