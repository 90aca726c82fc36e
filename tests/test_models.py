"""Tests for data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ab2websms.errors import (
    Ab2webSmsError,
    EmptyMessageContentError,
    GatewayRejectedError,
    HttpError,
    IntegrationNotConfiguredError,
    InvalidPhoneNumberError,
    MalformedResponseError,
    TransportError,
)
from ab2websms.models.contact import ContactRecord
from ab2websms.models.delivery import (
    InvalidInput,
    Rejected,
    Sent,
    SmsRequest,
    sms_result_adapter,
)
from ab2websms.models.enums import ErrorKind, ResultStatus


class TestContactRecord:
    def test_defaults_empty(self) -> None:
        contact = ContactRecord()
        assert contact.phone == ""
        assert contact.display_name == ""

    def test_frozen(self) -> None:
        contact = ContactRecord(phone="8123456789")
        with pytest.raises(ValidationError):
            contact.phone = "0"  # type: ignore[misc]


class TestSmsRequest:
    def test_valid(self) -> None:
        req = SmsRequest(number="918123456789", message="Hi")
        assert req.number == "918123456789"

    @pytest.mark.parametrize("number", ["", "+918123456789", "91 81234"])
    def test_number_must_be_digits(self, number: str) -> None:
        with pytest.raises(ValidationError):
            SmsRequest(number=number, message="Hi")

    @pytest.mark.parametrize("message", ["", "  \n"])
    def test_message_not_blank(self, message: str) -> None:
        with pytest.raises(ValidationError):
            SmsRequest(number="918123456789", message=message)


class TestSmsResult:
    def test_sent(self) -> None:
        result = Sent(message_id="42")
        assert result.status == ResultStatus.SENT
        assert result.success is True

    def test_failures_not_successful(self) -> None:
        assert Rejected(reason="x", error=ErrorKind.HTTP_ERROR).success is False
        assert InvalidInput(reason="x", error=ErrorKind.INVALID_PHONE_NUMBER).success is False

    def test_discriminated_parse(self) -> None:
        parsed = sms_result_adapter.validate_python(
            {"status": "rejected", "reason": "blocked", "error": "gateway_rejected"}
        )
        assert isinstance(parsed, Rejected)
        assert parsed.error is ErrorKind.GATEWAY_REJECTED

    def test_dump_keeps_tag(self) -> None:
        dumped = InvalidInput(reason="bad", error=ErrorKind.INVALID_PHONE_NUMBER).model_dump(
            mode="json"
        )
        assert dumped == {
            "status": "invalid_input",
            "reason": "bad",
            "error": "invalid_phone_number",
        }

    def test_unknown_status(self) -> None:
        with pytest.raises(ValidationError):
            sms_result_adapter.validate_python({"status": "queued", "message_id": "1"})


class TestErrors:
    @pytest.mark.parametrize(
        ("exc", "kind", "message"),
        [
            (InvalidPhoneNumberError("bad"), ErrorKind.INVALID_PHONE_NUMBER, "bad"),
            (
                EmptyMessageContentError(),
                ErrorKind.EMPTY_MESSAGE_CONTENT,
                "Message content is empty.",
            ),
            (IntegrationNotConfiguredError("nope"), ErrorKind.INTEGRATION_NOT_CONFIGURED, "nope"),
            (TransportError("reset"), ErrorKind.TRANSPORT_ERROR, "transport error: reset"),
            (HttpError(502), ErrorKind.HTTP_ERROR, "http error: 502"),
            (MalformedResponseError(), ErrorKind.MALFORMED_RESPONSE, "malformed response"),
            (GatewayRejectedError("blocked"), ErrorKind.GATEWAY_REJECTED, "blocked"),
        ],
    )
    def test_kind_and_message(self, exc: Ab2webSmsError, kind: ErrorKind, message: str) -> None:
        assert isinstance(exc, Ab2webSmsError)
        assert exc.kind is kind
        assert str(exc) == message
