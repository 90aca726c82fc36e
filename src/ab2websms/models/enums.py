"""All string enums for ab2websms."""

from __future__ import annotations

from enum import StrEnum, unique


@unique
class ResultStatus(StrEnum):
    SENT = "sent"
    REJECTED = "rejected"
    INVALID_INPUT = "invalid_input"


@unique
class ErrorKind(StrEnum):
    MISSING_PHONE_NUMBER = "missing_phone_number"
    INVALID_PHONE_NUMBER = "invalid_phone_number"
    EMPTY_MESSAGE_CONTENT = "empty_message_content"
    INTEGRATION_NOT_CONFIGURED = "integration_not_configured"
    TRANSPORT_ERROR = "transport_error"
    HTTP_ERROR = "http_error"
    MALFORMED_RESPONSE = "malformed_response"
    GATEWAY_REJECTED = "gateway_rejected"


@unique
class PlaceholderMode(StrEnum):
    COMPATIBLE = "compatible"
    CORRECTED = "corrected"
