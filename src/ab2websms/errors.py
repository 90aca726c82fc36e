"""Exception hierarchy for the SMS send pipeline."""

from __future__ import annotations

from ab2websms.models.enums import ErrorKind

__all__ = [
    "Ab2webSmsError",
    "EmptyMessageContentError",
    "GatewayRejectedError",
    "HttpError",
    "IntegrationNotConfiguredError",
    "InvalidPhoneNumberError",
    "MalformedResponseError",
    "TransportError",
]


class Ab2webSmsError(Exception):
    """Base exception for all ab2websms errors."""

    kind: ErrorKind


class InvalidPhoneNumberError(Ab2webSmsError, ValueError):
    """Phone number cannot be parsed or is not a valid number."""

    kind = ErrorKind.INVALID_PHONE_NUMBER


class EmptyMessageContentError(Ab2webSmsError):
    """Rendered message is empty or whitespace."""

    kind = ErrorKind.EMPTY_MESSAGE_CONTENT

    def __init__(self, message: str = "Message content is empty.") -> None:
        super().__init__(message)


class IntegrationNotConfiguredError(Ab2webSmsError):
    """Integration is missing, unpublished, or has no API key."""

    kind = ErrorKind.INTEGRATION_NOT_CONFIGURED


class TransportError(Ab2webSmsError):
    """The HTTP request never produced a response."""

    kind = ErrorKind.TRANSPORT_ERROR

    def __init__(self, detail: str) -> None:
        super().__init__(f"transport error: {detail}")
        self.detail = detail


class HttpError(Ab2webSmsError):
    """Gateway answered with a status other than 200."""

    kind = ErrorKind.HTTP_ERROR

    def __init__(self, status_code: int) -> None:
        super().__init__(f"http error: {status_code}")
        self.status_code = status_code


class MalformedResponseError(Ab2webSmsError):
    """Gateway body is not a JSON object."""

    kind = ErrorKind.MALFORMED_RESPONSE

    def __init__(self, message: str = "malformed response") -> None:
        super().__init__(message)


class GatewayRejectedError(Ab2webSmsError):
    """Gateway returned ``success`` false."""

    kind = ErrorKind.GATEWAY_REJECTED

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
