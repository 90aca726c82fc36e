"""AB2Web SMS provider that sends SMS through the AB2Web HTTP gateway."""

from __future__ import annotations

import logging
from types import TracebackType

import httpx

from ab2websms.credentials.base import CredentialProvider
from ab2websms.credentials.resolver import CredentialResolver
from ab2websms.errors import Ab2webSmsError, EmptyMessageContentError
from ab2websms.models.contact import ContactRecord
from ab2websms.models.delivery import InvalidInput, Rejected, Sent, SmsRequest, SmsResult
from ab2websms.models.enums import ErrorKind
from ab2websms.providers.ab2web.config import Ab2webConfig
from ab2websms.providers.ab2web.gateway import Ab2webGatewayClient
from ab2websms.providers.sms.base import SmsTransport
from ab2websms.providers.sms.phone import normalize_phone, strip_plus
from ab2websms.providers.sms.template import placeholders_for, render_content


# Failures reported as ``False`` by ``send_sms``; every other failure
# is reported as its message.
_LEGACY_FALSE_KINDS = frozenset(
    {
        ErrorKind.MISSING_PHONE_NUMBER,
        ErrorKind.TRANSPORT_ERROR,
        ErrorKind.HTTP_ERROR,
        ErrorKind.MALFORMED_RESPONSE,
        ErrorKind.GATEWAY_REJECTED,
    }
)


class Ab2webSmsProvider(SmsTransport):
    """SMS transport backed by the AB2Web gateway.

    Each send runs the same linear pipeline: read the phone number,
    normalize it, resolve the API key (once per instance), render the
    template, then post a single request. Every pipeline error becomes a
    result value; nothing is raised to the caller.
    """

    def __init__(
        self,
        credentials: CredentialProvider,
        config: Ab2webConfig | None = None,
        *,
        client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or Ab2webConfig()
        self._log = logger or logging.getLogger(__name__)
        self._resolver = CredentialResolver(credentials, self._config.integration_name)
        self._gateway = Ab2webGatewayClient(self._config, client)
        self._placeholders = placeholders_for(self._config.placeholders)

    @property
    def config(self) -> Ab2webConfig:
        return self._config

    @property
    def connected(self) -> bool:
        """Whether the API key has been resolved."""
        return self._resolver.is_resolved

    def send(self, contact: ContactRecord, content: str) -> SmsResult:
        raw_number = contact.phone
        if not raw_number:
            self._log.info("Ab2webSms: contact has no phone number, skipping")
            return InvalidInput(
                reason="Contact has no phone number.", error=ErrorKind.MISSING_PHONE_NUMBER
            )

        try:
            number = strip_plus(normalize_phone(raw_number, self._config.default_region))
        except Ab2webSmsError as exc:
            self._log.info("Ab2webSms: invalid number format: %s", exc)
            return InvalidInput(reason=str(exc), error=exc.kind)

        try:
            api_key = self._resolver.api_key()

            message = render_content(content, contact, self._placeholders)
            if not message.strip():
                raise EmptyMessageContentError()

            request = SmsRequest(number=number, message=message)
            message_id = self._gateway.send(request, api_key)
        except Ab2webSmsError as exc:
            cause = exc.__cause__
            if cause is not None:
                self._log.error(
                    "Ab2webSms: request failed: %s (%s: %s)", exc, type(cause).__name__, cause
                )
            else:
                self._log.error("Ab2webSms: request failed: %s", exc)
            if exc.kind is ErrorKind.EMPTY_MESSAGE_CONTENT:
                return InvalidInput(reason=str(exc), error=exc.kind)
            return Rejected(reason=str(exc), error=exc.kind)

        self._log.info("Ab2webSms: request succeeded, message id %s", message_id)
        return Sent(message_id=message_id)

    def send_sms(self, contact: ContactRecord, content: str) -> bool | str:
        """Send with the host plugin's return contract.

        Returns:
            True when the gateway accepted the message, False for a missing
            phone number or a gateway-side failure, otherwise the error
            message (invalid number, missing integration, empty message).
        """
        result = self.send(contact, content)
        if isinstance(result, Sent):
            return True
        if result.error in _LEGACY_FALSE_KINDS:
            return False
        return result.reason

    def close(self) -> None:
        self._gateway.close()

    def __enter__(self) -> Ab2webSmsProvider:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
