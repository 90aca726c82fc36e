"""HTTP client for the AB2Web send endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import SecretStr

from ab2websms.errors import (
    GatewayRejectedError,
    HttpError,
    MalformedResponseError,
    TransportError,
)
from ab2websms.models.delivery import SmsRequest
from ab2websms.providers.ab2web.config import Ab2webConfig

logger = logging.getLogger(__name__)

UNKNOWN_MESSAGE_ID = "Unknown"
UNKNOWN_ERROR = "Unknown error"


class Ab2webGatewayClient:
    """Posts one form-encoded request per message to the gateway."""

    def __init__(self, config: Ab2webConfig, client: httpx.Client | None = None) -> None:
        """Create the gateway client.

        Args:
            config: Gateway settings.
            client: Optional pre-built client. ``verify_tls`` only applies to
                the client built here; an injected client keeps its own TLS
                settings and is not closed by ``close()``. The request timeout
                applies to both.
        """
        self._config = config
        self._owns_client = client is None
        if client is None:
            if not config.verify_tls:
                logger.warning(
                    "TLS certificate verification is disabled for %s", config.api_url
                )
            client = httpx.Client(timeout=config.timeout, verify=config.verify_tls)
        elif not config.verify_tls:
            logger.warning(
                "verify_tls=False is ignored for an injected HTTP client; "
                "configure TLS verification on that client instead"
            )
        self._client = client

    def build_form(self, request: SmsRequest, api_key: SecretStr) -> dict[str, str]:
        return {
            "key": api_key.get_secret_value(),
            "number": request.number,
            "message": request.message,
            "type": "sms",
            "prioritize": "1" if self._config.prioritize else "0",
        }

    def send(self, request: SmsRequest, api_key: SecretStr) -> str:
        """Submit a message and return the gateway's message id.

        Raises:
            TransportError: Connection failure or timeout.
            HttpError: Status code other than 200.
            MalformedResponseError: Body is not a JSON object.
            GatewayRejectedError: Gateway answered ``success`` false.
        """
        try:
            resp = self._client.post(
                self._config.api_url,
                data=self.build_form(request, api_key),
                timeout=self._config.timeout,
            )
        except httpx.TimeoutException as exc:
            raise TransportError(str(exc) or "timeout") from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        if resp.status_code != 200:
            raise HttpError(resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            raise MalformedResponseError() from exc

        return self._parse_response(data)

    @staticmethod
    def _parse_response(data: Any) -> str:
        if not isinstance(data, dict):
            raise MalformedResponseError()

        if data.get("success") is not True:
            error = data.get("error")
            reason = error.get("message") if isinstance(error, dict) else None
            raise GatewayRejectedError(str(reason) if reason else UNKNOWN_ERROR)

        payload = data.get("data")
        messages = payload.get("messages") if isinstance(payload, dict) else None
        if isinstance(messages, list) and messages and isinstance(messages[0], dict):
            message_id = messages[0].get("ID")
            if message_id not in (None, ""):
                return str(message_id)
        return UNKNOWN_MESSAGE_ID

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
