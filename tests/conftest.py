"""Shared test fixtures and helpers."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from ab2websms.credentials.memory import InMemoryCredentialProvider
from ab2websms.models.contact import ContactRecord
from ab2websms.providers.ab2web.config import Ab2webConfig
from ab2websms.providers.ab2web.sms import Ab2webSmsProvider

API_KEY = "test-api-key-123"


def make_contact(phone: str = "8123456789", **kwargs: Any) -> ContactRecord:
    defaults: dict[str, Any] = {
        "title": "Dr",
        "first_name": "Asha",
        "last_name": "Rao",
        "display_name": "Asha Rao",
        "company": "Acme",
        "email": "asha@example.com",
    }
    defaults.update(kwargs)
    return ContactRecord(phone=phone, **defaults)


def success_response(message_id: str = "42") -> dict[str, Any]:
    return {"success": True, "data": {"messages": [{"ID": message_id}]}}


def error_response(message: str = "blocked") -> dict[str, Any]:
    return {"success": False, "error": {"message": message}}


class MockTransport(httpx.BaseTransport):
    """Captures requests and returns a canned response."""

    def __init__(
        self,
        json_data: Any = None,
        *,
        status_code: int = 200,
        content: bytes | None = None,
    ) -> None:
        self._json = json_data
        self._status_code = status_code
        self._content = content
        self.requests: list[httpx.Request] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._content is not None:
            return httpx.Response(self._status_code, content=self._content, request=request)
        return httpx.Response(self._status_code, json=self._json, request=request)


class RaisingTransport(httpx.BaseTransport):
    def __init__(self, exc: Exception) -> None:
        self._exc = exc
        self.requests: list[httpx.Request] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        raise self._exc


def make_provider(
    transport: httpx.BaseTransport,
    credentials: InMemoryCredentialProvider | None = None,
    **config: Any,
) -> Ab2webSmsProvider:
    return Ab2webSmsProvider(
        credentials or InMemoryCredentialProvider.with_api_key(API_KEY),
        Ab2webConfig(**config),
        client=httpx.Client(transport=transport),
    )


@pytest.fixture
def contact() -> ContactRecord:
    return make_contact()


@pytest.fixture
def credentials() -> InMemoryCredentialProvider:
    return InMemoryCredentialProvider.with_api_key(API_KEY)
