"""Integration settings supplied by the host application."""

from __future__ import annotations

from pydantic import BaseModel, SecretStr


class IntegrationSettings(BaseModel):
    """Stored configuration of one third-party integration.

    Attributes:
        name: Integration name (e.g. ``"Ab2webSms"``).
        is_published: Whether the host has enabled the integration.
        api_key: Gateway API key, if one has been entered.
    """

    name: str
    is_published: bool = False
    api_key: SecretStr | None = None

    @property
    def has_api_key(self) -> bool:
        return self.api_key is not None and bool(self.api_key.get_secret_value().strip())
