"""In-memory credential provider."""

from __future__ import annotations

from pydantic import SecretStr

from ab2websms.credentials.base import CredentialProvider
from ab2websms.models.integration import IntegrationSettings


class InMemoryCredentialProvider(CredentialProvider):
    """Serves integration settings from a dict, for tests and simple hosts."""

    def __init__(self, integrations: list[IntegrationSettings] | None = None) -> None:
        self._integrations = {i.name: i for i in integrations or []}
        self.calls: list[str] = []

    @classmethod
    def with_api_key(
        cls, api_key: str, *, name: str = "Ab2webSms", is_published: bool = True
    ) -> InMemoryCredentialProvider:
        return cls(
            [IntegrationSettings(name=name, is_published=is_published, api_key=SecretStr(api_key))]
        )

    def set(self, settings: IntegrationSettings) -> None:
        self._integrations[settings.name] = settings

    def get_integration(self, name: str) -> IntegrationSettings | None:
        self.calls.append(name)
        return self._integrations.get(name)
