"""Lazy, thread-safe API key resolution."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from pydantic import SecretStr

from ab2websms.credentials.base import CredentialProvider
from ab2websms.errors import IntegrationNotConfiguredError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unresolved:
    """No API key has been loaded yet."""


@dataclass(frozen=True)
class Resolved:
    """API key loaded; kept for the lifetime of the resolver."""

    api_key: SecretStr


CredentialState = Unresolved | Resolved


class CredentialResolver:
    """Fetches the API key on first use and caches it in memory.

    The state is replaced as a whole (never mutated), so readers see either
    ``Unresolved`` or a complete ``Resolved``. A failed lookup leaves the
    state unresolved and the next call tries again.
    """

    def __init__(self, provider: CredentialProvider, integration_name: str) -> None:
        self._provider = provider
        self._integration_name = integration_name
        self._state: CredentialState = Unresolved()
        self._lock = threading.Lock()

    @property
    def state(self) -> CredentialState:
        return self._state

    @property
    def is_resolved(self) -> bool:
        return isinstance(self._state, Resolved)

    def api_key(self) -> SecretStr:
        """Return the cached key, resolving it first if needed.

        Raises:
            IntegrationNotConfiguredError: If the integration is missing,
                unpublished, or has an empty API key.
        """
        state = self._state
        if isinstance(state, Resolved):
            return state.api_key
        with self._lock:
            state = self._state
            if isinstance(state, Resolved):
                return state.api_key
            state = Resolved(api_key=self._load())
            self._state = state
        logger.debug("Credentials resolved for integration %s", self._integration_name)
        return state.api_key

    def _load(self) -> SecretStr:
        settings = self._provider.get_integration(self._integration_name)
        if settings is None or not settings.is_published:
            raise IntegrationNotConfiguredError(
                f"{self._integration_name} integration is not configured properly."
            )
        if not settings.has_api_key:
            raise IntegrationNotConfiguredError(
                f"{self._integration_name} integration has no API key."
            )
        assert settings.api_key is not None
        return settings.api_key
