"""Abstract base class for credential lookup."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ab2websms.models.integration import IntegrationSettings


class CredentialProvider(ABC):
    """Reads integration settings from the host application."""

    @abstractmethod
    def get_integration(self, name: str) -> IntegrationSettings | None:
        """Look up an integration by name.

        Must be side-effect free: the resolver may call it more than once
        when several sends race on first use.

        Args:
            name: Integration name, e.g. ``"Ab2webSms"``.

        Returns:
            The stored settings, or None if the integration does not exist.
        """
        ...
