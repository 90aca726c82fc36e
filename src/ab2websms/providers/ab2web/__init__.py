"""AB2Web provider."""

from ab2websms.providers.ab2web.config import DEFAULT_API_URL, Ab2webConfig
from ab2websms.providers.ab2web.gateway import Ab2webGatewayClient
from ab2websms.providers.ab2web.sms import Ab2webSmsProvider

__all__ = [
    "DEFAULT_API_URL",
    "Ab2webConfig",
    "Ab2webGatewayClient",
    "Ab2webSmsProvider",
]
