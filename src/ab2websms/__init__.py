"""ab2websms - send SMS to contacts through the AB2Web gateway."""

from ab2websms._version import __version__
from ab2websms.credentials import (
    CredentialProvider,
    CredentialResolver,
    CredentialState,
    InMemoryCredentialProvider,
    Resolved,
    Unresolved,
)
from ab2websms.errors import (
    Ab2webSmsError,
    EmptyMessageContentError,
    GatewayRejectedError,
    HttpError,
    IntegrationNotConfiguredError,
    InvalidPhoneNumberError,
    MalformedResponseError,
    TransportError,
)
from ab2websms.models.contact import ContactRecord
from ab2websms.models.delivery import (
    InvalidInput,
    Rejected,
    Sent,
    SmsRequest,
    SmsResult,
    sms_result_adapter,
)
from ab2websms.models.enums import ErrorKind, PlaceholderMode, ResultStatus
from ab2websms.models.integration import IntegrationSettings
from ab2websms.providers.ab2web import (
    DEFAULT_API_URL,
    Ab2webConfig,
    Ab2webGatewayClient,
    Ab2webSmsProvider,
)
from ab2websms.providers.sms import (
    COMPATIBLE_PLACEHOLDERS,
    CORRECTED_PLACEHOLDERS,
    MockSmsTransport,
    SmsTransport,
    is_valid_phone,
    normalize_phone,
    placeholders_for,
    render_content,
    strip_plus,
)

__all__ = [
    "COMPATIBLE_PLACEHOLDERS",
    "CORRECTED_PLACEHOLDERS",
    "DEFAULT_API_URL",
    "Ab2webConfig",
    "Ab2webGatewayClient",
    "Ab2webSmsError",
    "Ab2webSmsProvider",
    "ContactRecord",
    "CredentialProvider",
    "CredentialResolver",
    "CredentialState",
    "EmptyMessageContentError",
    "ErrorKind",
    "GatewayRejectedError",
    "HttpError",
    "InMemoryCredentialProvider",
    "IntegrationNotConfiguredError",
    "IntegrationSettings",
    "InvalidInput",
    "InvalidPhoneNumberError",
    "MalformedResponseError",
    "MockSmsTransport",
    "PlaceholderMode",
    "Rejected",
    "Resolved",
    "ResultStatus",
    "Sent",
    "SmsRequest",
    "SmsResult",
    "SmsTransport",
    "TransportError",
    "Unresolved",
    "__version__",
    "is_valid_phone",
    "normalize_phone",
    "placeholders_for",
    "render_content",
    "sms_result_adapter",
    "strip_plus",
]
