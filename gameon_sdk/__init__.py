"""Runtime base for generated GameOn API clients."""

from .config import ApiConfiguration, Settings, get_settings
from .core import (
    ApiClient,
    ApiClientError,
    BodyCodec,
    BodyParseError,
    JsonCodec,
    ServiceError,
    TransportError,
)
from .http import ApiTransport, HttpxTransport
from .models import ApiClientRequest, ApiClientResponse, HeaderParam

__all__ = [
    "ApiClient",
    "ApiClientError",
    "ApiClientRequest",
    "ApiClientResponse",
    "ApiConfiguration",
    "ApiTransport",
    "BodyCodec",
    "BodyParseError",
    "HeaderParam",
    "HttpxTransport",
    "JsonCodec",
    "ServiceError",
    "Settings",
    "TransportError",
    "get_settings",
]
