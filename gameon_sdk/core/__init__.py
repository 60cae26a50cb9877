"""Core building blocks."""

from .api_client import ApiClient
from .codec import BodyCodec, JsonCodec
from .errors import ApiClientError, BodyParseError, ServiceError, TransportError

__all__ = [
    "ApiClient",
    "ApiClientError",
    "BodyCodec",
    "BodyParseError",
    "JsonCodec",
    "ServiceError",
    "TransportError",
]
