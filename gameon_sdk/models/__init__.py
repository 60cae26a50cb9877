"""Export Pydantic models for convenience."""

from .common import ApiClientRequest, ApiClientResponse, HeaderParam, HttpMethod

__all__ = [
    "ApiClientRequest",
    "ApiClientResponse",
    "HeaderParam",
    "HttpMethod",
]
