"""Transport exports."""

from .base import ApiTransport, HttpxTransport

__all__ = ["ApiTransport", "HttpxTransport"]
