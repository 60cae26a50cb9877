"""Error types raised by the invocation pipeline."""

from __future__ import annotations

from typing import Any


class ApiClientError(RuntimeError):
    """Base class for failures surfaced by ``ApiClient.invoke``."""

    kind = "ApiClientError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class TransportError(ApiClientError):
    """Raised when the transport could not complete the call."""

    kind = "TransportError"

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class BodyParseError(ApiClientError, ValueError):
    """Raised when a response body is present but cannot be decoded."""

    kind = "BodyParseError"

    def __init__(self, body: str) -> None:
        super().__init__(f"Failed trying to parse the response body: {body}")
        self.body = body


class ServiceError(ApiClientError):
    """Raised for responses outside the 2xx range."""

    kind = "ServiceError"
    DEFAULT_MESSAGE = "Unknown error"

    def __init__(
        self,
        status_code: int,
        *,
        message: str = DEFAULT_MESSAGE,
        response: Any = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.body = body
