"""Transport contract and the default httpx-backed implementation."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import httpx

from gameon_sdk.models import ApiClientRequest, ApiClientResponse, HeaderParam

logger = logging.getLogger(__name__)


@runtime_checkable
class ApiTransport(Protocol):
    """Performs the network call for a fully built request."""

    async def invoke(self, request: ApiClientRequest) -> ApiClientResponse: ...


class HttpxTransport:
    """Async transport over ``httpx.AsyncClient``.

    Transport failures (``httpx.HTTPError`` and friends) propagate unchanged;
    status codes are never turned into exceptions here.
    """

    def __init__(self, *, timeout: float = 10.0, client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    async def invoke(self, request: ApiClientRequest) -> ApiClientResponse:
        logger.debug(
            "%s %s header_keys=%s has_body=%s",
            request.method,
            request.url,
            [header.key for header in request.headers],
            request.body is not None,
        )
        response = await self._client.request(
            request.method,
            request.url,
            headers=[header.as_tuple() for header in request.headers],
            content=request.body,
        )
        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
        return ApiClientResponse(
            status_code=response.status_code,
            body=response.text or None,
            headers=[HeaderParam(key=key, value=value) for key, value in response.headers.multi_items()],
        )
