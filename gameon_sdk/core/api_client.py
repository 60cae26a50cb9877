"""Base class for generated API clients."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from gameon_sdk.models import ApiClientRequest, ApiClientResponse, HeaderParam

from .errors import BodyParseError, ServiceError, TransportError
from .request_builder import build_url, is_code_successful

if TYPE_CHECKING:
    from gameon_sdk.config import ApiConfiguration

logger = logging.getLogger(__name__)

# Header entries: HeaderParam, (key, value) pairs or {"key": ..., "value": ...} dicts.
HeaderInput = HeaderParam | tuple[str, str] | dict[str, str]


class ApiClient:
    """Invocation wrapper shared by generated service operations.

    Subclasses describe one operation per method and delegate to
    :meth:`invoke`, which builds the request, calls the configured transport
    and turns the response into a decoded body or one of the errors from
    :mod:`gameon_sdk.core.errors`.
    """

    def __init__(self, api_configuration: ApiConfiguration) -> None:
        self.api_configuration = api_configuration

    async def invoke(
        self,
        method: str,
        endpoint: str,
        path: str,
        path_params: Mapping[str, str] | None = None,
        query_params: Mapping[str, str] | None = None,
        header_params: Iterable[HeaderInput] | None = None,
        body_param: Any = None,
        errors: Mapping[int, str] | None = None,
    ) -> Any:
        """Execute one operation and return the decoded response body.

        Args:
            method: HTTP method, such as ``"POST"``, ``"GET"``, ``"DELETE"``.
            endpoint: Base API url.
            path: Path pattern with ``{paramName}`` placeholders.
            path_params: Values substituted into ``path``.
            query_params: Query string parameters, in order.
            header_params: Ordered header pairs; duplicates are sent as given.
            body_param: Request body, serialized by the configured codec; ``None`` sends no body.
            errors: Status codes the operation recognises, mapped to messages.

        Raises:
            TransportError: The transport failed before producing a response. The
                transport exception is available as ``cause`` and ``__cause__``,
                so ``except httpx.TimeoutException`` does not match directly.
            BodyParseError: The response body could not be decoded.
            ServiceError: The response status is outside the 2xx range.
        """

        codec = self.api_configuration.codec
        request = ApiClientRequest(
            url=build_url(endpoint, path, query_params, path_params),
            method=method,
            headers=list(header_params or []),
            body=codec.encode(body_param) if body_param is not None else None,
        )

        logger.debug("%s %s", request.method, request.url)
        try:
            response: ApiClientResponse = await self.api_configuration.api_client.invoke(request)
        except Exception as exc:
            raise TransportError(f"Call to service failed: {exc}", cause=exc) from exc

        body = self._decode_body(response)
        if is_code_successful(response.status_code):
            return body

        logger.debug("%s %s returned status=%s", request.method, request.url, response.status_code)
        message = ServiceError.DEFAULT_MESSAGE
        if errors and response.status_code in errors:
            message = response.body or errors[response.status_code]
        raise ServiceError(
            response.status_code,
            message=message,
            response=body,
            body=response.body,
        )

    def _decode_body(self, response: ApiClientResponse) -> Any:
        if not response.body:
            return None
        try:
            return self.api_configuration.codec.decode(response.body)
        except ValueError as exc:
            raise BodyParseError(response.body) from exc
