"""URL assembly helpers for generated operations."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import quote

# Characters left as-is by URI component encoding besides ASCII alphanumerics.
_COMPONENT_SAFE = "-_.!~*'()"


def percent_encode(value: str) -> str:
    """Encode one URI component (path segment value, query name or value)."""

    return quote(str(value), safe=_COMPONENT_SAFE)


def is_code_successful(status_code: int) -> bool:
    return 200 <= status_code < 300


def interpolate_params(path: str, params: Mapping[str, str] | None) -> str:
    """Substitute ``{name}`` placeholders, first occurrence only."""

    if params is None:
        return path

    result = path
    for name, value in params.items():
        result = result.replace("{" + name + "}", percent_encode(value), 1)
    return result


def build_query_string(params: Mapping[str, str] | None, is_query_start: bool) -> str:
    """Render query parameters, continuing an existing query when asked to."""

    if not params:
        return ""

    separator = "&" if is_query_start else "?"
    pairs = "&".join(
        f"{percent_encode(name)}={percent_encode(value)}" for name, value in params.items()
    )
    return separator + pairs


def build_url(
    endpoint: str,
    path: str,
    query_params: Mapping[str, str] | None,
    path_params: Mapping[str, str] | None,
) -> str:
    """Combine base endpoint, path template and parameters into one URL."""

    base = endpoint[:-1] if endpoint.endswith("/") else endpoint
    path_with_params = interpolate_params(path, path_params)
    query_string = build_query_string(query_params, "?" in path_with_params)
    return base + path_with_params + query_string
