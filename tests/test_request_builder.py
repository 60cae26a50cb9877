"""Unit tests for URL assembly."""

from __future__ import annotations

import pytest

from gameon_sdk.core.request_builder import (
    build_query_string,
    build_url,
    interpolate_params,
    is_code_successful,
    percent_encode,
)


def test_interpolate_encodes_values() -> None:
    path = interpolate_params("/users/{id}/posts/{postId}", {"id": "42", "postId": "7 a"})

    assert path == "/users/42/posts/7%20a"


def test_interpolate_leaves_unknown_placeholders() -> None:
    path = interpolate_params("/users/{id}/posts/{postId}", {"id": "42", "unused": "x"})

    assert path == "/users/42/posts/{postId}"


def test_interpolate_replaces_first_occurrence_only() -> None:
    assert interpolate_params("/{id}/{id}", {"id": "1"}) == "/1/{id}"


def test_interpolate_without_params_returns_template() -> None:
    assert interpolate_params("/matches/{matchId}", None) == "/matches/{matchId}"


def test_percent_encode_matches_uri_component_rules() -> None:
    assert percent_encode("a/b?c=d&e") == "a%2Fb%3Fc%3Dd%26e"
    assert percent_encode("-_.!~*'()") == "-_.!~*'()"
    assert percent_encode("é") == "%C3%A9"


def test_trailing_slash_on_endpoint_is_trimmed_once() -> None:
    assert build_url("http://x/", "/path", None, None) == "http://x/path"
    assert build_url("http://x", "/path", None, None) == "http://x/path"
    assert build_url("http://x//", "/path", None, None) == "http://x//path"


def test_query_string_preserves_order() -> None:
    assert build_query_string({"a": "1", "b": "2"}, False) == "?a=1&b=2"
    assert build_query_string({"b": "2", "a": "1"}, False) == "?b=2&a=1"


def test_query_string_continues_existing_query() -> None:
    assert build_query_string({"a": "1"}, True) == "&a=1"


def test_query_string_encodes_names_and_values() -> None:
    assert build_query_string({"player name": "a&b"}, False) == "?player%20name=a%26b"


@pytest.mark.parametrize("params", [None, {}])
def test_query_string_absent_or_empty(params) -> None:
    assert build_query_string(params, False) == ""
    assert build_query_string(params, True) == ""


def test_build_url_with_constant_query_in_template() -> None:
    url = build_url(
        "https://api.example.com/v1/",
        "/matches/{matchId}?include=prizes",
        {"limit": "10"},
        {"matchId": "m 1"},
    )

    assert url == "https://api.example.com/v1/matches/m%201?include=prizes&limit=10"


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [(199, False), (200, True), (204, True), (299, True), (300, False), (404, False)],
)
def test_is_code_successful(status_code: int, expected: bool) -> None:
    assert is_code_successful(status_code) is expected
