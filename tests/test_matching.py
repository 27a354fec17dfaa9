"""
Tests for path parameter matching.
"""

import pytest

from exobase import ErrorKind, RouteMismatchError
from exobase.matching import PathPattern, parse_path_params

PATH = "/v1/show/w1/account/a1/details"


def test_returns_parsed_params():
    assert parse_path_params(PATH, "/v1/show/{workspace}/account/{account}/details") == {
        "workspace": "w1",
        "account": "a1",
    }


@pytest.mark.parametrize(
    "pattern",
    [
        "/v1/show/{workspace}/account/{account}",
        "/v1/show/{workspace}",
        "/v1/show/{workspace}/account",
        "/v1/show",
        "/v1/show/{workspace}/account/{account}/details/{extra}",
    ],
)
def test_segment_count_mismatch(pattern):
    with pytest.raises(RouteMismatchError) as exc:
        parse_path_params(PATH, pattern)
    assert exc.value.key
    assert exc.value.kind is ErrorKind.ROUTE_MISMATCH
    assert exc.value.status == 404


def test_path_longer_than_pattern():
    with pytest.raises(RouteMismatchError):
        parse_path_params("/v1/timeout/abc/clear", "/v1/timeout/{id}")


def test_literal_mismatch():
    with pytest.raises(RouteMismatchError):
        parse_path_params("/v1/show/w1/accounts/a1/details", "/v1/show/{workspace}/account/{account}/details")


def test_matching_is_case_sensitive():
    with pytest.raises(RouteMismatchError):
        parse_path_params("/V1/ping", "/v1/ping")


def test_pattern_without_placeholders():
    assert parse_path_params("/v1/ping", "/v1/ping") == {}


def test_compiled_pattern_reports_params():
    pattern = PathPattern.compile("/v1/timeout/{id}/clear")
    assert pattern.params == ("id",)
    assert pattern.match("/v1/timeout/t_1/clear") == {"id": "t_1"}


def test_braces_alone_are_literal():
    assert parse_path_params("/a/{}", "/a/{}") == {}
