from __future__ import annotations

from authendpoint.pages import (
    build_config_key,
    build_error_redirect_url,
    build_redirect_url,
)

QUERY = "key1=value1&key2=value2"


def test_build_config_key() -> None:
    assert build_config_key("GlobalTrotters", "login") == "GlobalTrotters-login"


def test_build_config_key_inserts_nothing_else() -> None:
    assert build_config_key("", "") == "-"
    assert build_config_key("my-app", "/x") == "my-app-/x"


def test_build_redirect_url_appends_query() -> None:
    assert build_redirect_url("custom-page", QUERY) == "custom-page?key1=value1&key2=value2"


def test_build_redirect_url_extends_existing_query() -> None:
    assert (
        build_redirect_url("custom-page?test=xyz", QUERY)
        == "custom-page?test=xyz&key1=value1&key2=value2"
    )


def test_build_redirect_url_without_query() -> None:
    assert build_redirect_url("custom-page", "") == "custom-page"
    assert build_redirect_url("custom-page", None) == "custom-page"


def test_build_redirect_url_without_context() -> None:
    assert build_redirect_url(None, QUERY) is None


def test_build_error_redirect_url_strips_error_markers() -> None:
    query = "authFailure=true&sp=app&errorCode=17900"
    assert build_error_redirect_url("custom-page", query) == "custom-page?sp=app"
    assert build_error_redirect_url("custom-page", "authFailure=true") == "custom-page"
    assert build_error_redirect_url(None, query) is None
