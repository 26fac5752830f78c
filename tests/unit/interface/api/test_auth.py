"""Unit tests for request credential extraction."""

from starlette.requests import Request

from forum.interface.api.auth import ACCESS_TOKEN_COOKIE, get_access_token


def _request(headers: dict[str, str]) -> Request:
    raw = [(k.lower().encode(), v.encode()) for k, v in headers.items()]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw})


def test_bearer_header():
    assert get_access_token(_request({"Authorization": "Bearer abc.def.ghi"})) == "abc.def.ghi"


def test_cookie_fallback():
    request = _request({"Cookie": f"{ACCESS_TOKEN_COOKIE}=from-cookie"})

    assert get_access_token(request) == "from-cookie"


def test_header_wins_over_cookie():
    request = _request(
        {
            "Authorization": "Bearer from-header",
            "Cookie": f"{ACCESS_TOKEN_COOKIE}=from-cookie",
        }
    )

    assert get_access_token(request) == "from-header"


def test_non_bearer_scheme_ignored():
    assert get_access_token(_request({"Authorization": "Basic dXNlcjpwYXNz"})) is None


def test_no_credential():
    assert get_access_token(_request({})) is None
