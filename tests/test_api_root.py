"""Tests for the greeting endpoint served at the site root."""

import pytest
from fastapi.testclient import TestClient

from greeting_service.api.application import create_api_application
from greeting_service.api.routers import api_root_response


def _build_client() -> TestClient:
    """Create a test client over a fresh application.

    Returns:
        TestClient: Client bound to the greeting application.
    """

    return TestClient(create_api_application())


def test_api_root_returns_greeting_for_get() -> None:
    """Return HTTP 200 and the exact greeting text for GET requests.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    response = _build_client().get("/")

    assert response.status_code == 200
    assert response.headers["content-type"] == "text/plain; charset=utf-8"
    assert response.content == "Hello from Go! 🎯".encode("utf-8")


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "OPTIONS", "PROPFIND", "FOO"])
def test_api_root_rejects_non_get_methods(method: str) -> None:
    """Return HTTP 405 with a plain-text body for every method except GET.

    Args:
        method: HTTP method under test.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    response = _build_client().request(method, "/")

    assert response.status_code == 405
    assert response.headers["content-type"] == "text/plain; charset=utf-8"
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.text == "method not allowed"


def test_api_root_rejects_head() -> None:
    """Treat HEAD like any other non-GET method."""

    response = _build_client().head("/")

    assert response.status_code == 405


def test_api_unknown_path_is_not_found() -> None:
    """Serve only the two fixed paths."""

    client = _build_client()

    assert client.get("/hello").status_code == 404
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_api_root_response_builds_plain_text_error_for_any_token() -> None:
    """Answer arbitrary method tokens with the plain-text 405."""

    response = api_root_response("MKCOL")

    assert response.status_code == 405
    assert response.body == b"method not allowed"
