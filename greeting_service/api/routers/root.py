"""Greeting endpoint served at the site root."""

from fastapi import Request, status
from fastapi.responses import PlainTextResponse, Response
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from greeting_service.domain import GREETING_TEXT


def api_root_response(method: str) -> Response:
    """Build the response for a request to `/`.

    The 405 body is `method not allowed` without a trailing newline, which
    differs from the newline-terminated body of a Go `http.Error` reply; the
    content type and `nosniff` header match it.

    Args:
        method: HTTP method of the incoming request.

    Returns:
        Response: Greeting text for GET, method-not-allowed error otherwise.
    """

    if method != "GET":
        return PlainTextResponse(
            "method not allowed",
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            headers={"X-Content-Type-Options": "nosniff"},
        )
    return PlainTextResponse(GREETING_TEXT, status_code=status.HTTP_200_OK)


class _GreetingEndpoint:
    """ASGI endpoint answering `/` for every request method."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        response = api_root_response(request.method)
        await response(scope, receive, send)


def api_create_root_route() -> Route:
    """Create the route exposing the plain-text greeting at `/`.

    The route carries no method list so every method, including
    non-standard tokens, reaches the handler and gets the plain-text 405
    instead of the framework's JSON error body.

    Returns:
        Route: Route matching `/` for any method.
    """

    return Route("/", endpoint=_GreetingEndpoint(), name="greeting")
