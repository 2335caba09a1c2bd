"""Health endpoint with a static liveness payload."""

import structlog
from fastapi import Response, status
from pydantic_core import PydanticSerializationError
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from greeting_service.domain import Health

logger = structlog.get_logger(__name__)


def api_render_health(health: Health) -> bytes:
    """Serialize a health record as compact JSON terminated by a newline.

    A serialization failure is logged and yields an empty body; the caller
    still answers 200.

    Args:
        health: Health record to serialize.

    Returns:
        bytes: Encoded JSON document, or an empty body on failure.
    """

    try:
        return (health.model_dump_json() + "\n").encode("utf-8")
    except PydanticSerializationError as error:
        logger.warning("health_encode_failed", error=str(error))
        return b""


class _HealthEndpoint:
    """ASGI endpoint answering `/health` for every request method."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = Response(
            content=api_render_health(Health()),
            status_code=status.HTTP_200_OK,
            media_type="application/json",
        )
        await response(scope, receive, send)


def api_create_health_route() -> Route:
    """Create health-check route answering any method at `/health`.

    Returns:
        Route: Route matching `/health` for any method.
    """

    return Route("/health", endpoint=_HealthEndpoint(), name="health")
