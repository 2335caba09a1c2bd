"""FastAPI application factory for the greeting service.

The application carries exactly two routes; interactive docs and the OpenAPI
document are disabled so no other path is served.
"""

from fastapi import FastAPI

from .routers import api_create_health_route, api_create_root_route


def create_api_application() -> FastAPI:
    """Create the FastAPI application instance for the service.

    Returns:
        FastAPI: Application with the greeting and health routes mounted.
    """

    return FastAPI(
        title="Greeting Service",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        routes=[api_create_root_route(), api_create_health_route()],
    )
