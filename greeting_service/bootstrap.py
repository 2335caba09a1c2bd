"""Application bootstrap wiring for dependency assembly."""

from greeting_service.api import create_api_application
from greeting_service.config import AppSettings
from greeting_service.server import HttpService


def bootstrap_create_service(settings: AppSettings) -> HttpService:
    """Assemble the HTTP service from validated settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        HttpService: Service ready to start, not yet bound to a socket.
    """

    application = create_api_application()
    return HttpService(application=application, settings=settings)
