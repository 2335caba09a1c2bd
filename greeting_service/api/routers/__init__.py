"""API route package for endpoint composition."""

from .health import api_create_health_route, api_render_health
from .root import api_create_root_route, api_root_response

__all__ = ["api_create_health_route", "api_create_root_route", "api_render_health", "api_root_response"]
