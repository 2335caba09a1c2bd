"""Domain models used across application layer boundaries."""

from .models import GREETING_TEXT, Health

__all__ = ["GREETING_TEXT", "Health"]
