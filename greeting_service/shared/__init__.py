"""Cross-cutting helpers shared by runtime layers."""

from .logging import configure_logging

__all__ = ["configure_logging"]
