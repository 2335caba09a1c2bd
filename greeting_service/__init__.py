"""Minimal greeting HTTP service with health check and graceful shutdown."""

__version__ = "0.1.0"
