"""Configuration package for runtime settings and startup validation."""

from .settings import DEFAULT_PORT, AppSettings, SettingsLoadError, config_load_settings

__all__ = ["AppSettings", "DEFAULT_PORT", "SettingsLoadError", "config_load_settings"]
