"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = "8080"
LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the HTTP listener.

    Environment variable names map directly to field names in uppercase.
    Example: `port` reads from `PORT`.

    The port is kept as text and is not checked for being numeric. An invalid
    value is passed through to the listener and surfaces as a startup failure
    there.

    Attributes:
        host: Host interface for web server binding.
        port: Web server port; empty means the default port.
        log_level: Minimum level for structured log output.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    host: str = Field(default="0.0.0.0")
    port: str = Field(default=DEFAULT_PORT)
    log_level: str = Field(default="info")

    @field_validator("port")
    @classmethod
    def _validate_port_default(cls, value: str) -> str:
        if value == "":
            return DEFAULT_PORT
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().lower()
        if normalized_value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
        return normalized_value

    @property
    def bind_address(self) -> str:
        """Return the listener address in `:<port>` form."""

        return f":{self.port}"

    @property
    def listen_url(self) -> str:
        """Return the local URL announced when the listener starts."""

        return f"http://localhost{self.bind_address}"


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
