"""Main module entrypoint for local runtime execution.

This module validates startup configuration, serves until interrupted and maps
fatal lifecycle failures to a non-zero exit status.
"""

import structlog

from greeting_service.bootstrap import bootstrap_create_service
from greeting_service.config import SettingsLoadError, config_load_settings
from greeting_service.server import ListenerError, ShutdownTimeoutError
from greeting_service.shared import configure_logging

logger = structlog.get_logger(__name__)


def main() -> None:
    """Run the greeting service until SIGINT.

    Returns:
        None: Returns normally after a clean graceful shutdown.

    Raises:
        SystemExit: Raised with status 1 on invalid settings, listener
            failure or an expired shutdown deadline.
    """

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        configure_logging()
        logger.critical("settings_invalid", error=str(error))
        raise SystemExit(1) from error

    configure_logging(level=settings.log_level)
    try:
        service = bootstrap_create_service(settings)
        service.run_until_interrupted()
    except ListenerError as error:
        logger.critical("server_error", error=str(error))
        raise SystemExit(1) from error
    except ShutdownTimeoutError as error:
        logger.critical("graceful_shutdown_failed", error=str(error))
        raise SystemExit(1) from error

    logger.info("server_stopped")


if __name__ == "__main__":
    main()
