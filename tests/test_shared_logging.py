import logging

import structlog

from greeting_service.shared import configure_logging


def test_configure_logging_sets_root_level() -> None:
    root_logger = logging.getLogger()
    previous_level = root_logger.level
    try:
        configure_logging(level="warning")

        assert root_logger.level == logging.WARNING
        assert structlog.is_configured()
    finally:
        root_logger.setLevel(previous_level)
        structlog.reset_defaults()
