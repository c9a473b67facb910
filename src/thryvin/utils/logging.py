"""Logging configuration for thryvin."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from thryvin.utils.config import Config

LOGGER_NAME = "thryvin"
LOG_FILE = "onboarding.log"


def setup_logging(config: Config, console_output: bool = False) -> logging.Logger:
    """
    Route the ``thryvin`` loggers to the workspace log file.

    Rejected inputs and exhausted coach rerolls are logged at DEBUG, step
    transitions and coach draws at INFO; ``config.log_level`` picks which of
    them reach the file. Calling this again replaces the handlers installed
    by the previous call, so one process never writes a record twice.

    Args:
        config: Application configuration
        console_output: Also echo records at ``config.console_log_level``
            to stderr

    Returns:
        The configured ``thryvin`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in [h for h in logger.handlers if getattr(h, "_thryvin", False)]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG)

    config.logging_path.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        config.logging_path / LOG_FILE, maxBytes=100000, backupCount=3
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    file_handler.setLevel(config.log_level)
    _install(logger, file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            logging.Formatter("%(levelname)s - %(name)s - %(message)s")
        )
        console_handler.setLevel(config.console_log_level)
        _install(logger, console_handler)

    return logger


def _install(logger: logging.Logger, handler: logging.Handler) -> None:
    handler._thryvin = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
