"""Logging configuration for the project."""

import logging
import sys
from typing import Optional
from pythonjsonlogger import jsonlogger

from ..config import LoggingConfig

PACKAGE_LOGGER = "sports_data_lake"


def _build_handler(settings: LoggingConfig) -> logging.Handler:
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)

    # Use JSON formatter for production, simple formatter for dev
    if settings.environment == "prod":
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    return handler


def _apply(logger: logging.Logger, settings: LoggingConfig) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    logger.addHandler(_build_handler(settings))
    logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Settings come from the environment as it is when the logger is first
    requested; call configure_logging() once a .env file has been loaded.

    Args:
        name: Logger name. If None, uses the package logger.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name or PACKAGE_LOGGER)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    _apply(logger, LoggingConfig())
    return logger


def configure_logging(settings: LoggingConfig) -> None:
    """
    Re-apply level and formatter to every logger in the package.

    Module loggers are created at import, before Config.from_env() reads
    the .env file, so they are reconfigured here from the loaded settings.
    """
    names = [
        name for name in logging.Logger.manager.loggerDict
        if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + ".")
    ]
    for name in names:
        logger = logging.getLogger(name)
        if logger.handlers:
            _apply(logger, settings)
