"""
Logging Configuration Module.

This module provides centralized logging configuration for the pattern catalogue.
Library modules only ever call ``logging.getLogger(__name__)``; handlers are
installed by :func:`setup_logging`, which the command line entry point calls.

Features:
- Configurable log levels per module
- Console and optional file logging
- Simple, detailed and JSON-like line formats
"""

import logging
from pathlib import Path
from typing import Optional

from pattern_catalog.core.config import get_settings

LOG_FILE_NAME = "pattern_catalog.log"


# Define log formats
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

_FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}


# Module-specific log levels
MODULE_LOG_LEVELS = {
    "pattern_catalog": "INFO",
    "pattern_catalog.catalog": "DEBUG",
    "pattern_catalog.catalog.registry": "DEBUG",
    "pattern_catalog.catalog.verify": "DEBUG",
    "pattern_catalog.catalog.readme": "INFO",
    "pattern_catalog.cli": "INFO",
}


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: Optional[bool] = None,
    log_file_dir: Optional[str] = None,
) -> None:
    """
    Configure logging for the catalogue.

    Args:
        log_level: Override default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override default format (simple, detailed, json)
        enable_file: Whether to enable file logging; defaults to the configured value
        log_file_dir: Directory for the log file; defaults to the configured value

    Unset arguments are read from PATTERN_CATALOG_* settings, so an invalid
    environment raises pydantic.ValidationError here.
    """
    config = get_settings().logging
    level = (log_level or config.level).upper()
    fmt = log_format or config.format
    to_file = config.enable_file if enable_file is None else enable_file

    format_str = _FORMATS.get(fmt, SIMPLE_FORMAT)
    formatter = logging.Formatter(format_str, datefmt="%Y-%m-%d %H:%M:%S")

    # Capture all levels, filter at handler level
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if to_file:
        log_dir = Path(log_file_dir or config.file_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.debug("Logging configured: level=%s, format=%s, file_logging=%s", level, fmt, to_file)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)
