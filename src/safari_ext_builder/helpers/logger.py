"""Logging configuration for the Safari Extension Builder."""

import logging
import sys

ROOT_LOGGER_NAME = "safari_ext_builder"


def setup_logger(
    name: str, level: str = "INFO", json_output: bool = False
) -> logging.Logger:
    """
    Set up logger with appropriate handlers.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_output: If True, send logs to stderr to avoid contaminating JSON stdout

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    # Clear existing handlers
    logger.handlers.clear()

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Use stderr for JSON output to keep stdout clean
    handler = logging.StreamHandler(sys.stderr if json_output else sys.stdout)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger under the package logger configured by the CLI."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
