"""Global logger configuration for the transreduce project."""

import logging
import os
import sys

__all__ = ["LOG_LEVELS", "logger", "setup_logger"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logger(
    name: str = "transreduce",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Records go to stderr so that programs printing results on stdout keep
    their output clean. An unknown ``LOG_LEVEL`` in the environment falls
    back to INFO; :class:`~transreduce.core.config.Settings` reports it.

    Args:
        name: Logger name (typically project name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance

    Raises:
        ValueError: If ``level`` is given and is not one of ``LOG_LEVELS``.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        if level not in LOG_LEVELS:
            level = "INFO"
    elif level.upper() not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}, expected one of {LOG_LEVELS}.")

    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


# Create default logger instance for the project
logger = setup_logger()
