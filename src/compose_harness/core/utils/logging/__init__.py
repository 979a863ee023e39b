"""Logging utilities for compose_harness package."""

import logging
import os
import sys

# Create global logger instance
logger = logging.getLogger("Compose-Harness")


def setup_compose_harness_logging(level: int | None = None) -> None:
    """
    Setup logging with a clean format for the compose_harness package.

    Args:
        level: Logging level. Defaults to COMPOSE_HARNESS_LOG_LEVEL env var or INFO.
    """
    if level is None:
        level_name = os.environ.get("COMPOSE_HARNESS_LOG_LEVEL", "INFO")
        level = getattr(logging, level_name.upper(), logging.INFO)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Use stdout stream handler to ensure logs are dumped to stdout
    logging_handler = logging.StreamHandler(sys.stdout)
    logging_formatter = logging.Formatter("[Compose Harness] [%(levelname)s] %(message)s")

    logging_handler.setFormatter(logging_formatter)
    logger.addHandler(logging_handler)
    logger.setLevel(level)
    logger.propagate = False  # Don't propagate to root logger


__all__ = [
    "logger",
    "setup_compose_harness_logging",
]
