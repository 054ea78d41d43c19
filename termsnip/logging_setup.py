"""Logging configuration for the termsnip package."""

import logging
import os
import sys

LOG_LEVEL_ENV = "TERMSNIP_LOG_LEVEL"


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger("termsnip")
    logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger


def setup_logging_from_env(default: str = "WARNING") -> logging.Logger:
    """Configure logging from TERMSNIP_LOG_LEVEL."""
    return setup_logging(os.environ.get(LOG_LEVEL_ENV, default))
