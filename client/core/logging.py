"""Logging configuration for the TubeScribe client."""

import logging
import os
import sys


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure and return the client logger.

    Client logs go to stderr so stdout stays clean for the transcript.
    """
    level = level or os.getenv("TUBESCRIBE_CLIENT_LOG_LEVEL", "WARNING")
    logger = logging.getLogger("tubescribe_client")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)

    return logger


logger = setup_logging()


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a child logger with the given name."""
    if name:
        return logging.getLogger(f"tubescribe_client.{name}")
    return logger
