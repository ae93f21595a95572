"""Logging configuration for TubeScribe."""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER = "tubescribe"

_RESERVED_LOG_KEYS = set(logging.makeLogRecord({}).__dict__.keys()) | {"asctime", "message"}

# Never written to any handler, whatever a caller passes via `extra`
_REDACTED_KEYS = {"api_key", "key", "authorization"}


def _to_jsonable(value):
    try:
        json.dumps(value)
        return value
    except TypeError:
        return str(value)


def _extract_context(record: logging.LogRecord) -> dict:
    """Collect the fields a caller attached through `extra=`."""
    context = {}
    for key, value in record.__dict__.items():
        if key in _RESERVED_LOG_KEYS or key.startswith("_"):
            continue
        context[key] = "***" if key.lower() in _REDACTED_KEYS else _to_jsonable(value)
    return context


class JsonFormatter(logging.Formatter):
    """One JSON object per line, for the optional log file."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = _extract_context(record)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


class ContextTextFormatter(logging.Formatter):
    """Text formatter that appends `extra` fields as key=value."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = _extract_context(record)
        if not context:
            return base
        parts = [f"{k}={v}" for k, v in sorted(context.items())]
        return f"{base} | {' '.join(parts)}"


def _stream_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        ContextTextFormatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return handler


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=path,
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(JsonFormatter())
    return handler


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    target = os.path.abspath(path)
    return any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == target for h in logger.handlers
    )


def setup_logging(level: str | None = None, log_file: str | None = None) -> logging.Logger:
    """Configure and return the application logger.

    Safe to call more than once: the stream handler is attached on the
    first call and a given log file is attached at most once, later calls
    only adjust the level.

    Args:
        level: Log level name. Defaults to TUBESCRIBE_LOG_LEVEL, then INFO.
        log_file: Path of the JSON log file. Defaults to TUBESCRIBE_LOG_FILE;
            no file is written when neither is set.
    """
    level = level or os.getenv("TUBESCRIBE_LOG_LEVEL", "INFO")
    log_file = log_file or os.getenv("TUBESCRIBE_LOG_FILE", "")
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        logger.addHandler(_stream_handler())

    if log_file:
        path = Path(log_file).expanduser()
        if not _has_file_handler(logger, path):
            logger.addHandler(_file_handler(path))

    return logger


logger = setup_logging()


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a child logger, e.g. get_logger("gemini") -> tubescribe.gemini."""
    if name:
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")
    return logger
