"""Structured logging configuration with JSON output and rotation."""

from __future__ import annotations

import atexit
import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from .config import BaseConfig

ROOT_LOGGER_NAME = "civicfolio"

_SESSION_BUFFER: List[str] = []
_SESSION_START = datetime.now()
_SESSION_LOG_PATH: Path | None = None
_FLUSH_REGISTERED = False


class SessionBufferHandler(logging.Handler):
    """In-memory handler collecting every formatted line of the current session.

    The buffer is written to a timestamped file when the interpreter exits.
    """

    def __init__(self, formatter: logging.Formatter):
        super().__init__()
        self._formatter = formatter

    def emit(self, record: logging.LogRecord) -> None:  # noqa: D401
        try:
            _SESSION_BUFFER.append(self._formatter.format(record))
        except Exception:  # pragma: no cover
            self.handleError(record)


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    # LogRecord attributes that are not user supplied ``extra`` fields
    _STANDARD_ATTRS = {
        "name", "msg", "args", "created", "filename", "funcName", "levelname",
        "levelno", "lineno", "module", "msecs", "message", "pathname", "process",
        "processName", "relativeCreated", "thread", "threadName", "exc_info",
        "exc_text", "stack_info", "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a JSON string."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            log_data["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "traceback": self.formatException(record.exc_info),
            }

        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self._STANDARD_ATTRS
        }
        if extra_fields:
            log_data["extra"] = extra_fields

        return json.dumps(log_data, default=str)


def _flush_session() -> None:  # pragma: no cover - runs at interpreter exit
    if not _SESSION_BUFFER or _SESSION_LOG_PATH is None:
        return
    try:
        _SESSION_LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        with _SESSION_LOG_PATH.open("w", encoding="utf-8") as handle:
            handle.write("# CivicFolio session log\n")
            handle.write(f"# Started: {_SESSION_START.isoformat()}\n")
            handle.write(f"# Entries: {len(_SESSION_BUFFER)}\n\n")
            for line in _SESSION_BUFFER:
                handle.write(line + "\n")
    except OSError as exc:
        import sys

        sys.stderr.write(f"Failed to flush session log: {exc}\n")


def setup_logging(config: BaseConfig) -> logging.Logger:
    """Configure the ``civicfolio`` logger tree.

    Args:
        config: Application configuration providing DATA_DIR, DEV_MODE and LOG_LEVEL

    Returns:
        The configured package logger
    """
    global _SESSION_LOG_PATH, _FLUSH_REGISTERED  # noqa: PLW0603

    logs_dir = Path(config.DATA_DIR) / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.LOG_LEVEL if config.DEV_MODE else logging.WARNING)
    if config.DEV_MODE:
        console_format = "[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s"
    else:
        console_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    console_formatter = logging.Formatter(
        fmt=console_format,
        datefmt="%H:%M:%S" if config.DEV_MODE else "%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    log_file = logs_dir / config.LOG_FILENAME
    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(config.LOG_LEVEL)
    file_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(file_handler)

    session_handler = SessionBufferHandler(console_formatter)
    session_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(session_handler)

    _SESSION_LOG_PATH = logs_dir / _SESSION_START.strftime("session_%Y%m%d_%H%M%S.log")
    if not _FLUSH_REGISTERED:
        atexit.register(_flush_session)
        _FLUSH_REGISTERED = True

    root_logger.info(
        "Logging initialized",
        extra={
            "dev_mode": config.DEV_MODE,
            "log_file": str(log_file),
            "data_dir": config.DATA_DIR,
        },
    )
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``civicfolio`` namespace.

    Module names that already live in the package (``civicfolio.services.graph``)
    are used as-is; anything else is nested below the package logger.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def session_log_path() -> Path | None:
    """Return the path where the in-memory session log will be flushed on exit."""
    return _SESSION_LOG_PATH
