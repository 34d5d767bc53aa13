"""Logging configuration with trace id support and optional file rotation.

- Console output always (level from ``LOG_LEVEL``)
- With ``LOG_TO_FILE=true``: daily rotated ``app-info`` (INFO+) and
  ``app-error`` (ERROR+) files under ``LOG_DIR``
- Every record carries the current request's trace id
"""
from __future__ import annotations

import logging
import logging.handlers
import re
from pathlib import Path

from kicks_match.core.config import get_settings
from kicks_match.core.trace_context import get_trace_id

LOG_FORMAT = (
    "%(asctime)s %(levelname)s [trace_id=%(trace_id)s] "
    "%(name)s:%(lineno)d - %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ROTATED_NAME = re.compile(r"(.+)\.log\.(\d{4}-\d{2}-\d{2})$")


class TraceIdFilter(logging.Filter):
    """Inject ``trace_id`` into every LogRecord."""

    def filter(self, record: logging.LogRecord) -> bool:
        trace_id = get_trace_id()
        record.trace_id = trace_id if trace_id else "N/A"
        return True


class ErrorOnlyFilter(logging.Filter):
    """Let only ERROR and above through."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def rotated_log_name(name: str) -> str:
    """
    Rename a rotated file from ``app-info.log.2024-12-23`` to ``app-info-2024-12-23.log``.

    Names that do not look like a rotated file are returned unchanged.
    """
    match = _ROTATED_NAME.match(name)
    if match:
        base, date = match.groups()
        return f"{base}-{date}.log"
    return name


def _file_handler(path: Path, level: int, backup_count: int) -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(path),
        when="midnight",
        interval=1,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.namer = rotated_log_name
    return handler


def init_logging() -> None:
    """
    Configure the root logger.

    Safe to call more than once: existing root handlers are replaced.
    """
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    handlers.append(console_handler)

    if settings.log_to_file:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        handlers.append(
            _file_handler(log_dir / "app-info.log", logging.INFO, settings.log_backup_count)
        )
        error_handler = _file_handler(
            log_dir / "app-error.log", logging.ERROR, settings.log_backup_count
        )
        error_handler.addFilter(ErrorOnlyFilter())
        handlers.append(error_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(TraceIdFilter())
        root_logger.addHandler(handler)

    logging.getLogger(__name__).info(
        f"Logging initialized: level={settings.log_level}, "
        f"to_file={settings.log_to_file}, log_dir={settings.log_dir}"
    )
