"""Logging setup for objects-tasks.

Handlers are attached to the ``objects_tasks`` package logger only, so an
application embedding the package keeps control of its root logger.
"""

import logging
import logging.handlers
import json
import sys
from pathlib import Path
from datetime import datetime, UTC
from typing import Any, Dict, Optional

from ..config import LoggingConfig

PACKAGE_LOGGER = "objects_tasks"
SELECTORS_LOGGER = f"{PACKAGE_LOGGER}.selectors"

# LogRecord attributes that are not user-supplied ``extra`` fields.
# ``message`` and ``asctime`` are set on the record by Formatter.format().
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with ``extra`` fields merged in."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(UTC),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_entry[key] = value

        return json.dumps(log_entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable text formatter."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def _parse_level(name: Optional[str], default: int = logging.INFO) -> int:
    if not name:
        return default
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """
    Configure the package logger from ``config``.

    Replaces any handlers a previous call installed, writes to stderr and
    optionally to a rotating file. ``selectors_level`` tunes the selector
    builder logger on its own, which is where rejected parts are reported.

    Returns:
        The configured ``objects_tasks`` logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    log_level = _parse_level(config.level)
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    formatter: logging.Formatter
    if config.format.lower() == "json":
        formatter = JSONFormatter()
    else:
        formatter = TextFormatter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if config.file:
        log_file = Path(config.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    logging.getLogger(SELECTORS_LOGGER).setLevel(
        _parse_level(config.selectors_level, default=logging.NOTSET)
    )

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


class LoggerMixin:
    """Mixin class to add logging capabilities to other classes."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        return get_logger(self.__class__.__name__)


def log_rejected_part(selector: str, part: str, reason: str) -> None:
    """Log a selector part that could not be appended."""
    logging.getLogger(SELECTORS_LOGGER).debug(
        "Rejected selector part",
        extra={"selector": selector, "part": part, "reason": reason, "event": "part_rejected"},
    )


def log_combined(selector: str, combinator: str) -> None:
    """Log the result of combining two selectors."""
    logging.getLogger(SELECTORS_LOGGER).debug(
        "Combined selectors",
        extra={"selector": selector, "combinator": combinator, "event": "combined"},
    )
