"""
Logging setup for gasreport.

Provides:
- Rich console output on stderr
- Optional JSON lines for machine parsing
- Optional rotating log file
- Component loggers that attach key=value context
"""

import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler

# Reports may go to stdout, so diagnostics stay on stderr
console = Console(stderr=True)

ROOT_LOGGER = "gasreport"
DEFAULT_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for machine parsing."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "context"):
            log_data["context"] = record.context

        return json.dumps(log_data, default=str)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = False,
    max_file_size_mb: int = 10,
    backup_count: int = 3,
) -> logging.Logger:
    """
    Configure the ``gasreport`` logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path for file logging
        json_format: Emit JSON lines instead of Rich output
        max_file_size_mb: Maximum log file size before rotation
        backup_count: Number of rotated files to keep

    Returns:
        The configured package logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    if json_format:
        console_handler: logging.Handler = logging.StreamHandler(console.file)
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))

    console_handler.setLevel(numeric_level)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(DEFAULT_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


class ComponentLogger:
    """
    Logger bound to one component of the renderer.

    Context keyword arguments are appended to the message and attached
    to the record for the JSON formatter.
    """

    def __init__(self, component: str) -> None:
        self.component = component
        self._logger = logging.getLogger(f"{ROOT_LOGGER}.{component}")

    def _log(self, level: int, msg: str, exc: Optional[BaseException] = None, **context: Any) -> None:
        if context:
            msg = msg + " | " + " | ".join(f"{k}={v}" for k, v in context.items())
        extra = {"context": {"component": self.component, **context}}
        self._logger.log(level, msg, exc_info=exc, extra=extra)

    def debug(self, msg: str, **context: Any) -> None:
        self._log(logging.DEBUG, msg, **context)

    def info(self, msg: str, **context: Any) -> None:
        self._log(logging.INFO, msg, **context)

    def warning(self, msg: str, **context: Any) -> None:
        self._log(logging.WARNING, msg, **context)

    def error(self, msg: str, exc: Optional[BaseException] = None, **context: Any) -> None:
        """Log error message with optional exception."""
        self._log(logging.ERROR, msg, exc, **context)

    def critical(self, msg: str, exc: Optional[BaseException] = None, **context: Any) -> None:
        """Log critical message with optional exception."""
        self._log(logging.CRITICAL, msg, exc, **context)


def get_logger(component: str) -> ComponentLogger:
    """Get a component logger under the package namespace."""
    return ComponentLogger(component)
