"""Tests for logging setup."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from gasreport.utils.logging import JSONFormatter, get_logger, setup_logging


def test_setup_logging_sets_level():
    logger = setup_logging(level="debug")
    assert logger.name == "gasreport"
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert len(logger.handlers) == 1


def test_setup_logging_file(tmp_path: Path):
    log_file = tmp_path / "logs" / "gasreport.log"
    setup_logging(level="INFO", log_file=log_file, json_format=True)

    get_logger("csv_reporter").info("Rendered CSV report", rows=3)
    for handler in logging.getLogger("gasreport").handlers:
        handler.flush()

    record = json.loads(log_file.read_text().splitlines()[-1])
    assert record["logger"] == "gasreport.csv_reporter"
    assert record["message"] == "Rendered CSV report | rows=3"
    assert record["context"] == {"component": "csv_reporter", "rows": 3}


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord("gasreport.x", logging.ERROR, __file__, 1, "failed", None, None)
        record.exc_info = sys.exc_info()

    data = json.loads(JSONFormatter().format(record))
    assert data["level"] == "ERROR"
    assert "ValueError: boom" in data["exception"]
