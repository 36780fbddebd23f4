"""
CSV Reporter for gasreport.

One row per finding, no header:
file, line, description, severity, confidence, code
"""

from __future__ import annotations

import csv
from typing import TextIO

from gasreport.models.finding import AnalysisResult, Finding
from gasreport.reporting.base import BaseReporter, ReporterRegistry
from gasreport.reporting.errors import ReportWriteError
from gasreport.reporting.templates import flush_sink
from gasreport.utils.logging import get_logger

logger = get_logger("csv_reporter")


@ReporterRegistry.register("csv")
class CSVReporter(BaseReporter):
    """CSV format reporter."""

    @property
    def format_name(self) -> str:
        return "csv"

    @property
    def file_extension(self) -> str:
        return ".csv"

    def render(self, sink: TextIO, result: AnalysisResult) -> None:
        """Write one row per finding, in discovery order."""
        writer = csv.writer(sink, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
        for index, issue in enumerate(result.issues):
            try:
                writer.writerow(_row(issue))
            except (OSError, ValueError, TypeError) as e:
                logger.error("CSV write failed", exc=e, row=index)
                raise ReportWriteError(f"cannot write CSV row {index}: {e}", format_name="csv") from e

        flush_sink(sink)
        logger.debug("Rendered CSV report", rows=len(result.issues))


def _row(issue: Finding) -> list[str]:
    return [
        issue.file,
        str(issue.line),
        issue.what,
        str(issue.severity),
        str(issue.confidence),
        issue.code,
    ]
