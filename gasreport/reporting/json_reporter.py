"""
JSON Reporter for gasreport.

Generates structured JSON output for programmatic consumption.
"""

from __future__ import annotations

import json
from typing import TextIO

from gasreport.models.finding import AnalysisResult
from gasreport.reporting.base import BaseReporter, ReporterRegistry
from gasreport.reporting.errors import ReportAbortError
from gasreport.utils.logging import get_logger

logger = get_logger("json_reporter")


@ReporterRegistry.register("json")
class JSONReporter(BaseReporter):
    """
    JSON format reporter.

    Mirrors the fields of the analysis result, tab indented. Unlike the
    other reporters, any failure here raises ReportAbortError: the result
    model is expected to always be encodable, so a failure means the
    upstream data contract is broken.

    NOTE: aborting is harsh for embedders that render many reports in one
    process; revisit if that becomes a use case.
    """

    @property
    def format_name(self) -> str:
        return "json"

    @property
    def file_extension(self) -> str:
        return ".json"

    def render(self, sink: TextIO, result: AnalysisResult) -> None:
        """Encode the whole result and write it in one piece."""
        try:
            raw = json.dumps(result.to_dict(), indent="\t", allow_nan=False)
        except (TypeError, ValueError) as e:
            logger.critical("Analysis result is not JSON encodable", exc=e)
            raise ReportAbortError(f"cannot encode analysis result as JSON: {e}") from e

        try:
            sink.write(raw)
            flush = getattr(sink, "flush", None)
            if flush is not None:
                flush()
        except (OSError, ValueError, TypeError) as e:
            logger.critical("Failed to write JSON report", exc=e)
            raise ReportAbortError(f"cannot write JSON report: {e}") from e

        logger.debug("Rendered JSON report", issues=len(result.issues))
