"""
Single entry point for report rendering.

``create_report`` picks one reporter for a format token and renders the
result with it. Unknown tokens, including the empty string, render as
plain text.
"""

from __future__ import annotations

from typing import Optional, TextIO

from gasreport.core.config import ReportingConfig
from gasreport.models.finding import AnalysisResult
from gasreport.reporting.base import ReporterRegistry, ReportMetadata

# Registration happens at import time
from gasreport.reporting import checkstyle, csv_reporter, html, json_reporter, text  # noqa: F401
from gasreport.utils.logging import get_logger

logger = get_logger("dispatcher")


def create_report(
    sink: TextIO,
    format_name: str,
    result: AnalysisResult,
    config: Optional[ReportingConfig] = None,
    metadata: Optional[ReportMetadata] = None,
) -> None:
    """
    Write the report for ``result`` to ``sink`` in the requested format.

    Args:
        sink: Writable text stream. Open files with ``newline=""``.
        format_name: One of json, csv, html, text, checkstyle (case-sensitive).
        result: The finalized analysis result.
        config: Optional reporting configuration.
        metadata: Optional report metadata.

    Raises:
        ReportError: Template parse/execution failure or sink write failure.
        ReportAbortError: The result could not be JSON encoded.
    """
    if ReporterRegistry.get(format_name) is None:
        logger.debug(
            "Unknown report format, using default",
            requested=repr(format_name),
            default=ReporterRegistry.default_format,
        )

    reporter = ReporterRegistry.create(format_name, config=config, metadata=metadata)
    logger.debug("Rendering report", format=reporter.format_name, issues=len(result.issues))
    reporter.render(sink, result)
