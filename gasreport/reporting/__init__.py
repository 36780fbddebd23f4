"""
Reporting module for rendering analysis results.

Provides reporters for:
- JSON (programmatic consumption)
- CSV (spreadsheets, one row per finding)
- Text (terminal and logs)
- HTML (web viewing, escaped)
- Checkstyle XML (CI ingestion)
"""

from gasreport.reporting.base import (
    BaseReporter,
    ReporterRegistry,
    ReportMetadata,
    TemplateReporter,
)
from gasreport.reporting.checkstyle import CheckstyleReporter, group_by_file
from gasreport.reporting.csv_reporter import CSVReporter
from gasreport.reporting.dispatcher import create_report
from gasreport.reporting.errors import (
    ReportAbortError,
    ReportError,
    ReportWriteError,
    TemplateExecutionError,
    TemplateParseError,
)
from gasreport.reporting.html import HTMLReporter
from gasreport.reporting.json_reporter import JSONReporter
from gasreport.reporting.templates import execute_template, parse_template
from gasreport.reporting.text import TextReporter

__all__ = [
    # Entry point
    "create_report",
    # Base
    "BaseReporter",
    "TemplateReporter",
    "ReporterRegistry",
    "ReportMetadata",
    # Reporters
    "CheckstyleReporter",
    "CSVReporter",
    "HTMLReporter",
    "JSONReporter",
    "TextReporter",
    # Templates
    "parse_template",
    "execute_template",
    "group_by_file",
    # Errors
    "ReportError",
    "ReportAbortError",
    "ReportWriteError",
    "TemplateExecutionError",
    "TemplateParseError",
]
