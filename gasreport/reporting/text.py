"""
Plain-text Reporter for gasreport.

Renders the built-in text template without any escaping; descriptions
and code snippets appear exactly as the scanner reported them.
"""

from __future__ import annotations

from gasreport.reporting.base import ReporterRegistry, TemplateReporter
from gasreport.reporting.templates import TEXT_TEMPLATE


@ReporterRegistry.register("text")
class TextReporter(TemplateReporter):
    """Plain-text format reporter, also the fallback for unknown formats."""

    template_name = "text"
    template_source = TEXT_TEMPLATE
    autoescape = False

    @property
    def format_name(self) -> str:
        return "text"

    @property
    def file_extension(self) -> str:
        return ".txt"
