"""
HTML Reporter for gasreport.

Generates a standalone HTML page. Every interpolated value is escaped,
so file paths, descriptions and code snippets cannot inject markup.
"""

from __future__ import annotations

from gasreport.reporting.base import ReporterRegistry, TemplateReporter
from gasreport.reporting.templates import HTML_TEMPLATE


@ReporterRegistry.register("html")
class HTMLReporter(TemplateReporter):
    """
    HTML format reporter.

    Produces a standalone page with embedded CSS.
    """

    template_name = "html"
    template_source = HTML_TEMPLATE
    autoescape = True

    @property
    def format_name(self) -> str:
        return "html"

    @property
    def file_extension(self) -> str:
        return ".html"
