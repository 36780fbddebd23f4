"""
Checkstyle Reporter for gasreport.

Produces checkstyle XML, the dialect most CI servers can ingest
(Jenkins warnings-ng, reviewdog, SonarQube importers). Findings are
grouped into one <file> element per path before rendering.
"""

from __future__ import annotations

from typing import Any, Iterable

from gasreport.models.finding import AnalysisResult, Finding
from gasreport.reporting.base import ReporterRegistry, TemplateReporter
from gasreport.reporting.templates import CHECKSTYLE_TEMPLATE

GroupedFindings = dict[str, list[Finding]]


def group_by_file(issues: Iterable[Finding]) -> GroupedFindings:
    """
    Group findings by file path.

    File keys appear in the order each path is first seen. Each finding
    lands in the group of its own file exactly once and keeps its
    relative order within that group.
    """
    groups: GroupedFindings = {}
    current = ""
    current_group: list[Finding] = []
    for issue in issues:
        if issue.file != current or not groups:
            current = issue.file
            current_group = groups.setdefault(current, [])
        current_group.append(issue)
    return groups


@ReporterRegistry.register("checkstyle")
class CheckstyleReporter(TemplateReporter):
    """Checkstyle XML format reporter."""

    template_name = "checkstyle"
    template_source = CHECKSTYLE_TEMPLATE
    autoescape = True

    @property
    def format_name(self) -> str:
        return "checkstyle"

    @property
    def file_extension(self) -> str:
        return ".xml"

    def template_context(self, result: AnalysisResult) -> dict[str, Any]:
        return {
            "files": group_by_file(result.issues),
            "version": self.config.checkstyle_version,
            "tool_name": self.metadata.tool_name,
        }
