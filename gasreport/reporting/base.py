"""
Base Reporter for gasreport.

Provides the abstract base class for all report formats and the
registry that maps format tokens to reporter classes.
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, TextIO

from gasreport import __version__
from gasreport.core.config import DEFAULT_FORMAT, ReportingConfig
from gasreport.models.finding import AnalysisResult
from gasreport.reporting.templates import execute_template, parse_template


@dataclass
class ReportMetadata:
    """Metadata available to every report."""

    tool_name: str = "gas"
    tool_version: str = __version__
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class BaseReporter(ABC):
    """
    Abstract base class for report generators.

    Subclasses implement ``render``, which writes one complete report to
    a text sink. Reporters hold no per-call state, so one instance may
    render any number of results.
    """

    def __init__(
        self,
        config: Optional[ReportingConfig] = None,
        metadata: Optional[ReportMetadata] = None,
    ) -> None:
        """
        Initialize the reporter.

        Args:
            config: Reporting configuration.
            metadata: Report metadata.
        """
        self.config = config or ReportingConfig()
        self.metadata = metadata or ReportMetadata(tool_name=self.config.tool_name)

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Get the format token (e.g., 'json', 'csv', 'checkstyle')."""
        ...

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Get the default file extension (e.g., '.json', '.xml')."""
        ...

    @abstractmethod
    def render(self, sink: TextIO, result: AnalysisResult) -> None:
        """
        Write the report for ``result`` to ``sink``.

        Args:
            sink: Writable text stream.
            result: The finalized analysis result.

        Raises:
            ReportError: On template or write failures.
        """
        ...

    def generate(self, result: AnalysisResult) -> str:
        """Render the report into memory and return it as a string."""
        buffer = io.StringIO(newline="")
        self.render(buffer, result)
        return buffer.getvalue()

    def write(self, result: AnalysisResult, output_path: Optional[Path] = None) -> Path:
        """
        Render the report into a file.

        Args:
            result: The analysis result to report.
            output_path: Output file path. If None, uses config or generates default.

        Returns:
            The path to the written file.
        """
        path = output_path or self.config.output_path
        if path is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            path = Path(f"gas_report_{timestamp}{self.file_extension}")

        with open(path, "w", encoding="utf-8", newline="") as sink:
            self.render(sink, result)

        return path


class ReporterRegistry:
    """Registry for available reporters."""

    _reporters: dict[str, type[BaseReporter]] = {}
    default_format: str = DEFAULT_FORMAT

    @classmethod
    def register(cls, name: str) -> Any:
        """Decorator to register a reporter."""
        def decorator(reporter_class: type[BaseReporter]) -> type[BaseReporter]:
            cls._reporters[name] = reporter_class
            return reporter_class
        return decorator

    @classmethod
    def get(cls, name: str) -> Optional[type[BaseReporter]]:
        """Get a reporter by exact name."""
        return cls._reporters.get(name)

    @classmethod
    def resolve(cls, name: str) -> type[BaseReporter]:
        """Get a reporter by name, falling back to the default format."""
        reporter_class = cls._reporters.get(name)
        if reporter_class is None:
            reporter_class = cls._reporters[cls.default_format]
        return reporter_class

    @classmethod
    def list_formats(cls) -> list[str]:
        """List available format names."""
        return list(cls._reporters.keys())

    @classmethod
    def create(
        cls,
        name: str,
        config: Optional[ReportingConfig] = None,
        metadata: Optional[ReportMetadata] = None,
    ) -> BaseReporter:
        """Create a reporter instance by name, with the default fallback."""
        return cls.resolve(name)(config=config, metadata=metadata)


class TemplateReporter(BaseReporter):
    """
    Reporter backed by a built-in template.

    The template is parsed on every render, so a malformed built-in
    template surfaces as TemplateParseError from ``render``.
    """

    template_name: str = ""
    template_source: str = ""
    autoescape: bool = False

    def template_context(self, result: AnalysisResult) -> dict[str, Any]:
        """Names visible to the template."""
        return {
            "issues": result.issues,
            "stats": result.stats,
            "duration_seconds": result.duration_seconds,
            "metadata": self.metadata,
        }

    def render(self, sink: TextIO, result: AnalysisResult) -> None:
        template = parse_template(self.template_name, self.template_source, autoescape=self.autoescape)
        execute_template(template, sink, **self.template_context(result))
