"""
Exceptions raised by the reporters.

Operational failures (template parse/execution, sink writes) derive from
ReportError and are meant to be handled by the caller. ReportAbortError
signals a broken data contract and is intentionally outside that
hierarchy.
"""

from __future__ import annotations

from typing import Optional


class ReportError(Exception):
    """Base class for recoverable report failures."""

    def __init__(self, message: str, format_name: str = "") -> None:
        super().__init__(message)
        self.format_name = format_name


class TemplateParseError(ReportError):
    """A built-in template could not be parsed."""

    def __init__(self, message: str, template_name: str, lineno: Optional[int] = None) -> None:
        super().__init__(message)
        self.template_name = template_name
        self.lineno = lineno


class TemplateExecutionError(ReportError):
    """A parsed template failed while rendering."""

    def __init__(self, message: str, template_name: str) -> None:
        super().__init__(message)
        self.template_name = template_name


class ReportWriteError(ReportError):
    """The output sink rejected a write or flush."""


class ReportAbortError(RuntimeError):
    """
    The result could not be encoded in a format that must always succeed.

    Raised by the JSON reporter. Callers are not expected to catch it; it
    means the upstream data model handed over a value it promised never
    to produce.
    """
