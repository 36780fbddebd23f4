"""
Template support for the text, HTML and checkstyle reporters.

Rendering is split into two steps so each can fail on its own:
``parse_template`` compiles a source string, ``execute_template`` streams
the rendered output into a sink chunk by chunk. A failure during
execution can therefore leave a prefix of the report in the sink.
"""

from __future__ import annotations

import re
from typing import Any, TextIO

from jinja2 import DictLoader, Environment, StrictUndefined, Template, TemplateSyntaxError
from markupsafe import Markup, escape

from gasreport.models.base import score_to_checkstyle
from gasreport.reporting.errors import (
    ReportError,
    ReportWriteError,
    TemplateExecutionError,
    TemplateParseError,
)
from gasreport.utils.logging import get_logger

logger = get_logger("templates")


TEXT_TEMPLATE = """\
Results:
{% for issue in issues %}
[{{ issue.file }}:{{ issue.line }}] - {{ issue.what }} (Confidence: {{ issue.confidence }}, Severity: {{ issue.severity }})
  > {{ issue.code }}

{% endfor %}
Summary:
   Files: {{ stats.num_files }}
   Lines: {{ stats.num_lines }}
   Nodes: {{ stats.num_nodes }}
   Issues: {{ stats.num_found }}
{% if duration_seconds is not none %}
   Time: {{ "%.2f"|format(duration_seconds) }}s
{% endif %}
"""


HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8"/>
<title>{{ metadata.tool_name }} report</title>
<style>
body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; margin: 20px; color: #222; }
table { border-collapse: collapse; width: 100%; }
th, td { border: 1px solid #ddd; padding: 6px 10px; text-align: left; vertical-align: top; }
th { background: #f0f0f0; }
pre { margin: 0; white-space: pre-wrap; font-family: monospace; }
.severity-high { color: #d32f2f; font-weight: bold; }
.severity-medium { color: #f57c00; font-weight: bold; }
.severity-low { color: #1976d2; }
.summary li { list-style: none; }
</style>
</head>
<body>
<h1>{{ metadata.tool_name }} security report</h1>
<ul class="summary">
<li>Files: {{ stats.num_files }}</li>
<li>Lines: {{ stats.num_lines }}</li>
<li>Nodes: {{ stats.num_nodes }}</li>
<li>Issues: {{ stats.num_found }}</li>
{% if duration_seconds is not none %}
<li>Time: {{ "%.2f"|format(duration_seconds) }}s</li>
{% endif %}
</ul>
{% if issues %}
<table>
<thead>
<tr><th>File</th><th>Line</th><th>Issue</th><th>Severity</th><th>Confidence</th><th>Code</th></tr>
</thead>
<tbody>
{% for issue in issues %}
<tr class="issue">
<td>{{ issue.file }}</td>
<td>{{ issue.line }}</td>
<td>{{ issue.what }}</td>
<td class="severity-{{ issue.severity.value|lower }}">{{ issue.severity }}</td>
<td>{{ issue.confidence }}</td>
<td><pre>{{ issue.code }}</pre></td>
</tr>
{% endfor %}
</tbody>
</table>
{% else %}
<p class="empty">No issues found.</p>
{% endif %}
<p class="footer">Generated by {{ metadata.tool_name }} report v{{ metadata.tool_version }} on {{ metadata.generated_at.strftime("%Y-%m-%d %H:%M:%S %Z") }}</p>
</body>
</html>
"""


CHECKSTYLE_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<checkstyle version="{{ version|xml_attr }}">
{% for file, issues in files.items() %}
  <file name="{{ file|xml_attr }}">
{% for issue in issues %}
    <error line="{{ issue.line }}" severity="{{ issue.severity|checkstyle_severity }}" message="{{ issue.what|xml_attr }}" source="{{ tool_name|xml_attr }}.confidence.{{ issue.confidence }}"/>
{% endfor %}
  </file>
{% endfor %}
</checkstyle>
"""


# Code points XML 1.0 forbids outright; they are replaced, not escaped.
_XML_INVALID = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")

# Attribute-value normalization turns these into spaces unless they are
# written as character references.
_XML_ATTR_WHITESPACE = (("\t", "&#9;"), ("\n", "&#10;"), ("\r", "&#13;"))


def xml_attr(value: Any) -> Markup:
    """Escape a value for use inside a double-quoted XML attribute."""
    text = _XML_INVALID.sub("\ufffd", str(value))
    escaped = str(escape(text))
    for char, ref in _XML_ATTR_WHITESPACE:
        escaped = escaped.replace(char, ref)
    return Markup(escaped)


def _environment(name: str, source: str, autoescape: bool) -> Environment:
    env = Environment(
        loader=DictLoader({name: source}),
        autoescape=autoescape,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["checkstyle_severity"] = score_to_checkstyle
    env.filters["xml_attr"] = xml_attr
    return env


def parse_template(name: str, source: str, autoescape: bool = False) -> Template:
    """
    Compile a template source.

    Args:
        name: Template name, used in error messages.
        source: Template source text.
        autoescape: Escape every interpolated value for HTML/XML.

    Returns:
        The compiled template.

    Raises:
        TemplateParseError: If the source is not a valid template.
    """
    env = _environment(name, source, autoescape)
    try:
        return env.get_template(name)
    except TemplateSyntaxError as e:
        logger.error("Template parse failed", template=name, line=e.lineno)
        raise TemplateParseError(
            f"cannot parse template {name!r} (line {e.lineno}): {e.message}",
            template_name=name,
            lineno=e.lineno,
        ) from e


def execute_template(template: Template, sink: TextIO, **context: Any) -> None:
    """
    Render ``template`` with ``context`` straight into ``sink``.

    Raises:
        TemplateExecutionError: If rendering fails.
        ReportWriteError: If the sink rejects a write.
    """
    name = template.name or "<template>"
    try:
        for chunk in template.generate(**context):
            write_chunk(sink, chunk)
    except ReportError:
        raise
    except Exception as e:
        logger.error("Template execution failed", template=name, error=str(e))
        raise TemplateExecutionError(
            f"cannot execute template {name!r}: {e}",
            template_name=name,
        ) from e
    flush_sink(sink)


def write_chunk(sink: TextIO, chunk: str) -> None:
    """Write one piece of output, reporting sink failures as ReportWriteError."""
    try:
        sink.write(chunk)
    except (OSError, ValueError, TypeError) as e:
        raise ReportWriteError(f"cannot write report: {e}") from e


def flush_sink(sink: TextIO) -> None:
    """Flush the sink if it supports flushing."""
    flush = getattr(sink, "flush", None)
    if flush is None:
        return
    try:
        flush()
    except (OSError, ValueError, TypeError) as e:
        raise ReportWriteError(f"cannot flush report: {e}") from e
