"""Tests for template parsing and execution."""

from __future__ import annotations

import io

import pytest

from gasreport.models.finding import AnalysisResult
from gasreport.reporting import (
    ReportError,
    ReportWriteError,
    TemplateExecutionError,
    TemplateParseError,
    TextReporter,
    execute_template,
    parse_template,
)
from gasreport.reporting.templates import (
    CHECKSTYLE_TEMPLATE,
    HTML_TEMPLATE,
    TEXT_TEMPLATE,
    flush_sink,
    xml_attr,
)


class TestParseTemplate:
    """Test the parse step on its own."""

    @pytest.mark.parametrize(
        "name,source,autoescape",
        [
            ("text", TEXT_TEMPLATE, False),
            ("html", HTML_TEMPLATE, True),
            ("checkstyle", CHECKSTYLE_TEMPLATE, True),
        ],
    )
    def test_builtin_templates_parse(self, name: str, source: str, autoescape: bool):
        """Built-in templates should compile without any data."""
        template = parse_template(name, source, autoescape=autoescape)
        assert template.name == name

    def test_malformed_template(self):
        """Should raise TemplateParseError with the failing line."""
        with pytest.raises(TemplateParseError) as exc_info:
            parse_template("broken", "ok\n{% for issue in issues %}\nno end")

        err = exc_info.value
        assert isinstance(err, ReportError)
        assert err.template_name == "broken"
        assert err.lineno is not None
        assert "broken" in str(err)


class TestExecuteTemplate:
    """Test the execute step."""

    def test_renders_into_sink(self):
        sink = io.StringIO()
        template = parse_template("t", "{{ a }}-{{ b }}")

        execute_template(template, sink, a=1, b="x")

        assert sink.getvalue() == "1-x"

    def test_autoescape(self):
        sink = io.StringIO()
        execute_template(parse_template("t", "{{ v }}", autoescape=True), sink, v="<b>&")
        assert sink.getvalue() == "&lt;b&gt;&amp;"

    def test_undefined_name_fails(self):
        """Should raise TemplateExecutionError on a missing value."""
        template = parse_template("t", "{{ missing.attr }}")
        with pytest.raises(TemplateExecutionError) as exc_info:
            execute_template(template, io.StringIO())
        assert exc_info.value.template_name == "t"

    def test_partial_output_is_kept(self):
        """Output rendered before the failure stays in the sink."""
        sink = io.StringIO()
        template = parse_template("t", "head\n{% for x in items %}{{ 10 // x }}\n{% endfor %}")

        with pytest.raises(TemplateExecutionError):
            execute_template(template, sink, items=[5, 2, 0, 1])

        assert sink.getvalue().startswith("head\n2\n5\n")

    def test_write_failure(self, broken_sink_factory):
        """Should report sink failures as ReportWriteError."""
        template = parse_template("t", "{% for x in items %}{{ x }}\n{% endfor %}")
        with pytest.raises(ReportWriteError):
            execute_template(template, broken_sink_factory(fail_after=1), items=range(100))

    def test_closed_sink(self):
        """Should surface a closed sink as a write error."""
        sink = io.StringIO()
        sink.close()
        with pytest.raises(ReportWriteError):
            execute_template(parse_template("t", "data"), sink)

    def test_binary_sink(self):
        """Should report a sink that rejects str as a write error."""
        with pytest.raises(ReportWriteError) as exc_info:
            execute_template(parse_template("t", "data"), io.BytesIO())
        assert isinstance(exc_info.value.__cause__, TypeError)


class TestFlushSink:
    """Test sink flushing."""

    def test_sink_without_flush(self):
        class Collector:
            def __init__(self) -> None:
                self.parts: list[str] = []

            def write(self, s: str) -> int:
                self.parts.append(s)
                return len(s)

        flush_sink(Collector())

    def test_closed_sink(self):
        sink = io.StringIO()
        sink.close()
        with pytest.raises(ReportWriteError):
            flush_sink(sink)


class TestXmlAttr:
    """Test the XML attribute filter."""

    def test_escapes_markup(self):
        assert xml_attr('<a href="x">&') == "&lt;a href=&#34;x&#34;&gt;&amp;"

    def test_encodes_attribute_whitespace(self):
        assert xml_attr("a\tb\nc\rd") == "a&#9;b&#10;c&#13;d"

    def test_replaces_invalid_characters(self):
        assert xml_attr("a\x00b\x0bc\x1fd") == "a\ufffdb\ufffdc\ufffdd"

    def test_keeps_unicode(self):
        assert xml_attr("données.go") == "données.go"

    def test_not_escaped_twice(self):
        """Should return markup that autoescape leaves alone."""
        template = parse_template("t", "{{ v|xml_attr }}", autoescape=True)
        sink = io.StringIO()
        execute_template(template, sink, v="a&b\n")
        assert sink.getvalue() == "a&amp;b&#10;"


class TestTemplateReporterFailures:
    """Reporters surface template failures instead of crashing."""

    def test_malformed_builtin_template(self, analysis_result: AnalysisResult, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(TextReporter, "template_source", "{% if %}")
        with pytest.raises(TemplateParseError):
            TextReporter().generate(analysis_result)

    def test_execution_failure(self, analysis_result: AnalysisResult, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(TextReporter, "template_source", "{{ issues[0].no_such_field }}")
        with pytest.raises(TemplateExecutionError):
            TextReporter().generate(analysis_result)
