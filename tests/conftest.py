"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from gasreport.models.base import Score
from gasreport.models.finding import AnalysisResult, Finding, Metrics


@pytest.fixture
def sample_finding() -> Finding:
    """A single high-severity finding."""
    return Finding(
        file="cmd/server/main.go",
        line=42,
        what="Use of unsafe calls should be audited",
        severity=Score.HIGH,
        confidence=Score.MEDIUM,
        code="unsafe.Pointer(&buf)",
    )


@pytest.fixture
def sample_findings() -> list[Finding]:
    """Findings over three files, deliberately not sorted by file."""
    return [
        Finding("a.go", 10, "Errors unhandled.", Score.LOW, Score.HIGH, "_ = f.Close()"),
        Finding("b.go", 3, "Hardcoded credentials", Score.HIGH, Score.LOW, 'password := "hunter2"'),
        Finding("a.go", 25, "SQL string formatting", Score.MEDIUM, Score.HIGH, 'fmt.Sprintf("SELECT %s", q)'),
        Finding("c.go", 7, "Subprocess launched with variable", Score.MEDIUM, Score.MEDIUM, "exec.Command(cmd)"),
        Finding("b.go", 1, "Blacklisted import crypto/md5", Score.MEDIUM, Score.HIGH, 'import "crypto/md5"'),
    ]


@pytest.fixture
def empty_result() -> AnalysisResult:
    """A result with no findings."""
    return AnalysisResult(stats=Metrics(num_files=3, num_lines=120, num_nodes=900, num_found=0))


@pytest.fixture
def analysis_result(sample_findings: list[Finding]) -> AnalysisResult:
    """A result with several findings."""
    return AnalysisResult(
        issues=sample_findings,
        stats=Metrics(num_files=3, num_lines=512, num_nodes=4096, num_found=len(sample_findings)),
        duration_seconds=1.25,
    )


@pytest.fixture
def hostile_finding() -> Finding:
    """A finding whose text needs escaping in every markup format."""
    return Finding(
        file='web/<admin>&"x".go',
        line=9,
        what="<script>alert('xss')</script>",
        severity=Score.HIGH,
        confidence=Score.HIGH,
        code='template.HTML(s) // "a,b"\nnext line',
    )


@pytest.fixture
def sink() -> io.StringIO:
    """An in-memory text sink."""
    return io.StringIO(newline="")


@pytest.fixture
def results_file(tmp_path: Path, analysis_result: AnalysisResult) -> Path:
    """A saved analysis result on disk."""
    path = tmp_path / "results.json"
    path.write_text(json.dumps(analysis_result.to_dict()), encoding="utf-8")
    return path


class BrokenSink(io.StringIO):
    """Sink that fails after a number of successful writes."""

    def __init__(self, fail_after: int = 0) -> None:
        super().__init__()
        self.fail_after = fail_after
        self.writes = 0

    def write(self, s: str) -> int:
        if self.writes >= self.fail_after:
            raise OSError("disk full")
        self.writes += 1
        return super().write(s)


@pytest.fixture
def broken_sink_factory():
    """Create sinks that fail after N writes."""
    return BrokenSink
