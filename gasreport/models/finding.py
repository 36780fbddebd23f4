"""
Finding and result models produced by the analysis engine.

These models represent:
- Finding: One detected issue at a file/line
- Metrics: Scan-level counters
- AnalysisResult: Complete, finalized scan output

The renderer treats all of them as read-only input.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from gasreport.models.base import Score


@dataclass
class Finding:
    """
    One detected issue.

    Field names in the serialized form follow the scanner's JSON
    contract (``details`` carries the description).
    """

    file: str
    line: int
    what: str
    severity: Score = Score.MEDIUM
    confidence: Score = Score.MEDIUM
    code: str = ""

    def __post_init__(self) -> None:
        """Ensure proper types."""
        if isinstance(self.severity, str):
            self.severity = Score.from_string(self.severity)
        if isinstance(self.confidence, str):
            self.confidence = Score.from_string(self.confidence)
        if self.line < 1:
            raise ValueError(f"line must be a positive 1-based number, got {self.line}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "severity": str(self.severity),
            "confidence": str(self.confidence),
            "details": self.what,
            "file": self.file,
            "code": self.code,
            "line": self.line,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Finding":
        """Deserialize from dictionary."""
        return cls(
            file=data["file"],
            line=int(data["line"]),
            what=data.get("details", ""),
            severity=Score.from_string(data.get("severity", "MEDIUM")),
            confidence=Score.from_string(data.get("confidence", "MEDIUM")),
            code=data.get("code", ""),
        )


@dataclass
class Metrics:
    """Scan-level counters."""

    num_files: int = 0
    num_lines: int = 0
    num_nodes: int = 0
    num_found: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "files": self.num_files,
            "lines": self.num_lines,
            "nodes": self.num_nodes,
            "found": self.num_found,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Metrics":
        return cls(
            num_files=data.get("files", 0),
            num_lines=data.get("lines", 0),
            num_nodes=data.get("nodes", 0),
            num_found=data.get("found", 0),
        )


@dataclass
class AnalysisResult:
    """
    Complete analysis result.

    Issues are kept in discovery order; nothing in the reporting
    layer re-sorts them.
    """

    issues: list[Finding] = field(default_factory=list)
    stats: Metrics = field(default_factory=Metrics)
    duration_seconds: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary with a stable key order."""
        data: dict[str, Any] = {
            "issues": [f.to_dict() for f in self.issues],
            "metrics": self.stats.to_dict(),
        }
        if self.duration_seconds is not None:
            data["duration_seconds"] = self.duration_seconds
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalysisResult":
        """Deserialize from dictionary."""
        return cls(
            issues=[Finding.from_dict(i) for i in data.get("issues") or []],
            stats=Metrics.from_dict(data.get("metrics") or {}),
            duration_seconds=data.get("duration_seconds"),
        )

    @classmethod
    def from_json(cls, path: Path) -> "AnalysisResult":
        """Load a saved result from a JSON file."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_dict(data)
