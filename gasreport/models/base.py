"""
Core enums used throughout gasreport.

Severity and confidence share the same three-level ordered scale.
"""

from __future__ import annotations

from enum import Enum


class Score(Enum):
    """Ordered level used for both severity and confidence."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @classmethod
    def from_string(cls, value: str) -> "Score":
        """Create Score from string, case-insensitive."""
        return cls(value.upper())

    @property
    def rank(self) -> int:
        return _SCORE_ORDER[self]

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: "Score") -> bool:
        """Allow comparison for sorting by level."""
        if not isinstance(other, Score):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return other < self

    def __ge__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return self == other or other < self


_SCORE_ORDER = {
    Score.LOW: 0,
    Score.MEDIUM: 1,
    Score.HIGH: 2,
}


def score_to_checkstyle(score: Score) -> str:
    """Map a severity to a checkstyle severity attribute."""
    mapping = {
        Score.HIGH: "error",
        Score.MEDIUM: "warning",
        Score.LOW: "info",
    }
    return mapping.get(score, "info")
