"""Data models consumed by the report renderer."""

from gasreport.models.base import Score
from gasreport.models.finding import (
    AnalysisResult,
    Finding,
    Metrics,
)

__all__ = [
    # Base types
    "Score",
    # Analysis output
    "Finding",
    "Metrics",
    "AnalysisResult",
]
