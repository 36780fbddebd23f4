"""Core module containing configuration."""

from gasreport.core.config import ReportingConfig, ReportSettings

__all__ = ["ReportSettings", "ReportingConfig"]
