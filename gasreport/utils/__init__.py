"""Utility modules."""

from gasreport.utils.logging import ComponentLogger, get_logger, setup_logging

__all__ = ["setup_logging", "ComponentLogger", "get_logger"]
