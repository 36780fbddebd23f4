"""
gasreport - Report rendering for the Go AST Scanner

Turns a finalized analysis result into JSON, CSV, plain text,
HTML or checkstyle XML.
"""

__version__ = "1.0.0"
__author__ = "GAS Team"

from gasreport.reporting.dispatcher import create_report

__all__ = ["__version__", "create_report"]
