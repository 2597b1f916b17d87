"""Utility helpers for the scanner."""

from .fileio import SourceOpenError, iter_source_lines, read_source_text, write_report_file
from .logger import get_logger, set_verbosity

__all__ = [
    "SourceOpenError",
    "iter_source_lines",
    "read_source_text",
    "write_report_file",
    "get_logger",
    "set_verbosity",
]
