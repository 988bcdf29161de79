"""Reporting of lint results."""

from report.formatters import format_calls, format_json, format_text

__all__ = ["format_calls", "format_json", "format_text"]
