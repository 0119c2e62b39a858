"""VCL statement pretty-printer over annotated syntax trees."""

from vclpy.format import FormatOptions, FormatRunResult, format_source, format_statement, run_format

__all__ = ["FormatOptions", "FormatRunResult", "format_source", "format_statement", "run_format"]
