"""Low-level string helpers shared by the formatter."""

from __future__ import annotations

import re

from vclpy.format.options import FormatOptions, IndentStyle

_MULTIPLE_LINE_FEEDS = re.compile(r"\n{3,}")
_TRAILING_WHITESPACE = re.compile(r"[ \t]+$", re.MULTILINE)


def indent(nest: int, options: FormatOptions) -> str:
    """Whitespace prefix for `nest` levels; negative levels clamp to zero."""
    if nest <= 0:
        return ""
    if options.indent_style == IndentStyle.TAB:
        return "\t" * nest
    return " " * (options.indent_width * nest)


def indent_columns(nest: int, options: FormatOptions) -> int:
    """Display width of `indent(nest)`; a tab counts as `indent_width` columns."""
    return max(nest, 0) * options.indent_width


def trim_multiple_line_feeds(text: str) -> str:
    """Collapse any run of blank lines into a single blank line."""
    return _MULTIPLE_LINE_FEEDS.sub("\n\n", text)


def trim_trailing_whitespace(text: str) -> str:
    return _TRAILING_WHITESPACE.sub("", text)


def last_line_width(text: str) -> int:
    """Width of the final physical line of `text`."""
    return len(text) - (text.rfind("\n") + 1)
