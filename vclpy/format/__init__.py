"""Statement formatter: options, line model, renderers and entrypoints."""

from vclpy.format.comment import format_comments, format_trailing, normalize_comment
from vclpy.format.declaration import format_subroutine
from vclpy.format.expression import ExpressionFormatter, format_string
from vclpy.format.line import GroupedLines, Line, LineGroup, group_statements
from vclpy.format.options import CommentStyle, FormatOptions, IndentStyle
from vclpy.format.results import FormatRunResult
from vclpy.format.runner import format_source, format_statement, run_format
from vclpy.format.statement import StatementFormatter, effective_case_nest, trailing_owner
from vclpy.format.text import indent, indent_columns, trim_multiple_line_feeds, trim_trailing_whitespace

__all__ = [
    "CommentStyle",
    "ExpressionFormatter",
    "FormatOptions",
    "FormatRunResult",
    "GroupedLines",
    "IndentStyle",
    "Line",
    "LineGroup",
    "StatementFormatter",
    "effective_case_nest",
    "format_comments",
    "format_source",
    "format_statement",
    "format_string",
    "format_subroutine",
    "format_trailing",
    "group_statements",
    "indent",
    "indent_columns",
    "normalize_comment",
    "run_format",
    "trailing_owner",
    "trim_multiple_line_feeds",
    "trim_trailing_whitespace",
]
