"""Formatter styles and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class IndentStyle(StrEnum):
    SPACE = "space"
    TAB = "tab"


class CommentStyle(StrEnum):
    """Line comment marker normalization; block comments are never rewritten."""

    NONE = "none"
    SHARP = "sharp"
    SLASH = "slash"


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Style switches consulted by the statement formatter."""

    indent_width: int = 2
    indent_style: IndentStyle = IndentStyle.SPACE
    line_width: int = 120
    align_trailing_comment: bool = False
    else_if: bool = False
    always_next_line_else_if: bool = False
    indent_case_labels: bool = False
    return_statement_parenthesis: bool = True
    should_use_unset: bool = False
    comment_style: CommentStyle = CommentStyle.NONE

    def __post_init__(self):
        if self.indent_width < 0:
            raise ValueError("indent_width cannot be negative")

    @property
    def wraps_lines(self) -> bool:
        return self.line_width > 0

    @staticmethod
    def for_preset(name: str) -> "FormatOptions":
        if name == "default":
            return FormatOptions()

        if name == "compact":
            return FormatOptions(
                indent_width=2,
                line_width=-1,
                align_trailing_comment=False,
                else_if=True,
                always_next_line_else_if=False,
                indent_case_labels=False,
                return_statement_parenthesis=False,
                should_use_unset=True,
            )

        if name == "expanded":
            return FormatOptions(
                indent_width=4,
                line_width=100,
                align_trailing_comment=True,
                else_if=True,
                always_next_line_else_if=True,
                indent_case_labels=True,
                return_statement_parenthesis=True,
                should_use_unset=True,
            )

        raise ValueError(f"Unknown format preset: {name}")
