"""Comment rendering for leading, trailing and infix comment tokens."""

from __future__ import annotations

from collections.abc import Sequence

from vclpy.ast import Comment
from vclpy.format.options import CommentStyle, FormatOptions
from vclpy.format.text import indent


def format_comments(
    comments: Sequence[Comment],
    separator: str,
    nest: int,
    options: FormatOptions,
) -> str:
    """Render each comment on its own indented line followed by `separator`."""
    prefix = indent(nest, options)
    return "".join(
        prefix + normalize_comment(comment, options) + separator for comment in comments
    )


def format_trailing(comments: Sequence[Comment], options: FormatOptions) -> str:
    """Render comments that follow a statement on the same line."""
    if not comments:
        return ""
    return " " + " ".join(normalize_comment(comment, options) for comment in comments)


def normalize_comment(comment: Comment, options: FormatOptions) -> str:
    value = comment.value.strip()
    if comment.is_block:
        return value

    match options.comment_style:
        case CommentStyle.SHARP:
            if value.startswith("//"):
                return "#" + value[2:]
        case CommentStyle.SLASH:
            if value.startswith("#"):
                return "//" + value[1:]
        case _:
            pass
    return value
