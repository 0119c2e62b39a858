from vclpy.ast import Comment
from vclpy.format import CommentStyle, FormatOptions, format_comments, format_trailing, normalize_comment
from tests._shared_cases import comments


def test_format_comments_is_empty_without_tokens() -> None:
    assert format_comments((), "\n", 3, FormatOptions()) == ""


def test_format_comments_indents_each_token() -> None:
    rendered = format_comments(comments("# one", "// two"), "\n", 2, FormatOptions())

    assert rendered == "    # one\n    // two\n"


def test_format_trailing_prefixes_single_space() -> None:
    assert format_trailing((), FormatOptions()) == ""
    assert format_trailing(comments("# a", "/* b */"), FormatOptions()) == " # a /* b */"


def test_normalize_comment_styles() -> None:
    sharp = FormatOptions(comment_style=CommentStyle.SHARP)
    slash = FormatOptions(comment_style=CommentStyle.SLASH)

    assert normalize_comment(Comment("// note"), sharp) == "# note"
    assert normalize_comment(Comment("# note"), slash) == "// note"
    assert normalize_comment(Comment("# note"), FormatOptions()) == "# note"
    assert normalize_comment(Comment("/* # keep */"), slash) == "/* # keep */"
