import pytest

from vclpy.ast import Meta
from vclpy.format import (
    FormatOptions,
    IndentStyle,
    indent,
    indent_columns,
    trim_multiple_line_feeds,
    trim_trailing_whitespace,
)


def test_default_options() -> None:
    options = FormatOptions()

    assert options.indent_width == 2
    assert options.indent_style == IndentStyle.SPACE
    assert options.wraps_lines is True
    assert options.return_statement_parenthesis is True
    assert options.should_use_unset is False


def test_presets() -> None:
    assert FormatOptions.for_preset("default") == FormatOptions()

    compact = FormatOptions.for_preset("compact")
    assert compact.wraps_lines is False
    assert compact.should_use_unset is True

    expanded = FormatOptions.for_preset("expanded")
    assert expanded.indent_width == 4
    assert expanded.indent_case_labels is True


def test_invalid_options_raise() -> None:
    with pytest.raises(ValueError, match="indent_width"):
        FormatOptions(indent_width=-1)
    with pytest.raises(ValueError, match="Unknown format preset"):
        FormatOptions.for_preset("nope")


def test_meta_rejects_negative_values() -> None:
    with pytest.raises(ValueError, match="nest"):
        Meta(nest=-1)
    with pytest.raises(ValueError, match="previous_empty_lines"):
        Meta(previous_empty_lines=-1)


def test_indent_by_style() -> None:
    assert indent(0, FormatOptions()) == ""
    assert indent(-1, FormatOptions()) == ""
    assert indent(2, FormatOptions(indent_width=4)) == " " * 8
    assert indent(2, FormatOptions(indent_style=IndentStyle.TAB)) == "\t\t"


def test_indent_columns_measures_tabs_by_indent_width() -> None:
    assert indent_columns(3, FormatOptions(indent_style=IndentStyle.TAB, indent_width=4)) == 12
    assert indent_columns(3, FormatOptions()) == len(indent(3, FormatOptions()))
    assert indent_columns(-2, FormatOptions()) == 0


def test_trim_helpers() -> None:
    assert trim_multiple_line_feeds("a\n\n\n\nb\n\nc") == "a\n\nb\n\nc"
    assert trim_trailing_whitespace("a  \n  b\t\n") == "a\n  b\n"
