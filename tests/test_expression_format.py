import pytest

from vclpy.ast import (
    IP,
    Boolean,
    Float,
    FunctionCallExpression,
    GroupedExpression,
    Ident,
    InfixExpression,
    Integer,
    PrefixExpression,
    RTime,
    String,
)
from vclpy.format import ExpressionFormatter, FormatOptions


@pytest.mark.parametrize(
    ("expr", "expected"),
    [
        (Ident("req.url"), "req.url"),
        (String("hello"), '"hello"'),
        (String("raw", long_string=True), '{"raw"}'),
        (Integer(10), "10"),
        (Float("1.5"), "1.5"),
        (Float("2.50"), "2.50"),
        (Float("1e-07"), "1e-07"),
        (Boolean(True), "true"),
        (Boolean(False), "false"),
        (RTime("10s"), "10s"),
        (IP("192.0.2.1"), "192.0.2.1"),
        (PrefixExpression("!", Ident("req.is_ssl")), "!req.is_ssl"),
        (GroupedExpression(Ident("x")), "(x)"),
        (InfixExpression(Ident("a"), "==", String("b")), 'a == "b"'),
        (InfixExpression(String("a"), "+", String("b"), explicit=False), '"a" "b"'),
        (
            FunctionCallExpression(Ident("std.tolower"), (Ident("req.url"), Integer(1))),
            "std.tolower(req.url, 1)",
        ),
    ],
)
def test_render_single_line(expr, expected) -> None:
    assert ExpressionFormatter(FormatOptions()).render(expr) == expected


def test_render_chunked_keeps_short_expression_inline() -> None:
    expr = InfixExpression(Ident("a"), "&&", Ident("b"))

    assert ExpressionFormatter(FormatOptions()).render_chunked(expr, 1, 10) == "a && b"


def test_render_chunked_breaks_after_operators_at_next_nest() -> None:
    expr = InfixExpression(
        InfixExpression(Ident("aaaaaaaa"), "||", Ident("bbbbbbbb")),
        "||",
        Ident("cccccccc"),
    )
    formatter = ExpressionFormatter(FormatOptions(line_width=24))

    assert formatter.render_chunked(expr, 1, 0) == "aaaaaaaa || bbbbbbbb ||\n    cccccccc"


def test_render_chunked_accounts_for_start_column() -> None:
    expr = InfixExpression(Ident("aaaa"), "&&", Ident("bbbb"))
    formatter = ExpressionFormatter(FormatOptions(line_width=20))

    assert "\n" not in formatter.render_chunked(expr, 0, 0)
    assert formatter.render_chunked(expr, 0, 10) == "aaaa &&\n  bbbb"


def test_render_chunked_does_not_split_comparisons() -> None:
    expr = InfixExpression(Ident("req.http.Some-Very-Long-Header"), "==", String("value"))
    formatter = ExpressionFormatter(FormatOptions(line_width=10))

    assert formatter.render_chunked(expr, 0, 0) == 'req.http.Some-Very-Long-Header == "value"'


def test_render_chunked_is_inline_when_wrapping_disabled() -> None:
    expr = InfixExpression(Ident("aaaa"), "&&", Ident("bbbb"))
    formatter = ExpressionFormatter(FormatOptions(line_width=0))

    assert formatter.render_chunked(expr, 0, 500) == "aaaa && bbbb"


def test_chunks_split_implicit_concatenation_without_operator() -> None:
    expr = InfixExpression(String("a"), "+", String("b"), explicit=False)

    assert ExpressionFormatter(FormatOptions()).chunks(expr) == ['"a"', '"b"']
