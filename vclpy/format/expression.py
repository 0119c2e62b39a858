"""Expression rendering, inline or chunked across lines by width."""

from __future__ import annotations

from dataclasses import dataclass

from vclpy.ast import (
    IP,
    Boolean,
    Expression,
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
from vclpy.format.options import FormatOptions
from vclpy.format.text import indent, indent_columns

# Operators whose operands may be split onto separate lines.
_BREAKABLE_OPERATORS: frozenset[str] = frozenset({"&&", "||", "+"})


def format_string(node: String) -> str:
    if node.long_string:
        return "{" + node.delimiter + '"' + node.value + '"' + node.delimiter + "}"
    return '"' + node.value + '"'


@dataclass(frozen=True, slots=True)
class ExpressionFormatter:
    options: FormatOptions

    def render(self, expr: Expression) -> str:
        """Render `expr` on a single line."""
        match expr:
            case Ident(value=value) | Float(value=value) | RTime(value=value) | IP(value=value):
                return value
            case String():
                return format_string(expr)
            case Integer(value=value):
                return str(value)
            case Boolean(value=value):
                return "true" if value else "false"
            case PrefixExpression(operator=operator, right=right):
                return operator + self.render(right)
            case InfixExpression(left=left, operator=operator, right=right, explicit=explicit):
                if not explicit:
                    return f"{self.render(left)} {self.render(right)}"
                return f"{self.render(left)} {operator} {self.render(right)}"
            case GroupedExpression(right=right):
                return "(" + self.render(right) + ")"
            case FunctionCallExpression(function=function, arguments=arguments):
                return function.value + "(" + ", ".join(self.render(a) for a in arguments) + ")"
            case _:
                raise TypeError(f"Unsupported expression node: {type(expr).__name__}")

    def render_chunked(self, expr: Expression, nest: int, column: int) -> str:
        """Render `expr` starting at `column`, wrapping onto `nest + 1` past the line width.

        The result contains a line break only when the single-line rendering
        would not fit.
        """
        if not self.options.wraps_lines:
            return self.render(expr)

        chunks = self.chunks(expr)
        continuation = indent(nest + 1, self.options)
        width = self.options.line_width

        parts = [chunks[0]]
        current = column + len(chunks[0])
        for chunk in chunks[1:]:
            if current + 1 + len(chunk) > width:
                parts.append("\n" + continuation + chunk)
                current = indent_columns(nest + 1, self.options) + len(chunk)
            else:
                parts.append(" " + chunk)
                current += 1 + len(chunk)
        return "".join(parts)

    def chunks(self, expr: Expression) -> list[str]:
        """Split `expr` at breakable operators; operators stay at the end of their left chunk."""
        if not (isinstance(expr, InfixExpression) and expr.operator in _BREAKABLE_OPERATORS):
            return [self.render(expr)]

        left = self.chunks(expr.left)
        right = self.chunks(expr.right)
        if expr.explicit:
            left[-1] = left[-1] + " " + expr.operator
        return left + right
