"""Subroutine declaration rendering."""

from __future__ import annotations

from vclpy.ast import SubroutineDeclaration
from vclpy.format.comment import format_comments, format_trailing
from vclpy.format.line import Line
from vclpy.format.options import FormatOptions
from vclpy.format.statement import StatementFormatter
from vclpy.format.text import indent


def format_subroutine(decl: SubroutineDeclaration, options: FormatOptions) -> Line:
    """Render `sub NAME [TYPE] { ... }`.

    The body of a subroutine with a return type is formatted in functional
    context, where return values are never force-parenthesized.
    """
    formatter = StatementFormatter(options, functional_subroutine=decl.is_functional)
    nest = decl.meta.nest

    head = "sub " + decl.name.value + " "
    if decl.return_type is not None:
        head += decl.return_type.value + " "

    return Line(
        leading=format_comments(decl.meta.leading, "\n", nest, options),
        buffer=indent(nest, options) + head + formatter.format_block(decl.block),
        # The closing brace ends the declaration, so its comment is the block's.
        trailing=format_trailing(decl.block.meta.trailing, options),
        blank_line=decl.meta.previous_empty_lines > 0,
    )
