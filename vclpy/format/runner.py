"""Format entrypoints over an annotated VCL syntax tree."""

from __future__ import annotations

from vclpy.ast import Declaration, SourceFile, Statement, SubroutineDeclaration
from vclpy.format.declaration import format_subroutine
from vclpy.format.line import Line
from vclpy.format.options import FormatOptions
from vclpy.format.results import FormatRunResult
from vclpy.format.statement import StatementFormatter
from vclpy.format.text import trim_multiple_line_feeds, trim_trailing_whitespace
from vclpy.logger import logger


def run_format(
    source: SourceFile,
    options: FormatOptions | None = None,
    *,
    preset: str | None = None,
    original_text: str | None = None,
) -> FormatRunResult:
    """Format a whole source tree.

    `changed` compares against `original_text` when the caller has it.
    """
    resolved_options = _resolve_options(options, preset=preset)
    logger.debug("format.start", declarations=len(source.declarations))

    formatted_text = format_source(source, resolved_options)
    changed = original_text is not None and formatted_text != original_text

    logger.debug(
        "format.done",
        lines=formatted_text.count("\n"),
        changed=changed,
    )
    return FormatRunResult(
        source=source,
        options=resolved_options,
        formatted_text=formatted_text,
        changed=changed,
    )


def format_source(source: SourceFile, options: FormatOptions) -> str:
    chunks: list[str] = []
    previous: Declaration | None = None
    for declaration in source.declarations:
        line = _format_declaration(declaration, options)
        # Top-level separation goes above the comments of the next item.
        line.blank_line = False
        if previous is not None and (
            declaration.meta.previous_empty_lines > 0
            or isinstance(declaration, SubroutineDeclaration)
            or isinstance(previous, SubroutineDeclaration)
        ):
            chunks.append("\n")
        chunks.append(line.render() + "\n")
        previous = declaration

    text = trim_multiple_line_feeds(trim_trailing_whitespace("".join(chunks)))
    text = text.strip("\n")
    return text + "\n" if text else ""


def format_statement(
    statement: Statement,
    options: FormatOptions | None = None,
    *,
    functional_subroutine: bool = False,
) -> str:
    """Format one statement, with its comments, as standalone text."""
    formatter = StatementFormatter(
        options if options is not None else FormatOptions(),
        functional_subroutine=functional_subroutine,
    )
    return formatter.format_statement(statement).render()


def _format_declaration(declaration: Declaration, options: FormatOptions) -> Line:
    if isinstance(declaration, SubroutineDeclaration):
        return format_subroutine(declaration, options)
    return StatementFormatter(options).format_statement(declaration)


def _resolve_options(options: FormatOptions | None, *, preset: str | None) -> FormatOptions:
    if preset is not None:
        if options is not None:
            raise ValueError("Pass either options or preset, not both")
        return FormatOptions.for_preset(preset)
    return options if options is not None else FormatOptions()
