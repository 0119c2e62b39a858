"""Statement, block and control-flow rendering.

Nest levels are never written back to the tree. Every renderer receives a
`shift` that is added to the nest recorded in a node's metadata; switch case
bodies use it to re-seat statements the parser left at the section's nest.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from vclpy.ast import (
    AddStatement,
    BlockStatement,
    BreakStatement,
    CallStatement,
    CaseStatement,
    Comment,
    DeclareStatement,
    ErrorStatement,
    EsiStatement,
    Expression,
    FunctionCallStatement,
    GotoDestinationStatement,
    GotoStatement,
    GroupedExpression,
    Ident,
    IfStatement,
    ImportStatement,
    IncludeStatement,
    LogStatement,
    RemoveStatement,
    RestartStatement,
    ReturnStatement,
    SetStatement,
    Statement,
    SwitchStatement,
    SyntheticBase64Statement,
    SyntheticStatement,
    UnsetStatement,
)
from vclpy.format.comment import format_comments, format_trailing
from vclpy.format.expression import ExpressionFormatter, format_string
from vclpy.format.line import GroupedLines, Line, LineGroup, group_statements
from vclpy.format.options import FormatOptions
from vclpy.format.text import indent, indent_columns, trim_multiple_line_feeds


def trailing_owner(stmt: Statement) -> Statement:
    """Node whose trailing comments follow `stmt` in source.

    An if construct ends with its last written branch, so the comment after
    it belongs to the else block, else the last else-if, else the consequence.
    """
    if isinstance(stmt, IfStatement):
        if stmt.alternative is not None:
            return stmt.alternative
        if stmt.another:
            return stmt.another[-1]
        return stmt.consequence
    return stmt


def effective_case_nest(case: CaseStatement, options: FormatOptions, shift: int = 0) -> int:
    """Nest of a `case`/`default` label, one level shallower without case-label indentation."""
    nest = case.meta.nest + shift
    if not options.indent_case_labels:
        nest -= 1
    return nest


@dataclass(frozen=True, slots=True)
class StatementFormatter:
    """Renders statements to `Line`s.

    `functional_subroutine` is set while formatting the body of a subroutine
    that declares a return type.
    """

    options: FormatOptions
    functional_subroutine: bool = False
    expressions: ExpressionFormatter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "expressions", ExpressionFormatter(self.options))

    def format_statement(self, stmt: Statement, shift: int = 0) -> Line:
        if isinstance(stmt, BlockStatement):
            # The opening brace is one level shallower than the block body.
            nest = stmt.meta.nest + shift - 1
            return Line(
                leading=format_comments(stmt.meta.leading, "\n", nest, self.options),
                buffer=self._indent(nest) + self.format_block(stmt, shift),
                trailing=format_trailing(stmt.meta.trailing, self.options),
                blank_line=stmt.meta.previous_empty_lines > 0,
            )

        nest = stmt.meta.nest + shift
        line = Line(
            leading=format_comments(stmt.meta.leading, "\n", nest, self.options),
            buffer=self._indent(nest),
            blank_line=stmt.meta.previous_empty_lines > 0,
        )
        line.buffer += self._format_body(stmt, nest, shift)
        line.trailing = format_trailing(trailing_owner(stmt).meta.trailing, self.options)
        return line

    def _format_body(self, stmt: Statement, nest: int, shift: int) -> str:
        match stmt:
            case ImportStatement(name=name):
                return f"import {name.value};"
            case IncludeStatement(module=module):
                return f"include {format_string(module)};"
            case DeclareStatement(name=name, value_type=value_type):
                return f"declare local {name.value} {value_type.value};"
            case SetStatement(ident=ident, operator=operator, value=value):
                return self._format_assignment("set", ident, operator, value, nest)
            case AddStatement(ident=ident, operator=operator, value=value):
                return self._format_assignment("add", ident, operator, value, nest)
            case UnsetStatement(ident=ident):
                return f"unset {ident.value};"
            case RemoveStatement(ident=ident):
                keyword = "unset" if self.options.should_use_unset else "remove"
                return f"{keyword} {ident.value};"
            case RestartStatement():
                return "restart;"
            case EsiStatement():
                return "esi;"
            case CallStatement(subroutine=subroutine):
                return f"call {subroutine.value};"
            case ErrorStatement(code=code, argument=argument):
                text = "error " + self.expressions.render(code)
                if argument is not None:
                    text += " " + self.expressions.render(argument)
                return text + ";"
            case LogStatement(value=value):
                return self._format_keyword_value("log", value, nest)
            case SyntheticStatement(value=value):
                return self._format_keyword_value("synthetic", value, nest)
            case SyntheticBase64Statement(value=value):
                return self._format_keyword_value("synthetic.base64", value, nest)
            case ReturnStatement():
                return self._format_return(stmt)
            case GotoStatement(destination=destination):
                return f"goto {destination.value};"
            case GotoDestinationStatement(name=name):
                return name.value
            case FunctionCallStatement(function=function, arguments=arguments):
                return self._format_function_call(function, arguments, nest)
            case BreakStatement():
                return "break;"
            case IfStatement():
                return self.format_if(stmt, nest, shift)
            case SwitchStatement():
                return self.format_switch(stmt, nest, shift)
            case _:
                raise TypeError(f"Unsupported statement node: {type(stmt).__name__}")

    def _format_assignment(
        self,
        keyword: str,
        ident: Ident,
        operator: str,
        value: Expression,
        nest: int,
    ) -> str:
        head = f"{keyword} {ident.value} {operator} "
        return head + self._chunked(value, nest, head) + ";"

    def _format_keyword_value(self, keyword: str, value: Expression, nest: int) -> str:
        head = keyword + " "
        return head + self._chunked(value, nest, head) + ";"

    def _format_return(self, stmt: ReturnStatement) -> str:
        if stmt.expression is None:
            return "return;"

        value = self.expressions.render(stmt.expression)
        parenthesize = self.options.return_statement_parenthesis and not self.functional_subroutine
        if parenthesize and not isinstance(stmt.expression, GroupedExpression):
            value = "(" + value + ")"
        return f"return {value};"

    def _format_function_call(
        self,
        function: Ident,
        arguments: Sequence[Expression],
        nest: int,
    ) -> str:
        head = function.value + "("
        rendered = [self._chunked(argument, nest, head) for argument in arguments]
        return head + ", ".join(rendered) + ");"

    def _chunked(self, expr: Expression, nest: int, written: str) -> str:
        column = indent_columns(nest, self.options) + len(written)
        return self.expressions.render_chunked(expr, nest, column)

    def format_block(self, block: BlockStatement, shift: int = 0) -> str:
        """Render `{`, the grouped body, infix comments and the closing brace."""
        nest = block.meta.nest + shift
        grouped = self._format_grouped(block.statements, shift)

        parts = ["{\n", grouped.render()]
        if block.meta.infix:
            parts.append(format_comments(block.meta.infix, "\n", nest, self.options))
        parts.append(self._indent(nest - 1) + "}")
        return trim_multiple_line_feeds("".join(parts))

    def _format_grouped(self, statements: Sequence[Statement], shift: int) -> GroupedLines:
        grouped = GroupedLines()
        for indices in group_statements(statements):
            group = LineGroup([self.format_statement(statements[i], shift) for i in indices])
            grouped.groups.append(group)
        if self.options.align_trailing_comment:
            grouped.align()
        return grouped

    def format_if(self, stmt: IfStatement, nest: int, shift: int = 0) -> str:
        parts = [
            self._format_condition(stmt.keyword, stmt.condition, nest),
            self.format_block(stmt.consequence, shift),
        ]

        for branch in stmt.another:
            branch_nest = branch.meta.nest + shift
            keyword = "else if" if self.options.else_if else branch.keyword
            parts.append(self._branch_separator(branch.meta.leading, branch_nest))
            parts.append(self._format_condition(keyword, branch.condition, branch_nest))
            parts.append(self.format_block(branch.consequence, shift))

        if stmt.alternative is not None:
            alternative_nest = stmt.alternative.meta.nest + shift - 1
            parts.append(self._branch_separator(stmt.alternative.meta.leading, alternative_nest))
            parts.append("else ")
            parts.append(self.format_block(stmt.alternative, shift))

        return "".join(parts)

    def _branch_separator(self, leading: Sequence[Comment], nest: int) -> str:
        if leading or self.options.always_next_line_else_if:
            return "\n" + format_comments(leading, "\n", nest, self.options) + self._indent(nest)
        return " "

    def _format_condition(self, keyword: str, condition: Expression, nest: int) -> str:
        head = keyword + " ("
        chunk = self._chunked(condition, nest, head)
        if "\n" not in chunk:
            return head + chunk + ") "

        column = indent_columns(nest + 1, self.options)
        chunk = self.expressions.render_chunked(condition, nest, column)
        return head + "\n" + self._indent(nest + 1) + chunk + "\n" + self._indent(nest) + ") "

    def format_switch(self, stmt: SwitchStatement, nest: int, shift: int = 0) -> str:
        parts = ["switch (" + self.expressions.render(stmt.control) + ") {\n"]
        for case in stmt.cases:
            parts.append(self.format_case_section(case, shift))
        if stmt.meta.infix:
            parts.append(format_comments(stmt.meta.infix, "\n", nest + 1, self.options))
        parts.append(self._indent(nest) + "}")
        return "".join(parts)

    def format_case_section(self, case: CaseStatement, shift: int = 0) -> str:
        case_nest = effective_case_nest(case, self.options, shift)
        parts = [
            format_comments(case.meta.leading, "\n", case_nest, self.options),
            self._indent(case_nest),
        ]
        if case.test is not None:
            parts.append("case ")
            if case.test.operator == "~":
                parts.append("~ ")
            parts.append(self.expressions.render(case.test.right) + ":\n")
        else:
            parts.append("default:\n")

        # Case bodies carry the section's nest; render them one level below the label.
        body_shift = case_nest + 1 - case.meta.nest
        parts.append(self._format_grouped(case.statements, body_shift).render())
        if case.fallthrough:
            parts.append(self._indent(case_nest + 1) + "fallthrough;\n")
        return trim_multiple_line_feeds("".join(parts))

    def _indent(self, nest: int) -> str:
        return indent(nest, self.options)
