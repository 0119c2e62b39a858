"""AST data model for VCL statements consumed by the formatter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Comment:
    """Raw comment token including its marker (`#`, `//` or `/* */`)."""

    value: str

    @property
    def is_block(self) -> bool:
        return self.value.startswith("/*")


@dataclass(frozen=True, slots=True)
class Meta:
    """Layout metadata attached to every node by the parser."""

    leading: tuple[Comment, ...] = ()
    trailing: tuple[Comment, ...] = ()
    infix: tuple[Comment, ...] = ()
    nest: int = 0
    previous_empty_lines: int = 0

    def __post_init__(self):
        if self.nest < 0:
            raise ValueError("Meta nest cannot be negative")
        if self.previous_empty_lines < 0:
            raise ValueError("Meta previous_empty_lines cannot be negative")


# Expressions


@dataclass(frozen=True, slots=True)
class Ident:
    value: str


@dataclass(frozen=True, slots=True)
class String:
    """String literal, either `"..."` or a long string `{DELIM"..."DELIM}`."""

    value: str
    long_string: bool = False
    delimiter: str = ""


@dataclass(frozen=True, slots=True)
class Integer:
    value: int


@dataclass(frozen=True, slots=True)
class Float:
    """Float literal as written, such as `2.50` or `1e-07`."""

    value: str


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool


@dataclass(frozen=True, slots=True)
class RTime:
    """Relative time literal such as `10s` or `1d`."""

    value: str


@dataclass(frozen=True, slots=True)
class IP:
    value: str


@dataclass(frozen=True, slots=True)
class PrefixExpression:
    operator: str
    right: Expression


@dataclass(frozen=True, slots=True)
class InfixExpression:
    """Binary expression; `explicit=False` marks implicit string concatenation."""

    left: Expression
    operator: str
    right: Expression
    explicit: bool = True


@dataclass(frozen=True, slots=True)
class GroupedExpression:
    right: Expression


@dataclass(frozen=True, slots=True)
class FunctionCallExpression:
    function: Ident
    arguments: tuple[Expression, ...] = ()


Expression: TypeAlias = (
    Ident
    | String
    | Integer
    | Float
    | Boolean
    | RTime
    | IP
    | PrefixExpression
    | InfixExpression
    | GroupedExpression
    | FunctionCallExpression
)


# Statements


@dataclass(frozen=True, slots=True)
class BlockStatement:
    """Brace-delimited statement sequence; `meta.nest` is the nest of its body."""

    statements: tuple[Statement, ...] = ()
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class ImportStatement:
    name: Ident
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class IncludeStatement:
    module: String
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class DeclareStatement:
    name: Ident
    value_type: Ident
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class SetStatement:
    ident: Ident
    operator: str
    value: Expression
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class AddStatement:
    ident: Ident
    operator: str
    value: Expression
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class UnsetStatement:
    ident: Ident
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class RemoveStatement:
    """Alias of `unset`."""

    ident: Ident
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class RestartStatement:
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class EsiStatement:
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class CallStatement:
    subroutine: Ident
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class ErrorStatement:
    code: Expression
    argument: Expression | None = None
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class LogStatement:
    value: Expression
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class ReturnStatement:
    expression: Expression | None = None
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class SyntheticStatement:
    value: Expression
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class SyntheticBase64Statement:
    value: Expression
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class GotoStatement:
    destination: Ident
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class GotoDestinationStatement:
    """Goto label, written with its trailing colon as part of `name`."""

    name: Ident
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class FunctionCallStatement:
    function: Ident
    arguments: tuple[Expression, ...] = ()
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class BreakStatement:
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class IfStatement:
    """If construct; else-if branches are nested `IfStatement`s in `another`."""

    keyword: str
    condition: Expression
    consequence: BlockStatement
    another: tuple[IfStatement, ...] = ()
    alternative: BlockStatement | None = None
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class CaseStatement:
    """Switch section; `test=None` is the `default:` section."""

    test: InfixExpression | None
    statements: tuple[Statement, ...] = ()
    fallthrough: bool = False
    meta: Meta = Meta()


@dataclass(frozen=True, slots=True)
class SwitchStatement:
    control: Expression
    cases: tuple[CaseStatement, ...] = ()
    meta: Meta = Meta()


Statement: TypeAlias = (
    BlockStatement
    | ImportStatement
    | IncludeStatement
    | DeclareStatement
    | SetStatement
    | AddStatement
    | UnsetStatement
    | RemoveStatement
    | RestartStatement
    | EsiStatement
    | CallStatement
    | ErrorStatement
    | LogStatement
    | ReturnStatement
    | SyntheticStatement
    | SyntheticBase64Statement
    | GotoStatement
    | GotoDestinationStatement
    | FunctionCallStatement
    | BreakStatement
    | IfStatement
    | SwitchStatement
)


# Declarations


@dataclass(frozen=True, slots=True)
class SubroutineDeclaration:
    """`sub NAME [TYPE] { ... }`; a return type makes it a functional subroutine."""

    name: Ident
    block: BlockStatement
    return_type: Ident | None = None
    meta: Meta = Meta()

    @property
    def is_functional(self) -> bool:
        return self.return_type is not None


Declaration: TypeAlias = SubroutineDeclaration | Statement


@dataclass(frozen=True, slots=True)
class SourceFile:
    declarations: tuple[Declaration, ...] = ()


__all__ = [
    "IP",
    "AddStatement",
    "BlockStatement",
    "Boolean",
    "BreakStatement",
    "CallStatement",
    "CaseStatement",
    "Comment",
    "Declaration",
    "DeclareStatement",
    "ErrorStatement",
    "EsiStatement",
    "Expression",
    "Float",
    "FunctionCallExpression",
    "FunctionCallStatement",
    "GotoDestinationStatement",
    "GotoStatement",
    "GroupedExpression",
    "Ident",
    "IfStatement",
    "ImportStatement",
    "IncludeStatement",
    "InfixExpression",
    "Integer",
    "LogStatement",
    "Meta",
    "PrefixExpression",
    "RTime",
    "RemoveStatement",
    "RestartStatement",
    "ReturnStatement",
    "SetStatement",
    "SourceFile",
    "Statement",
    "String",
    "SubroutineDeclaration",
    "SwitchStatement",
    "SyntheticBase64Statement",
    "SyntheticStatement",
    "UnsetStatement",
]
