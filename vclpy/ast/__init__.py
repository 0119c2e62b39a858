"""Typed VCL statement AST annotated with layout metadata."""

from vclpy.ast.model import (
    IP,
    AddStatement,
    BlockStatement,
    Boolean,
    BreakStatement,
    CallStatement,
    CaseStatement,
    Comment,
    Declaration,
    DeclareStatement,
    ErrorStatement,
    EsiStatement,
    Expression,
    Float,
    FunctionCallExpression,
    FunctionCallStatement,
    GotoDestinationStatement,
    GotoStatement,
    GroupedExpression,
    Ident,
    IfStatement,
    ImportStatement,
    IncludeStatement,
    InfixExpression,
    Integer,
    LogStatement,
    Meta,
    PrefixExpression,
    RemoveStatement,
    RestartStatement,
    ReturnStatement,
    RTime,
    SetStatement,
    SourceFile,
    Statement,
    String,
    SubroutineDeclaration,
    SwitchStatement,
    SyntheticBase64Statement,
    SyntheticStatement,
    UnsetStatement,
)

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
