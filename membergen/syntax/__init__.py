"""Syntax nodes and the source reader that produces them."""

from membergen.syntax.nodes import (
    ArrayLiteral,
    Attribute,
    Declaration,
    DeclarationKind,
    Expression,
    LabeledArgument,
    RawExpression,
    StringLiteral,
)
from membergen.syntax.reader import SourceReadError, line_col, read_source

__all__ = [
    "ArrayLiteral",
    "Attribute",
    "Declaration",
    "DeclarationKind",
    "Expression",
    "LabeledArgument",
    "RawExpression",
    "SourceReadError",
    "StringLiteral",
    "line_col",
    "read_source",
]
