"""Syntax nodes — the slice of the host syntax tree the expander reads.

Only what the directive needs is modelled: the attribute with its labelled
arguments and the declaration it is attached to.  Expressions are either
string literals, array literals, or anything else (kept as raw text).
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class DeclarationKind(str, Enum):
    """Keyword introducing the annotated declaration."""

    CLASS = "class"
    STRUCT = "struct"
    ACTOR = "actor"
    ENUM = "enum"
    PROTOCOL = "protocol"
    EXTENSION = "extension"
    FUNCTION = "func"
    VARIABLE = "var"
    CONSTANT = "let"


class StringLiteral(BaseModel):
    """A string literal with its escapes already decoded."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    value: str = ""
    interpolated: bool = False
    """True when the literal contains ``\\(...)`` interpolation segments."""


class RawExpression(BaseModel):
    """Any expression the expander does not interpret."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["raw"] = "raw"
    text: str = ""


Expression = Annotated[
    Union["StringLiteral", "ArrayLiteral", "RawExpression"],
    Field(discriminator="kind"),
]


class ArrayLiteral(BaseModel):
    """A bracketed array literal."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    elements: tuple[Expression, ...] = ()


class LabeledArgument(BaseModel):
    """One attribute argument; ``label`` is None for positional arguments."""

    model_config = ConfigDict(frozen=True)

    label: str | None = None
    expression: Expression


class Attribute(BaseModel):
    """An attribute such as ``@UsefulClass(...)``."""

    model_config = ConfigDict(frozen=True)

    name: str
    arguments: tuple[LabeledArgument, ...] = ()


class Declaration(BaseModel):
    """The declaration an attribute is attached to."""

    model_config = ConfigDict(frozen=True)

    kind: DeclarationKind
    name: str


ArrayLiteral.model_rebuild()
LabeledArgument.model_rebuild()
Attribute.model_rebuild()
