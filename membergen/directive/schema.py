"""TypeSchema — the validated, normalised form of a directive.

A schema is built once per directive occurrence by
:func:`membergen.directive.parser.parse_directive`, handed to the
synthesizer, and thrown away.  All models are frozen.
"""

from __future__ import annotations

import textwrap
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from membergen.config import (
    IMPLICIT_CODING_FIELDS,
    IMPLICIT_COMPARABLE_FIELD,
    OPTIONAL_MARKER,
    VALUE_KINDS,
)
from membergen.syntax.nodes import DeclarationKind


class ValueKind(str, Enum):
    """Primitive kinds with a known zero value."""

    TEXT = "text"
    INTEGER = "integer"
    FLOATING = "floating"
    OTHER = "other"

    @classmethod
    def for_type(cls, type_name: str) -> ValueKind:
        return cls(VALUE_KINDS.get(type_name, cls.OTHER.value))

    def default_literal(self, type_name: str) -> str:
        """Return the zero-value expression for a *type_name* of this kind.

        ``OTHER`` falls back to the type's no-argument initializer, so the
        generated code only compiles for types that provide one.
        """
        if self is ValueKind.TEXT:
            return '""'
        if self is ValueKind.INTEGER:
            return "0"
        if self is ValueKind.FLOATING:
            return "0.0"
        return f"{type_name}()"


class FieldSpec(BaseModel):
    """One coding field, user-declared or implicit."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    type_name: str = Field(min_length=1)
    nullable: bool = False
    read_only: bool = False
    """Excluded from decoding and initializers, still encoded."""

    @field_validator("type_name")
    @classmethod
    def _bare_type_name(cls, value: str) -> str:
        if OPTIONAL_MARKER in value:
            raise ValueError(f"type name must not contain {OPTIONAL_MARKER!r}: {value!r}")
        return value

    @property
    def kind(self) -> ValueKind:
        return ValueKind.for_type(self.type_name)

    @property
    def declared_type(self) -> str:
        """Type as written in a declaration, optionality marker included."""
        return self.type_name + (OPTIONAL_MARKER if self.nullable else "")


IMPLICIT_FIELDS: tuple[FieldSpec, ...] = tuple(
    FieldSpec(name=name, type_name=type_name, nullable=nullable, read_only=read_only)
    for name, type_name, nullable, read_only in IMPLICIT_CODING_FIELDS
)


class TypeSchema(BaseModel):
    """Normalised directive for one annotated type."""

    model_config = ConfigDict(frozen=True)

    type_name: str
    declaration_kind: DeclarationKind = DeclarationKind.CLASS

    comparable_fields: tuple[str, ...]
    """User-listed names followed by ``"name"``; duplicates are kept."""

    coding_fields: tuple[FieldSpec, ...]
    """User fields in declaration order, then :data:`IMPLICIT_FIELDS`."""

    custom_init_text: str = ""
    """Raw statements appended verbatim to the decoding and default initializers."""

    @model_validator(mode="after")
    def _check_invariants(self) -> TypeSchema:
        suffix = self.coding_fields[-len(IMPLICIT_FIELDS):]
        if suffix != IMPLICIT_FIELDS:
            raise ValueError("coding fields must end with the implicit fields")
        if sum(1 for f in self.coding_fields if f.read_only) != 1:
            raise ValueError("exactly one coding field must be read-only")
        names = [f.name for f in self.coding_fields]
        if len(set(names)) != len(names):
            raise ValueError(f"coding field names must be unique: {names}")
        if not self.comparable_fields or self.comparable_fields[-1] != IMPLICIT_COMPARABLE_FIELD:
            raise ValueError(
                f"comparable fields must end with {IMPLICIT_COMPARABLE_FIELD!r}"
            )
        return self

    @property
    def writable_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(f for f in self.coding_fields if not f.read_only)

    @property
    def custom_init_lines(self) -> tuple[str, ...]:
        """``custom_init_text`` split into lines, common indentation removed."""
        return tuple(textwrap.dedent(self.custom_init_text).strip("\n").splitlines())
