"""Directive parser — validates ``@UsefulClass`` arguments into a TypeSchema.

Usage::

    from membergen.directive import parse_directive

    schema = parse_directive(attribute, declaration)

Validation is all-or-nothing: either a complete :class:`TypeSchema` is
returned or a :class:`DirectiveError` subclass is raised.
"""

from __future__ import annotations

import logging
import re

from membergen.config import (
    ARGUMENT_LABELS,
    CODING_MEMBERS,
    COMPARABLE_MEMBERS,
    FIELD_SEPARATOR,
    IMPLICIT_COMPARABLE_FIELD,
    NOMINAL_KINDS,
    OPTIONAL_MARKER,
    USELESS_INITIALIZATIONS,
)
from membergen.directive.errors import (
    ArgumentCountError,
    AttachmentError,
    DuplicateArgumentError,
    DuplicateFieldError,
    MalformedFieldDescriptorError,
    MissingLabelError,
    UnknownArgumentError,
)
from membergen.directive.literals import decode_string_array, decode_string_literal
from membergen.directive.schema import IMPLICIT_FIELDS, FieldSpec, TypeSchema
from membergen.syntax.nodes import Attribute, Declaration, Expression

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"^[A-Za-z_]\w*$")
_TYPE_RE = re.compile(r"^[A-Za-z_\[(](?:[\w.<>\[\]()]|[:,] ?)*$")


def parse_directive(attribute: Attribute, declaration: Declaration) -> TypeSchema:
    """Validate *attribute* attached to *declaration* and normalise it.

    Raises
    ------
    AttachmentError
        *declaration* is not a class, struct or actor.
    ArgumentCountError
        The attribute does not carry exactly three arguments.
    MissingLabelError, UnknownArgumentError, DuplicateArgumentError
        An argument label is absent, unrecognised, or repeated.
    ArrayExpectedError
        An array argument is not an array of plain string literals.
    MalformedFieldDescriptorError, DuplicateFieldError
        A coding member is not ``"<name>: <type>"`` or reuses a name.
    InitializationFormatError
        The initializer argument is not a plain string literal.
    """
    if declaration.kind.value not in NOMINAL_KINDS:
        raise AttachmentError(
            f"@{attribute.name} can only be attached to a "
            f"{', '.join(NOMINAL_KINDS)}, not a {declaration.kind.value} "
            f"({declaration.name})"
        )

    if len(attribute.arguments) != len(ARGUMENT_LABELS):
        raise ArgumentCountError(
            f"@{attribute.name} requires {len(ARGUMENT_LABELS)} arguments "
            f"({', '.join(ARGUMENT_LABELS)}), got {len(attribute.arguments)}"
        )

    expressions: dict[str, Expression] = {}
    for position, argument in enumerate(attribute.arguments):
        label = argument.label
        if not label:
            raise MissingLabelError(
                f"argument {position} of @{attribute.name} has no label; "
                f"expected one of {', '.join(ARGUMENT_LABELS)}"
            )
        if label not in ARGUMENT_LABELS:
            raise UnknownArgumentError(
                f"@{attribute.name} found unknown argument named {label}", label=label,
            )
        if label in expressions:
            raise DuplicateArgumentError("argument supplied more than once", label=label)
        expressions[label] = argument.expression

    comparable_fields = _parse_comparable_members(expressions[COMPARABLE_MEMBERS])
    coding_fields = _parse_coding_members(expressions[CODING_MEMBERS])
    custom_init_text = decode_string_literal(
        expressions[USELESS_INITIALIZATIONS], USELESS_INITIALIZATIONS,
    )

    schema = TypeSchema(
        type_name=declaration.name,
        declaration_kind=declaration.kind,
        comparable_fields=comparable_fields,
        coding_fields=coding_fields,
        custom_init_text=custom_init_text,
    )
    logger.debug(
        "Parsed @%s for %s: %d comparable, %d coding, %d initializer line(s)",
        attribute.name, schema.type_name, len(schema.comparable_fields),
        len(schema.coding_fields), len(schema.custom_init_lines),
    )
    return schema


def _parse_comparable_members(expression: Expression) -> tuple[str, ...]:
    # "name" is appended even when the caller already listed it.
    names = decode_string_array(expression, COMPARABLE_MEMBERS)
    return (*names, IMPLICIT_COMPARABLE_FIELD)


def _parse_coding_members(expression: Expression) -> tuple[FieldSpec, ...]:
    fields = [
        parse_field_descriptor(descriptor)
        for descriptor in decode_string_array(expression, CODING_MEMBERS)
    ]

    seen: set[str] = set()
    for field in (*fields, *IMPLICIT_FIELDS):
        if field.name in seen:
            raise DuplicateFieldError(
                f"coding field {field.name!r} is declared more than once "
                f"(implicit fields: {', '.join(f.name for f in IMPLICIT_FIELDS)})",
                label=CODING_MEMBERS,
            )
        seen.add(field.name)

    return (*fields, *IMPLICIT_FIELDS)


def parse_field_descriptor(descriptor: str) -> FieldSpec:
    """Parse ``"<name>: <type>"`` or ``"<name>: <type>?"`` into a FieldSpec."""
    name, separator, type_text = descriptor.partition(FIELD_SEPARATOR)
    name = name.strip()
    type_text = type_text.strip()
    nullable = type_text.endswith(OPTIONAL_MARKER)
    type_name = type_text[: -len(OPTIONAL_MARKER)].rstrip() if nullable else type_text

    if not separator or not _NAME_RE.match(name) or not _TYPE_RE.match(type_name):
        raise MalformedFieldDescriptorError(
            f"malformed coding member {descriptor!r}; "
            f"expected \"<name>{FIELD_SEPARATOR}<Type>\" or \"<name>{FIELD_SEPARATOR}<Type>?\"",
            label=CODING_MEMBERS,
        )
    return FieldSpec(name=name, type_name=type_name, nullable=nullable)

