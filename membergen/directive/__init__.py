"""Directive parsing and validation into a TypeSchema."""

from membergen.directive.errors import (
    ArgumentCountError,
    ArrayExpectedError,
    AttachmentError,
    DirectiveError,
    DuplicateArgumentError,
    DuplicateFieldError,
    InitializationFormatError,
    MalformedFieldDescriptorError,
    MissingLabelError,
    UnknownArgumentError,
)
from membergen.directive.parser import parse_directive, parse_field_descriptor
from membergen.directive.schema import (
    IMPLICIT_FIELDS,
    FieldSpec,
    TypeSchema,
    ValueKind,
)

__all__ = [
    "ArgumentCountError",
    "ArrayExpectedError",
    "AttachmentError",
    "DirectiveError",
    "DuplicateArgumentError",
    "DuplicateFieldError",
    "FieldSpec",
    "IMPLICIT_FIELDS",
    "InitializationFormatError",
    "MalformedFieldDescriptorError",
    "MissingLabelError",
    "TypeSchema",
    "UnknownArgumentError",
    "ValueKind",
    "parse_directive",
    "parse_field_descriptor",
]
