"""membergen — synthesizes equality, hashing, coding and initializer members
for types annotated with ``@UsefulClass``."""

__version__ = "1.0.0"

from membergen.directive import (
    ArgumentCountError,
    ArrayExpectedError,
    AttachmentError,
    DirectiveError,
    DuplicateArgumentError,
    DuplicateFieldError,
    FieldSpec,
    InitializationFormatError,
    MalformedFieldDescriptorError,
    MissingLabelError,
    TypeSchema,
    UnknownArgumentError,
    ValueKind,
    parse_directive,
)
from membergen.expansion import expand, expand_source
from membergen.syntax import (
    ArrayLiteral,
    Attribute,
    Declaration,
    DeclarationKind,
    LabeledArgument,
    RawExpression,
    SourceReadError,
    StringLiteral,
    read_source,
)
from membergen.synthesis import Fragment, FragmentKind, render_members, synthesize

__all__ = [
    "__version__",
    # Entry points
    "expand",
    "expand_source",
    "parse_directive",
    "read_source",
    "render_members",
    "synthesize",
    # Models
    "ArrayLiteral",
    "Attribute",
    "Declaration",
    "DeclarationKind",
    "FieldSpec",
    "Fragment",
    "FragmentKind",
    "LabeledArgument",
    "RawExpression",
    "StringLiteral",
    "TypeSchema",
    "ValueKind",
    # Errors
    "ArgumentCountError",
    "ArrayExpectedError",
    "AttachmentError",
    "DirectiveError",
    "DuplicateArgumentError",
    "DuplicateFieldError",
    "InitializationFormatError",
    "MalformedFieldDescriptorError",
    "MissingLabelError",
    "SourceReadError",
    "UnknownArgumentError",
]
