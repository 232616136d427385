"""Directive validation errors.

Every error here is a schema-authoring mistake reported at the directive
site.  None is recoverable: the expansion of that directive is abandoned and
no fragments are produced.
"""

from __future__ import annotations


class DirectiveError(Exception):
    """Base class for all directive validation failures."""

    def __init__(self, message: str, *, label: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.label = label

    def __str__(self) -> str:
        if self.label:
            return f"{self.message} (argument `{self.label}`)"
        return self.message


class AttachmentError(DirectiveError):
    """Raised when the directive is attached to something other than a type."""


class ArgumentCountError(DirectiveError):
    """Raised when the directive does not receive exactly three arguments."""


class MissingLabelError(DirectiveError):
    """Raised when an argument has no label."""


class UnknownArgumentError(DirectiveError):
    """Raised for a label outside the recognised argument names."""


class DuplicateArgumentError(DirectiveError):
    """Raised when a recognised label is supplied more than once."""


class ArrayExpectedError(DirectiveError):
    """Raised when an argument is not an array of plain string literals."""


class InitializationFormatError(DirectiveError):
    """Raised when the initializer argument is not a plain string literal."""


class MalformedFieldDescriptorError(DirectiveError):
    """Raised when a coding member is not formatted ``"<name>: <type>"``."""


class DuplicateFieldError(DirectiveError):
    """Raised when a coding member repeats another coding field's name."""
