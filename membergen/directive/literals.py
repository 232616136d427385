"""Literal decoding shared by the directive parser."""

from __future__ import annotations

from membergen.directive.errors import ArrayExpectedError, InitializationFormatError
from membergen.syntax.nodes import ArrayLiteral, Expression, StringLiteral


def decode_string_array(expression: Expression, label: str) -> list[str]:
    """Return the contents of an array literal of plain string literals."""
    if not isinstance(expression, ArrayLiteral):
        raise ArrayExpectedError("expected an array literal", label=label)

    values: list[str] = []
    for index, element in enumerate(expression.elements):
        if not isinstance(element, StringLiteral) or element.interpolated:
            raise ArrayExpectedError(
                f"element {index} is not a plain string literal", label=label,
            )
        values.append(element.value)
    return values


def decode_string_literal(expression: Expression, label: str) -> str:
    """Return the content of a plain, non-interpolated string literal."""
    if not isinstance(expression, StringLiteral) or expression.interpolated:
        raise InitializationFormatError("expected a plain string literal", label=label)
    return expression.value
