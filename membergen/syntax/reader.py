"""Source reader — turns an annotated declaration snippet into syntax nodes.

Usage::

    from membergen.syntax.reader import read_source

    attribute, declaration = read_source(
        '@UsefulClass(codingMembers: ["age: Int"], ...) class Recipe {}'
    )

Only the directive and the head of the declaration that follows it are
read.  String literals, array literals and labelled arguments are
understood; any other expression is kept verbatim as a ``RawExpression``.
"""

from __future__ import annotations

import logging
import re

from membergen.config import DIRECTIVE_NAME
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

logger = logging.getLogger(__name__)

_LABEL_RE = re.compile(r"\s*([A-Za-z_]\w*)\s*:(?!:)")
_ATTRIBUTE_NAME_RE = re.compile(r"@[A-Za-z_]\w*")
_DECLARATION_RE = re.compile(
    r"\s*(?:(?:public|private|fileprivate|internal|open|final|static)\s+)*"
    r"(?P<kind>class|struct|actor|enum|protocol|extension|func|var|let)\s+"
    r"(?P<name>[A-Za-z_]\w*)"
)
_CLOSERS = {"(": ")", "[": "]", "{": "}"}
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0", "\\": "\\", '"': '"', "'": "'"}


class SourceReadError(ValueError):
    """Raised when the snippet cannot be read; ``index`` is the offset."""

    def __init__(self, message: str, index: int) -> None:
        super().__init__(message)
        self.index = index


def line_col(text: str, index: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of *index* in *text*."""
    line = text.count("\n", 0, index) + 1
    line_start = text.rfind("\n", 0, index)
    return line, index - line_start


def read_source(
    text: str, directive: str = DIRECTIVE_NAME,
) -> tuple[Attribute, Declaration]:
    """Read the *directive* attribute and the declaration it annotates.

    Raises
    ------
    SourceReadError
        If the attribute is absent, brackets or strings are unbalanced,
        or no declaration follows the attribute.
    """
    match = re.search(rf"@{re.escape(directive)}\b", text)
    if match is None:
        raise SourceReadError(f"no @{directive} attribute found", 0)

    arguments: tuple[LabeledArgument, ...] = ()
    pos = _skip_space(text, match.end())
    if text.startswith("(", pos):
        close = _find_closing(text, pos)
        arguments = tuple(
            _read_argument(text, start, end)
            for start, end in _split_top_level(text, pos + 1, close)
        )
        pos = close + 1

    pos = _skip_attributes(text, pos)
    decl = _DECLARATION_RE.match(text, pos)
    if decl is None:
        raise SourceReadError("expected a declaration after the attribute", pos)

    attribute = Attribute(name=directive, arguments=arguments)
    declaration = Declaration(
        kind=DeclarationKind(decl.group("kind")), name=decl.group("name"),
    )
    logger.debug(
        "Read @%s with %d argument(s) on %s %s",
        directive, len(arguments), declaration.kind.value, declaration.name,
    )
    return attribute, declaration


# Scanning helpers


def _skip_space(text: str, i: int) -> int:
    while i < len(text) and text[i].isspace():
        i += 1
    return i


def _skip_attributes(text: str, i: int) -> int:
    """Skip further attributes (``@MainActor``, ``@available(...)``)."""
    i = _skip_space(text, i)
    while True:
        match = _ATTRIBUTE_NAME_RE.match(text, i)
        if match is None:
            return i
        i = _skip_space(text, match.end())
        if text.startswith("(", i):
            i = _skip_space(text, _find_closing(text, i) + 1)


def _skip_string(text: str, index: int) -> int:
    """Return the offset just past the string literal opening at *index*."""
    if text.startswith('"""', index):
        raise SourceReadError("multi-line string literals are not supported", index)
    i = index + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            if text.startswith("(", i + 1):
                i = _find_closing(text, i + 1) + 1
            else:
                i += 2
            continue
        if ch == '"':
            return i + 1
        if ch == "\n":
            break
        i += 1
    raise SourceReadError("unterminated string literal", index)


def _find_closing(text: str, open_index: int) -> int:
    """Return the offset of the bracket matching the one at *open_index*."""
    stack: list[str] = []
    i = open_index
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == '"':
            i = _skip_string(text, i)
            continue
        if ch in _CLOSERS:
            stack.append(_CLOSERS[ch])
        elif ch in ")]}":
            if not stack or stack.pop() != ch:
                raise SourceReadError(f"unbalanced '{ch}'", i)
            if not stack:
                return i
        i += 1
    raise SourceReadError(f"unclosed '{text[open_index]}'", open_index)


def _split_top_level(text: str, start: int, end: int) -> list[tuple[int, int]]:
    """Split ``text[start:end]`` on commas outside brackets and strings."""
    spans: list[tuple[int, int]] = []
    depth = 0
    item_start = start
    i = start
    while i < end:
        ch = text[i]
        if ch == '"':
            i = _skip_string(text, i)
            continue
        if ch in _CLOSERS:
            depth += 1
        elif ch in ")]}":
            depth -= 1
        elif ch == "," and depth == 0:
            spans.append((item_start, i))
            item_start = i + 1
        i += 1
    # Tolerate a trailing comma
    if text[item_start:end].strip():
        spans.append((item_start, end))
    return spans


# Node builders


def _read_argument(text: str, start: int, end: int) -> LabeledArgument:
    match = _LABEL_RE.match(text, start, end)
    if match is not None:
        return LabeledArgument(
            label=match.group(1),
            expression=_read_expression(text, match.end(), end),
        )
    return LabeledArgument(expression=_read_expression(text, start, end))


def _read_expression(text: str, start: int, end: int) -> Expression:
    start = _skip_space(text, start)
    while end > start and text[end - 1].isspace():
        end -= 1
    if start == end:
        raise SourceReadError("expected an expression", start)

    first = text[start]
    if first == '"' and _skip_string(text, start) == end:
        return _read_string(text, start, end)
    if first == "[" and _find_closing(text, start) == end - 1:
        return ArrayLiteral(
            elements=tuple(
                _read_expression(text, s, e)
                for s, e in _split_top_level(text, start + 1, end - 1)
            )
        )
    return RawExpression(text=text[start:end])


def _read_string(text: str, start: int, end: int) -> StringLiteral:
    """Decode the literal spanning ``text[start:end]``, quotes included."""
    parts: list[str] = []
    interpolated = False
    i = start + 1
    stop = end - 1
    while i < stop:
        ch = text[i]
        if ch != "\\":
            parts.append(ch)
            i += 1
            continue
        escape = text[i + 1]
        if escape == "(":
            close = _find_closing(text, i + 1)
            parts.append(text[i:close + 1])
            interpolated = True
            i = close + 1
        elif escape == "u" and text.startswith("{", i + 2):
            close = text.find("}", i + 3, stop)
            try:
                if close < 0:
                    raise ValueError(text[i:stop])
                parts.append(chr(int(text[i + 3:close], 16)))
            except (ValueError, OverflowError):
                raise SourceReadError("invalid unicode escape", i) from None
            i = close + 1
        elif escape in _ESCAPES:
            parts.append(_ESCAPES[escape])
            i += 2
        else:
            raise SourceReadError(f"invalid escape sequence '\\{escape}'", i)
    return StringLiteral(value="".join(parts), interpolated=interpolated)
