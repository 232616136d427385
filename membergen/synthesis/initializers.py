"""Default-value and memberwise initializers."""

from __future__ import annotations

from membergen.config import INDENT
from membergen.directive.schema import TypeSchema
from membergen.synthesis.fragments import Fragment, FragmentKind, block


def render_empty_init(schema: TypeSchema) -> Fragment:
    """``init()`` giving every writable field its zero value."""
    body = [
        f"{f.name} = {'nil' if f.nullable else f.kind.default_literal(f.type_name)}"
        for f in schema.writable_fields
    ]
    body.extend(schema.custom_init_lines)
    return Fragment(kind=FragmentKind.EMPTY_INIT, name="init()", text=block("init() {", body))


def render_memberwise_init(schema: TypeSchema) -> Fragment:
    """``init(...)`` with one parameter per writable field.

    Nullable parameters default to ``nil``; the rest are required.
    """
    fields = schema.writable_fields
    parameters = [
        f"{f.name}: {f.declared_type} = nil" if f.nullable else f"{f.name}: {f.type_name}"
        for f in fields
    ]
    header_lines = ["init("]
    header_lines.extend(
        f"{INDENT}{param}{',' if i < len(parameters) - 1 else ''}"
        for i, param in enumerate(parameters)
    )
    header_lines.append(") {")

    body = [f"self.{f.name} = {f.name}" for f in fields]
    body.extend(schema.custom_init_lines)

    text = block("\n".join(header_lines), body)
    return Fragment(kind=FragmentKind.MEMBERWISE_INIT, name="init(...)", text=text)
