"""Required members, equality, hashing and coding keys."""

from __future__ import annotations

from membergen.config import IDENTITY_SOURCE_FIELD
from membergen.directive.schema import IMPLICIT_FIELDS, TypeSchema
from membergen.synthesis.fragments import Fragment, FragmentKind, block


def render_required_members() -> list[Fragment]:
    """The six implicit fields; the read-only one is computed from publicId."""
    fragments: list[Fragment] = []
    for field in IMPLICIT_FIELDS:
        header = f"var {field.name}: {field.declared_type}"
        if field.read_only:
            fragments.append(Fragment(
                kind=FragmentKind.COMPUTED_PROPERTY,
                name=field.name,
                text=block(f"{header} {{", [IDENTITY_SOURCE_FIELD]),
            ))
        else:
            fragments.append(Fragment(
                kind=FragmentKind.STORED_PROPERTY, name=field.name, text=header,
            ))
    return fragments


def _conjunction(names: tuple[str, ...] | list[str]) -> str:
    return " && ".join(f"lhs.{name} == rhs.{name}" for name in names)


def render_properties_equal(schema: TypeSchema) -> Fragment:
    """``propertiesEqual`` compares only the comparable fields."""
    text = block(
        f"static func propertiesEqual(lhs: {schema.type_name}, rhs: {schema.type_name}) -> Bool {{",
        [f"return {_conjunction(schema.comparable_fields)}"],
    )
    return Fragment(kind=FragmentKind.PROPERTIES_EQUAL, name="propertiesEqual", text=text)


def render_equality(schema: TypeSchema) -> Fragment:
    """``==`` compares every coding field, the read-only identity included."""
    text = block(
        f"static func == (lhs: {schema.type_name}, rhs: {schema.type_name}) -> Bool {{",
        [f"return {_conjunction([f.name for f in schema.coding_fields])}"],
    )
    return Fragment(kind=FragmentKind.EQUALITY, name="==", text=text)


def render_hash(schema: TypeSchema) -> Fragment:
    text = block(
        "func hash(into hasher: inout Hasher) {",
        [f"hasher.combine({f.name})" for f in schema.coding_fields],
    )
    return Fragment(kind=FragmentKind.HASH, name="hash(into:)", text=text)


def render_coding_keys(schema: TypeSchema) -> Fragment:
    text = block(
        "private enum CodingKeys: String, CodingKey {",
        [f"case {f.name}" for f in schema.coding_fields],
    )
    return Fragment(kind=FragmentKind.CODING_KEYS, name="CodingKeys", text=text)
