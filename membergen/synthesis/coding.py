"""Decoding initializer and encode method.

The two are deliberately asymmetric: the read-only identity field is a
computed view of ``publicId``, so it is written on encode but never read
back on decode.
"""

from __future__ import annotations

from membergen.directive.schema import TypeSchema
from membergen.syntax.nodes import DeclarationKind
from membergen.synthesis.fragments import Fragment, FragmentKind, block


def render_decoding_init(schema: TypeSchema) -> Fragment:
    body = ["let container = try decoder.container(keyedBy: CodingKeys.self)", ""]
    for field in schema.writable_fields:
        method = "decodeIfPresent" if field.nullable else "decode"
        body.append(
            f"{field.name} = try container.{method}({field.type_name}.self, forKey: .{field.name})"
        )
    body.extend(schema.custom_init_lines)

    # Subclasses must inherit Decodable conformance.
    required = "required " if schema.declaration_kind is DeclarationKind.CLASS else ""
    text = block(f"{required}init(from decoder: Decoder) throws {{", body)
    return Fragment(kind=FragmentKind.DECODING_INIT, name="init(from:)", text=text)


def render_encode(schema: TypeSchema) -> Fragment:
    body = ["var container = encoder.container(keyedBy: CodingKeys.self)", ""]
    for field in schema.coding_fields:
        method = "encodeIfPresent" if field.nullable else "encode"
        body.append(f"try container.{method}({field.name}, forKey: .{field.name})")

    text = block("func encode(to encoder: Encoder) throws {", body)
    return Fragment(kind=FragmentKind.ENCODE, name="encode(to:)", text=text)
