"""End-to-end tests: source snippet in, member declarations out."""

from __future__ import annotations

import pytest

from membergen import (
    ArgumentCountError,
    AttachmentError,
    DirectiveError,
    FragmentKind,
    MalformedFieldDescriptorError,
    SourceReadError,
    UnknownArgumentError,
    expand,
    expand_source,
    read_source,
    render_members,
)

RECIPE_SOURCE = """\
@UsefulClass(codingMembers: ["age: Int"],
             comparableMembers: ["age"],
             uselessInitializations: "status = 0")
class Recipe: Identifiable, Codable, Hashable, Equatable {
    var age: Int = 0

    private var status: Int = 1
}
"""

RECIPE_MEMBERS = """\
    var id: String {
        publicId
    }

    var publicId: String

    var name: String

    var createdAt: Date

    var updatedAt: Date

    var deletedAt: Date?

    static func propertiesEqual(lhs: Recipe, rhs: Recipe) -> Bool {
        return lhs.age == rhs.age && lhs.name == rhs.name
    }

    static func == (lhs: Recipe, rhs: Recipe) -> Bool {
        return lhs.age == rhs.age && lhs.id == rhs.id && lhs.publicId == rhs.publicId && lhs.name == rhs.name && lhs.createdAt == rhs.createdAt && lhs.updatedAt == rhs.updatedAt && lhs.deletedAt == rhs.deletedAt
    }

    func hash(into hasher: inout Hasher) {
        hasher.combine(age)
        hasher.combine(id)
        hasher.combine(publicId)
        hasher.combine(name)
        hasher.combine(createdAt)
        hasher.combine(updatedAt)
        hasher.combine(deletedAt)
    }

    private enum CodingKeys: String, CodingKey {
        case age
        case id
        case publicId
        case name
        case createdAt
        case updatedAt
        case deletedAt
    }

    required init(from decoder: Decoder) throws {
        let container = try decoder.container(keyedBy: CodingKeys.self)

        age = try container.decode(Int.self, forKey: .age)
        publicId = try container.decode(String.self, forKey: .publicId)
        name = try container.decode(String.self, forKey: .name)
        createdAt = try container.decode(Date.self, forKey: .createdAt)
        updatedAt = try container.decode(Date.self, forKey: .updatedAt)
        deletedAt = try container.decodeIfPresent(Date.self, forKey: .deletedAt)
        status = 0
    }

    func encode(to encoder: Encoder) throws {
        var container = encoder.container(keyedBy: CodingKeys.self)

        try container.encode(age, forKey: .age)
        try container.encode(id, forKey: .id)
        try container.encode(publicId, forKey: .publicId)
        try container.encode(name, forKey: .name)
        try container.encode(createdAt, forKey: .createdAt)
        try container.encode(updatedAt, forKey: .updatedAt)
        try container.encodeIfPresent(deletedAt, forKey: .deletedAt)
    }

    init() {
        age = 0
        publicId = ""
        name = ""
        createdAt = Date()
        updatedAt = Date()
        deletedAt = nil
        status = 0
    }

    init(
        age: Int,
        publicId: String,
        name: String,
        createdAt: Date,
        updatedAt: Date,
        deletedAt: Date? = nil
    ) {
        self.age = age
        self.publicId = publicId
        self.name = name
        self.createdAt = createdAt
        self.updatedAt = updatedAt
        self.deletedAt = deletedAt
        status = 0
    }"""


# ---------------------------------------------------------------------------
# Recipe scenario
# ---------------------------------------------------------------------------


class TestRecipeExpansion:
    def test_rendered_members(self):
        assert render_members(expand_source(RECIPE_SOURCE)) == RECIPE_MEMBERS

    def test_fragment_count(self):
        fragments = expand_source(RECIPE_SOURCE)
        assert len(fragments) == 14
        assert fragments[-1].kind is FragmentKind.MEMBERWISE_INIT

    def test_expand_matches_expand_source(self):
        attribute, declaration = read_source(RECIPE_SOURCE)
        assert expand(attribute, declaration) == expand_source(RECIPE_SOURCE)

    def test_repeated_expansion_is_byte_identical(self):
        first = render_members(expand_source(RECIPE_SOURCE))
        second = render_members(expand_source(RECIPE_SOURCE))
        assert first == second

    def test_duplicate_name_is_harmless(self):
        source = RECIPE_SOURCE.replace('["age"]', '["age", "name"]')
        fragments = expand_source(source)
        equal = next(f for f in fragments if f.kind is FragmentKind.PROPERTIES_EQUAL)
        assert "lhs.age == rhs.age && lhs.name == rhs.name && lhs.name == rhs.name" in equal.text

    def test_struct_target(self):
        fragments = expand_source(RECIPE_SOURCE.replace("class Recipe", "struct Recipe"))
        decoding = next(f for f in fragments if f.kind is FragmentKind.DECODING_INIT)
        assert decoding.text.startswith("init(from decoder: Decoder) throws {")

    def test_initializer_text_with_semicolon_in_string(self):
        source = RECIPE_SOURCE.replace('"status = 0"', r'"label = \"a;b\""')
        fragments = expand_source(source)
        empty = next(f for f in fragments if f.kind is FragmentKind.EMPTY_INIT)
        assert empty.text.splitlines()[-2] == '    label = "a;b"'

    def test_compound_statement_passes_through(self):
        fragments = expand_source(RECIPE_SOURCE.replace("status = 0", "status += 1"))
        decoding = next(f for f in fragments if f.kind is FragmentKind.DECODING_INIT)
        assert decoding.text.splitlines()[-2] == "    status += 1"

    def test_space_before_optional_marker(self):
        fragments = expand_source(RECIPE_SOURCE.replace('"age: Int"', '"note: String ?"'))
        decoding = next(f for f in fragments if f.kind is FragmentKind.DECODING_INIT)
        assert "note = try container.decodeIfPresent(String.self, forKey: .note)" in decoding.text


# ---------------------------------------------------------------------------
# Malformed directives
# ---------------------------------------------------------------------------


class TestMalformedDirectives:
    def test_two_arguments(self):
        source = '@UsefulClass(codingMembers: ["age: Int"], comparableMembers: ["age"])\nclass Recipe {}'
        with pytest.raises(ArgumentCountError):
            expand_source(source)

    def test_unknown_label(self):
        source = RECIPE_SOURCE.replace("comparableMembers", "foo")
        with pytest.raises(UnknownArgumentError):
            expand_source(source)

    def test_attached_to_function(self):
        source = RECIPE_SOURCE.replace(
            "class Recipe: Identifiable, Codable, Hashable, Equatable", "func recipe()",
        )
        with pytest.raises(AttachmentError):
            expand_source(source)

    def test_initializer_not_a_string(self):
        source = RECIPE_SOURCE.replace('"status = 0"', "statusReset")
        with pytest.raises(DirectiveError):
            expand_source(source)

    def test_field_name_with_space(self):
        with pytest.raises(MalformedFieldDescriptorError):
            expand_source(RECIPE_SOURCE.replace('"age: Int"', '"my age: Int"'))

    def test_unreadable_source(self):
        with pytest.raises(SourceReadError):
            expand_source('@UsefulClass(codingMembers: ["age: Int"')
