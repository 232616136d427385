"""Global configuration: directive grammar, implicit schema, constants."""

# Name of the attribute the expander responds to
DIRECTIVE_NAME = "UsefulClass"

# Recognised argument labels
COMPARABLE_MEMBERS = "comparableMembers"
CODING_MEMBERS = "codingMembers"
USELESS_INITIALIZATIONS = "uselessInitializations"
ARGUMENT_LABELS = (COMPARABLE_MEMBERS, CODING_MEMBERS, USELESS_INITIALIZATIONS)

# "<name>: <type>[?]" coding member descriptors
FIELD_SEPARATOR = ": "
OPTIONAL_MARKER = "?"

# Always appended to the comparable member list, even when already present.
IMPLICIT_COMPARABLE_FIELD = "name"

# Appended to every coding member list: (name, type, nullable, read_only).
# The identity field is a computed view over publicId.
IDENTITY_FIELD = "id"
IDENTITY_SOURCE_FIELD = "publicId"
IMPLICIT_CODING_FIELDS = (
    (IDENTITY_FIELD, "String", False, True),
    (IDENTITY_SOURCE_FIELD, "String", False, False),
    ("name", "String", False, False),
    ("createdAt", "Date", False, False),
    ("updatedAt", "Date", False, False),
    ("deletedAt", "Date", True, False),
)

# Declaration kinds the directive may be attached to
NOMINAL_KINDS = ("class", "struct", "actor")

# Type name -> value kind used by the default-value initializer.
# Anything missing here is constructed with its no-argument initializer.
VALUE_KINDS = {
    "String": "text",
    "Substring": "text",
    "Int": "integer",
    "Int8": "integer",
    "Int16": "integer",
    "Int32": "integer",
    "Int64": "integer",
    "UInt": "integer",
    "UInt8": "integer",
    "UInt16": "integer",
    "UInt32": "integer",
    "UInt64": "integer",
    "Double": "floating",
    "Float": "floating",
}

# Indentation of generated bodies
INDENT = "    "
