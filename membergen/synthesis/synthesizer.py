"""synthesize(schema) — the full, ordered member set for one type.

The fragments are only valid together: the decoding initializer and the
encode method refer to the ``CodingKeys`` enum, and the equality, hashing
and initializers refer to the required members.  Running twice on the same
schema produces identical text.
"""

from __future__ import annotations

import logging

from membergen.directive.schema import TypeSchema
from membergen.synthesis.coding import render_decoding_init, render_encode
from membergen.synthesis.fragments import Fragment
from membergen.synthesis.initializers import render_empty_init, render_memberwise_init
from membergen.synthesis.members import (
    render_coding_keys,
    render_equality,
    render_hash,
    render_properties_equal,
    render_required_members,
)

logger = logging.getLogger(__name__)


def synthesize(schema: TypeSchema) -> list[Fragment]:
    """Return every generated member of *schema*'s type, in emission order."""
    fragments = render_required_members()
    fragments.extend([
        render_properties_equal(schema),
        render_equality(schema),
        render_hash(schema),
        render_coding_keys(schema),
        render_decoding_init(schema),
        render_encode(schema),
        render_empty_init(schema),
        render_memberwise_init(schema),
    ])
    logger.debug("Synthesized %d fragments for %s", len(fragments), schema.type_name)
    return fragments
