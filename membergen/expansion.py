"""Expansion entry points: directive in, member fragments out.

Usage::

    from membergen import expand_source, render_members

    fragments = expand_source(source_text)
    print(render_members(fragments))

A directive either expands completely or raises; no partial fragment list
is ever returned.
"""

from __future__ import annotations

import logging

from membergen.directive.parser import parse_directive
from membergen.syntax.nodes import Attribute, Declaration
from membergen.syntax.reader import read_source
from membergen.synthesis.fragments import Fragment
from membergen.synthesis.synthesizer import synthesize

logger = logging.getLogger(__name__)


def expand(attribute: Attribute, declaration: Declaration) -> list[Fragment]:
    """Validate the directive and synthesize the members of *declaration*.

    Raises
    ------
    DirectiveError
        Any validation failure; nothing is synthesized.
    """
    schema = parse_directive(attribute, declaration)
    return synthesize(schema)


def expand_source(text: str) -> list[Fragment]:
    """Read the directive and its declaration from *text*, then expand.

    Raises
    ------
    SourceReadError
        The snippet could not be read.
    DirectiveError
        The directive is invalid.
    """
    attribute, declaration = read_source(text)
    logger.debug("Expanding @%s on %s", attribute.name, declaration.name)
    return expand(attribute, declaration)
