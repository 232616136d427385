"""Fragment model and the block layout shared by all member renderers."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from membergen.config import INDENT


class FragmentKind(str, Enum):
    """What a generated declaration is."""

    STORED_PROPERTY = "stored_property"
    COMPUTED_PROPERTY = "computed_property"
    PROPERTIES_EQUAL = "properties_equal"
    EQUALITY = "equality"
    HASH = "hash"
    CODING_KEYS = "coding_keys"
    DECODING_INIT = "decoding_init"
    ENCODE = "encode"
    EMPTY_INIT = "empty_init"
    MEMBERWISE_INIT = "memberwise_init"


class Fragment(BaseModel):
    """One generated member declaration."""

    model_config = ConfigDict(frozen=True)

    kind: FragmentKind
    name: str
    """Member name, e.g. ``publicId``, ``==``, ``init(from:)``."""
    text: str


def block(header: str, body: Iterable[str]) -> str:
    """Lay out ``header {`` / indented body / ``}``; blank lines stay blank."""
    lines = [header]
    lines.extend(INDENT + line if line else "" for line in body)
    lines.append("}")
    return "\n".join(lines)
