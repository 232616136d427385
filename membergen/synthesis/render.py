"""Join fragments into text ready to splice into a type body."""

from __future__ import annotations

from membergen.config import INDENT
from membergen.synthesis.fragments import Fragment


def render_members(fragments: list[Fragment], indent: str = INDENT) -> str:
    """Return the fragments separated by blank lines, each line indented."""
    lines: list[str] = []
    for i, fragment in enumerate(fragments):
        if i:
            lines.append("")
        lines.extend(indent + line if line else "" for line in fragment.text.splitlines())
    return "\n".join(lines)
