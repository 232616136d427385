"""Declaration synthesis — TypeSchema to generated member fragments."""

from membergen.synthesis.fragments import Fragment, FragmentKind
from membergen.synthesis.render import render_members
from membergen.synthesis.synthesizer import synthesize

__all__ = [
    "Fragment",
    "FragmentKind",
    "render_members",
    "synthesize",
]
