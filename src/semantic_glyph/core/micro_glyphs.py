"""Hebrew micro-glyphs.

Micro-glyphs do not assert facts; they tilt the interpretation of the sentence
or paragraph they sit in. One letter per sentence or paragraph.
"""

from types import MappingProxyType

from semantic_glyph.models import MicroGlyph

_MICRO_GLYPH_BIASES: tuple[tuple[str, str, str], ...] = (
    ("א", "First principle", "Source, origin, primordial"),
    ("ב", "Context", 'Container, dwelling, "in"'),
    ("ג", "Movement", "Transition, going, becoming"),
    ("ו", "Connection", 'Linking, "and", continuation'),
    ("ה", "Emphasis", 'Disclosure, "behold", revelation'),
    ("ז", "Distinction", "Cut, separation, differentiation"),
    ("ח", "Enclosure", "Protected interior, fence, boundary"),
    ("י", "Seed", "Essence, point, beginning"),
    ("ל", "Orientation", "Toward, learning, direction"),
    ("מ", "Process", "Flow, transformation, water"),
)

MICRO_GLYPHS = MappingProxyType(
    {letter: MicroGlyph(letter=letter, bias=bias, description=desc) for letter, bias, desc in _MICRO_GLYPH_BIASES}
)

MICRO_GLYPH_LETTERS: frozenset[str] = frozenset(MICRO_GLYPHS)

LRM = "\u200e"


def all_micro_glyphs() -> list[MicroGlyph]:
    return list(MICRO_GLYPHS.values())


def get_micro_glyph(letter: str) -> MicroGlyph | None:
    return MICRO_GLYPHS.get(letter)


def is_micro_glyph(char: str) -> bool:
    return char in MICRO_GLYPH_LETTERS


def wrap_with_lrm(letter: str) -> str:
    """Surround an RTL letter with left-to-right marks so editors keep the cursor order."""
    return f"{LRM}{letter}{LRM}"
