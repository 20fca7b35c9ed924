from types import MappingProxyType

from semantic_glyph.models import CompoundCategory, GlyphCompound

_COMPOUND_MEANINGS: tuple[tuple[str, str, CompoundCategory], ...] = (
    ("⦿⌁", "Intent oriented toward action", CompoundCategory.AGENCY),
    ("⌁⦿", "Purposeful execution", CompoundCategory.AGENCY),
    ("⌁↻", "Practice (repeated execution)", CompoundCategory.AGENCY),
    ("⦿↑", "Abstract purpose / telos", CompoundCategory.AGENCY),
    ("⦿↓", "Concrete aim / specific goal", CompoundCategory.AGENCY),
    ("⦿⚠", "Bounded intent (purpose with limits)", CompoundCategory.AGENCY),
    ("◇→", 'Hypothetical causation ("if A then B, tentatively")', CompoundCategory.EPISTEMIC),
    ("¿→", "Question about causation", CompoundCategory.EPISTEMIC),
    ("◇★", "Anchored hypothesis (tentative but worth keeping)", CompoundCategory.EPISTEMIC),
    ("✓§", "Verified source", CompoundCategory.EPISTEMIC),
    ("⌂→", "Schema produces (organizing idea leads to...)", CompoundCategory.STRUCTURAL),
    ("↑⌂", "Meta-schema / abstract principle", CompoundCategory.STRUCTURAL),
    ("↓■", "Concrete definition", CompoundCategory.STRUCTURAL),
)

COMPOUNDS = MappingProxyType(
    {
        symbols: GlyphCompound(
            symbols=symbols, components=tuple(symbols), meaning=meaning, compound_category=category
        )
        for symbols, meaning, category in _COMPOUND_MEANINGS
    }
)

COMPOUND_SYMBOLS: frozenset[str] = frozenset(COMPOUNDS)

MAX_COMPOUND_LENGTH = max(len(s) for s in COMPOUND_SYMBOLS)


def all_compounds() -> list[GlyphCompound]:
    return list(COMPOUNDS.values())


def get_compound(symbols: str) -> GlyphCompound | None:
    return COMPOUNDS.get(symbols)


def is_compound(symbols: str) -> bool:
    return symbols in COMPOUND_SYMBOLS


def compounds_by_category(category: CompoundCategory | str) -> list[GlyphCompound]:
    resolved = CompoundCategory(category)
    return [c for c in COMPOUNDS.values() if c.compound_category is resolved]


def compound_at(text: str, offset: int) -> GlyphCompound | None:
    """Return the longest known compound starting at ``offset``, trying 3 characters before 2."""
    for length in range(max(MAX_COMPOUND_LENGTH, 3), 1, -1):
        compound = COMPOUNDS.get(text[offset : offset + length])
        if compound is not None:
            return compound
    return None
