from types import MappingProxyType

from semantic_glyph.models import Glyph, GlyphCategory

CATEGORY_COLORS: dict[GlyphCategory, str] = {
    GlyphCategory.LEVEL: "#6366f1",
    GlyphCategory.MAGNITUDE: "#f59e0b",
    GlyphCategory.EPISTEMIC: "#10b981",
    GlyphCategory.STRUCTURAL: "#8b5cf6",
    GlyphCategory.CAUSAL: "#ef4444",
    GlyphCategory.CENTRALITY: "#3b82f6",
    GlyphCategory.PROVENANCE: "#6b7280",
    GlyphCategory.BOUNDARY: "#f97316",
    GlyphCategory.SALIENCE: "#eab308",
    GlyphCategory.FRAMING: "#14b8a6",
    GlyphCategory.AGENCY: "#ec4899",
}

# (base symbol, base name, base description, alt symbol, alt name, alt description) per category
_GLYPH_PAIRS: dict[GlyphCategory, tuple[str, str, str, str, str, str]] = {
    GlyphCategory.LEVEL: (
        "↑", "Abstraction", "Zoom out, general principle",
        "↓", "Concretization", "Zoom in, specific instance",
    ),
    GlyphCategory.MAGNITUDE: (
        "▲", "Increase", "Intensify, strengthen",
        "▼", "Decrease", "Weaken, attenuate",
    ),
    GlyphCategory.EPISTEMIC: (
        "◇", "Hypothesis", "Tentative answer offered",
        "¿", "Inquiry", "Open question, no answer yet",
    ),
    GlyphCategory.STRUCTURAL: (
        "⊗", "Interaction", "Coupling, co-determining factors",
        "⇄", "Contrast", "Comparison, examine side by side",
    ),
    GlyphCategory.CAUSAL: (
        "→", "Causation", "A influences or produces B",
        "↻", "Feedback", "Effect returns to influence cause",
    ),
    GlyphCategory.CENTRALITY: (
        "⌂", "Core Schema", "Conceptual home, organizing idea",
        "■", "Definition", "This term means this here",
    ),
    GlyphCategory.PROVENANCE: (
        "§", "Sourced", "Comes from elsewhere, inherited",
        "—", "Self-originated", "Reasoned or observed here",
    ),
    GlyphCategory.BOUNDARY: (
        "⚠", "Caution", "Exception, boundary case",
        "ת", "Completion", "Hard limit, end condition, seal",
    ),
    GlyphCategory.SALIENCE: (
        "★", "Anchor", "Worth remembering, retrieval anchor",
        "✓", "Accepted", "High confidence, reliable",
    ),
    GlyphCategory.FRAMING: (
        "←", "Precedent", "Past, historical context",
        "≈", "Analogy", "Understand via similarity",
    ),
    GlyphCategory.AGENCY: (
        "⦿", "Intent", "Directed purpose, aim, telos",
        "⌁", "Execution", "Enacted will, action taken",
    ),
}  # fmt: skip


def _build_glyphs() -> dict[str, Glyph]:
    glyphs: dict[str, Glyph] = {}
    for category, (base, base_name, base_desc, alt, alt_name, alt_desc) in _GLYPH_PAIRS.items():
        color = CATEGORY_COLORS[category]
        glyphs[base] = Glyph(
            symbol=base, name=base_name, category=category, description=base_desc, pair=alt, color=color, is_base=True
        )
        glyphs[alt] = Glyph(
            symbol=alt, name=alt_name, category=category, description=alt_desc, pair=base, color=color, is_base=False
        )
    return glyphs


GLYPHS = MappingProxyType(_build_glyphs())

# Every pattern that anchors on or excludes glyphs is generated from this set.
GLYPH_SYMBOLS: frozenset[str] = frozenset(GLYPHS)


def all_glyphs() -> list[Glyph]:
    return list(GLYPHS.values())


def get_glyph(symbol: str) -> Glyph | None:
    return GLYPHS.get(symbol)


def is_glyph(char: str) -> bool:
    return char in GLYPH_SYMBOLS


def glyphs_by_category(category: GlyphCategory | str) -> list[Glyph]:
    resolved = GlyphCategory(category)
    return [g for g in GLYPHS.values() if g.category is resolved]


def paired_glyph(symbol: str) -> Glyph | None:
    glyph = GLYPHS.get(symbol)
    if glyph is None or glyph.pair is None:
        return None
    return GLYPHS.get(glyph.pair)
