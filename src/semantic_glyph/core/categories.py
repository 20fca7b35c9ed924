from typing import Any

from semantic_glyph.core.glyphs import CATEGORY_COLORS, glyphs_by_category
from semantic_glyph.models import CategoryInfo, GlyphCategory


def _category(
    category: GlyphCategory, name: str, description: str, question: str, base_glyph: str, alt_glyph: str
) -> CategoryInfo:
    return CategoryInfo(
        id=category,
        name=name,
        description=description,
        question=question,
        color=CATEGORY_COLORS[category],
        base_glyph=base_glyph,
        alt_glyph=alt_glyph,
    )


CATEGORIES: tuple[CategoryInfo, ...] = (
    _category(GlyphCategory.LEVEL, "Level / Scope", "How general is the claim?", "How general is this?", "↑", "↓"),
    _category(GlyphCategory.MAGNITUDE, "Magnitude / Intensity", "How strong is it?", "How strong is it?", "▲", "▼"),
    _category(
        GlyphCategory.EPISTEMIC,
        "Epistemic Stance",
        "What is my relationship to truth here?",
        "Am I claiming or asking?",
        "◇",
        "¿",
    ),
    _category(
        GlyphCategory.STRUCTURAL,
        "Structural Relation",
        "How do things relate (statically)?",
        "Is this structure or process?",
        "⊗",
        "⇄",
    ),
    _category(
        GlyphCategory.CAUSAL, "Causal Dynamics", "What happens over time?", "Is this structure or process?", "→", "↻"
    ),
    _category(
        GlyphCategory.CENTRALITY,
        "Centrality & Definition",
        "What kind of thing is this?",
        "Is this core or just a term?",
        "⌂",
        "■",
    ),
    _category(
        GlyphCategory.PROVENANCE, "Provenance", "Where did this come from?", "Where did it come from?", "§", "—"
    ),
    _category(
        GlyphCategory.BOUNDARY, "Boundary / Limits", "Where does this stop applying?", "Where does it stop?", "⚠", "ת"
    ),
    _category(
        GlyphCategory.SALIENCE,
        "Salience & Confidence",
        "What do I keep or trust?",
        "Do I keep or trust this?",
        "★",
        "✓",
    ),
    _category(
        GlyphCategory.FRAMING, "Framing", "How should this be interpreted?", "Is this history or analogy?", "←", "≈"
    ),
    _category(
        GlyphCategory.AGENCY, "Agency", "What is willed and what is done?", "Is this intent or action?", "⦿", "⌁"
    ),
)

_CATEGORIES_BY_ID = {c.id: c for c in CATEGORIES}

# "Before adding a glyph, ask..."
MENTAL_CHECKLIST: tuple[tuple[str, tuple[str, ...], GlyphCategory], ...] = (
    ("How general is this?", ("↑", "↓"), GlyphCategory.LEVEL),
    ("How strong is it?", ("▲", "▼"), GlyphCategory.MAGNITUDE),
    ("Am I claiming or asking?", ("◇", "¿"), GlyphCategory.EPISTEMIC),
    ("Is this structure or process?", ("⊗", "⇄", "→", "↻"), GlyphCategory.STRUCTURAL),
    ("Is this core or just a term?", ("⌂", "■"), GlyphCategory.CENTRALITY),
    ("Where did it come from?", ("§", "—"), GlyphCategory.PROVENANCE),
    ("Where does it stop?", ("⚠", "ת"), GlyphCategory.BOUNDARY),
    ("Do I keep or trust this?", ("★", "✓"), GlyphCategory.SALIENCE),
    ("Is this history or analogy?", ("←", "≈"), GlyphCategory.FRAMING),
    ("Is this intent or action?", ("⦿", "⌁"), GlyphCategory.AGENCY),
)


def normalize_category(category: str) -> GlyphCategory:
    normalized = category.strip().lower()
    try:
        return GlyphCategory(normalized)
    except ValueError:
        supported = sorted(c.value for c in GlyphCategory)
        raise ValueError(f"Unsupported category '{category}'. Supported: {supported}") from None


def get_category(category: GlyphCategory | str) -> CategoryInfo | None:
    try:
        return _CATEGORIES_BY_ID.get(GlyphCategory(category))
    except ValueError:
        return None


def category_with_glyphs(category: GlyphCategory | str) -> dict[str, Any] | None:
    info = get_category(category)
    if info is None:
        return None
    return {**info.model_dump(), "glyphs": [g.model_dump() for g in glyphs_by_category(info.id)]}
