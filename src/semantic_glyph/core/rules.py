"""Suggestion data: the context rule table and the lexical word lists.

Pure data. The matching lives in ``suggestions`` and ``nouns`` so the
algorithms can be tested against hand-built tables.
"""

import re
from dataclasses import dataclass

from semantic_glyph.models import SuggestionContext


@dataclass(frozen=True)
class SuggestionRule:
    id: str
    context: SuggestionContext
    patterns: tuple[re.Pattern[str], ...]
    glyphs: tuple[str, ...]
    confidence: float
    reason: str


def _words(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


SUGGESTION_RULES: tuple[SuggestionRule, ...] = (
    SuggestionRule(
        id="causal_because",
        context=SuggestionContext.AFTER_CAUSAL,
        patterns=_words(
            r"\bbecause\b",
            r"\btherefore\b",
            r"\bthus\b",
            r"\bhence\b",
            r"\bconsequently\b",
            r"\bas a result\b",
            r"\bcauses?\b",
            r"\bleads? to\b",
            r"\bresults? in\b",
            r"\bproduces?\b",
            r"\bgenerates?\b",
        ),
        glyphs=("→", "↻"),
        confidence=0.75,
        reason="Causal language suggests causation (→) or feedback (↻) glyphs",
    ),
    SuggestionRule(
        id="comparison_contrast",
        context=SuggestionContext.AFTER_COMPARISON,
        patterns=_words(
            r"\bunlike\b",
            r"\bwhereas\b",
            r"\bin contrast\b",
            r"\bon the other hand\b",
            r"\bcompared to\b",
            r"\bvs\.?(?!\w)",
            r"\bversus\b",
            r"\bdiffers? from\b",
            r"\bdistinct from\b",
        ),
        glyphs=("⇄",),
        confidence=0.8,
        reason="Comparison language suggests contrast (⇄) glyph",
    ),
    SuggestionRule(
        id="analogy",
        context=SuggestionContext.AFTER_COMPARISON,
        patterns=_words(
            r"\bsimilar to\b",
            r"\blike\b",
            r"\banalogous to\b",
            r"\bresembles?\b",
            r"\bparallel to\b",
            r"\bakin to\b",
            r"\bjust as\b",
            r"\bin the same way\b",
        ),
        glyphs=("≈",),
        confidence=0.75,
        reason="Analogy language suggests analogy (≈) glyph",
    ),
    SuggestionRule(
        id="hedge_uncertainty",
        context=SuggestionContext.AFTER_HEDGE,
        patterns=_words(
            r"\bperhaps\b",
            r"\bmaybe\b",
            r"\bmight\b",
            r"\bcould\b",
            r"\bpossibly\b",
            r"\bprobably\b",
            r"\bseems?\b",
            r"\bappears?\b",
            r"\bi think\b",
            r"\bi believe\b",
            r"\btentatively\b",
            r"\bprovisionally\b",
        ),
        glyphs=("◇",),
        confidence=0.7,
        reason="Hedging language suggests hypothesis (◇) glyph",
    ),
    SuggestionRule(
        id="question",
        context=SuggestionContext.QUESTION,
        patterns=_words(r"\?\s*\Z", r"\A\s*(what|why|how|when|where|who|which|whose)\b"),
        glyphs=("¿",),
        confidence=0.85,
        reason="Questions benefit from inquiry (¿) glyph",
    ),
    SuggestionRule(
        id="citation",
        context=SuggestionContext.CITATION,
        patterns=_words(
            r"\baccording to\b",
            r"\b\w+ (says?|said|argues?|argued|claims?|claimed|writes?|wrote)\b",
            r"\bcited\b",
            r"\bquoted?\b",
            r"\bsource[ds]?\b",
            r"\[\d+\]",
            r"\(\d{4}\)",
        ),
        glyphs=("§",),
        confidence=0.8,
        reason="Citation language suggests sourced (§) glyph",
    ),
    SuggestionRule(
        id="example",
        context=SuggestionContext.EXAMPLE,
        patterns=_words(
            r"\bfor (example|instance)\b",
            r"\bsuch as\b",
            r"\be\.g\.",
            r"\bi\.e\.",
            r"\bnamely\b",
            r"\bspecifically\b",
            r"\bin particular\b",
            r"\bconsider\b",
            r"\btake the case of\b",
        ),
        glyphs=("↓",),
        confidence=0.75,
        reason="Example language suggests concretization (↓) glyph",
    ),
    SuggestionRule(
        id="abstraction",
        context=SuggestionContext.SENTENCE_START,
        patterns=_words(
            r"\bin general\b",
            r"\bgenerally\b",
            r"\boverall\b",
            r"\bbroadly\b",
            r"\bthe principle\b",
            r"\bthe pattern\b",
            r"\babstract(ly)?\b",
            r"\bfundamentally\b",
        ),
        glyphs=("↑",),
        confidence=0.7,
        reason="Generalization language suggests abstraction (↑) glyph",
    ),
    SuggestionRule(
        id="warning",
        context=SuggestionContext.WARNING,
        patterns=_words(
            r"\bhowever\b",
            r"\bbut\b",
            r"\bexcept\b",
            r"\bunless\b",
            r"\bcaveat\b",
            r"\bwarning\b",
            r"\bcaution\b",
            r"\bnote that\b",
            r"\bbeware\b",
            r"\bwatch out\b",
            r"\blimitation\b",
        ),
        glyphs=("⚠",),
        confidence=0.75,
        reason="Warning/exception language suggests caution (⚠) glyph",
    ),
    SuggestionRule(
        id="definition",
        context=SuggestionContext.DEFINITION,
        patterns=_words(
            r"\bis defined as\b",
            r"\bmeans\b",
            r"\brefers to\b",
            r"\bdenotes?\b",
            r"\bis (a|an|the)\b",
            r"\bby .+ (I|we) mean\b",
            r'":"',
            r"—",
        ),
        glyphs=("■",),
        confidence=0.7,
        reason="Definition language suggests definition (■) glyph",
    ),
    SuggestionRule(
        id="core_concept",
        context=SuggestionContext.DEFINITION,
        patterns=_words(
            r"\bfundamental\b",
            r"\bcentral\b",
            r"\bcore\b",
            r"\bessential\b",
            r"\bkey (concept|idea|principle)\b",
            r"\bframework\b",
            r"\bparadigm\b",
            r"\bschema\b",
        ),
        glyphs=("⌂",),
        confidence=0.7,
        reason="Core concept language suggests core schema (⌂) glyph",
    ),
    SuggestionRule(
        id="precedent",
        context=SuggestionContext.EXAMPLE,
        patterns=_words(
            r"\bhistorically\b",
            r"\btraditionally\b",
            r"\bpreviously\b",
            r"\bin the past\b",
            r"\boriginally\b",
            r"\bformerly\b",
            r"\bbackground\b",
        ),
        glyphs=("←",),
        confidence=0.7,
        reason="Historical language suggests precedent (←) glyph",
    ),
    SuggestionRule(
        id="increase",
        context=SuggestionContext.UNKNOWN,
        patterns=_words(
            r"\bincreases?\b",
            r"\bstrengthens?\b",
            r"\bintensifies?\b",
            r"\benhances?\b",
            r"\bamplifies?\b",
            r"\bmore\b",
            r"\bgreater\b",
            r"\bhigher\b",
        ),
        glyphs=("▲",),
        confidence=0.6,
        reason="Increase language suggests magnitude increase (▲) glyph",
    ),
    SuggestionRule(
        id="decrease",
        context=SuggestionContext.UNKNOWN,
        patterns=_words(
            r"\bdecreases?\b",
            r"\bweakens?\b",
            r"\bdiminishes?\b",
            r"\breduces?\b",
            r"\battenuates?\b",
            r"\bless\b",
            r"\blower\b",
            r"\bfewer\b",
        ),
        glyphs=("▼",),
        confidence=0.6,
        reason="Decrease language suggests magnitude decrease (▼) glyph",
    ),
    SuggestionRule(
        id="intent",
        context=SuggestionContext.UNKNOWN,
        patterns=_words(
            r"\bintends?\b",
            r"\baims?\b",
            r"\bgoal\b",
            r"\bpurpose\b",
            r"\bobjective\b",
            r"\bin order to\b",
            r"\bso that\b",
            r"\bfor the sake of\b",
            r"\btelos\b",
        ),
        glyphs=("⦿",),
        confidence=0.7,
        reason="Purpose language suggests intent (⦿) glyph",
    ),
    SuggestionRule(
        id="execution",
        context=SuggestionContext.UNKNOWN,
        patterns=_words(
            r"\bexecutes?\b",
            r"\bimplements?\b",
            r"\bperforms?\b",
            r"\bdoes?\b",
            r"\bacts?\b",
            r"\bpractice[ds]?\b",
            r"\bcarries? out\b",
            r"\bapplies?\b",
        ),
        glyphs=("⌁",),
        confidence=0.65,
        reason="Action language suggests execution (⌁) glyph",
    ),
    SuggestionRule(
        id="feedback",
        context=SuggestionContext.AFTER_CAUSAL,
        patterns=_words(
            r"\bfeedback\b",
            r"\bloop\b",
            r"\bcycle\b",
            r"\brecursive\b",
            r"\breinforces?\b",
            r"\bself-\w+ing\b",
            r"\bvicious circle\b",
            r"\bvirtuous cycle\b",
        ),
        glyphs=("↻",),
        confidence=0.8,
        reason="Feedback/loop language suggests feedback (↻) glyph",
    ),
    SuggestionRule(
        id="interaction",
        context=SuggestionContext.UNKNOWN,
        patterns=_words(
            r"\binteracts?\b",
            r"\bcouples?\b",
            r"\bco-\w+\b",
            r"\bmutual(ly)?\b",
            r"\binterdependent\b",
            r"\brelates? to\b",
            r"\bconnects? to\b",
        ),
        glyphs=("⊗",),
        confidence=0.65,
        reason="Interaction language suggests interaction (⊗) glyph",
    ),
    SuggestionRule(
        id="confidence",
        context=SuggestionContext.UNKNOWN,
        patterns=_words(
            r"\bcertainly\b",
            r"\bdefinitely\b",
            r"\bundoubtedly\b",
            r"\bverified\b",
            r"\bconfirmed\b",
            r"\bestablished\b",
            r"\bproven\b",
            r"\breliable\b",
        ),
        glyphs=("✓",),
        confidence=0.7,
        reason="Confidence language suggests accepted (✓) glyph",
    ),
    SuggestionRule(
        id="anchor",
        context=SuggestionContext.UNKNOWN,
        patterns=_words(
            r"\bimportant(ly)?\b",
            r"\bcrucial(ly)?\b",
            r"\bkey\b",
            r"\bremember\b",
            r"\bnote\b",
            r"\bsignificant(ly)?\b",
            r"\bworth noting\b",
        ),
        glyphs=("★",),
        confidence=0.65,
        reason="Importance language suggests anchor (★) glyph",
    ),
)

# Offered at low confidence whenever the cursor opens a sentence. A cursor with
# only whitespace around it is a sentence start too, so no separate rule
# scores that case.
SENTENCE_START_GLYPHS: tuple[str, ...] = ("◇", "¿", "↑", "↓", "⌂", "■", "§")
SENTENCE_START_CONFIDENCE = 0.2

PRONOUNS: frozenset[str] = frozenset(
    {
        "it",
        "this",
        "that",
        "they",
        "them",
        "these",
        "those",
        "its",
        "their",
        "he",
        "she",
        "him",
        "her",
        "his",
        "hers",
        "which",
        "who",
        "whom",
    }
)

# Two-word pronoun phrases; the second word must follow "the".
ORDINAL_PRONOUNS: frozenset[str] = frozenset({"the former", "the latter", "the first", "the second"})

# Capitalized only because they open a sentence.
COMMON_CAPITALIZED: frozenset[str] = frozenset(
    {
        "I",
        "The",
        "A",
        "An",
        "This",
        "That",
        "These",
        "Those",
        "It",
        "He",
        "She",
        "We",
        "They",
        "My",
        "Your",
        "His",
        "Her",
        "Its",
        "Our",
        "Their",
        "And",
        "But",
        "Or",
        "If",
        "When",
        "Where",
        "What",
        "Why",
        "How",
        "Is",
        "Are",
        "Was",
        "Were",
        "Be",
        "Been",
        "Being",
        "Have",
        "Has",
        "Had",
        "Do",
        "Does",
        "Did",
        "Will",
        "Would",
        "Could",
        "Should",
        "May",
        "Might",
        "Must",
        "Can",
    }
)
