import re
from collections.abc import Collection, Sequence

from semantic_glyph.core.categories import normalize_category
from semantic_glyph.core.counter import DotIdCounter
from semantic_glyph.core.glyphs import get_glyph
from semantic_glyph.core.nouns import suggest_from_pronouns, suggest_from_repetition, track_nouns
from semantic_glyph.core.rules import SENTENCE_START_CONFIDENCE, SENTENCE_START_GLYPHS, SUGGESTION_RULES, SuggestionRule
from semantic_glyph.models import (
    Declaration,
    DotIdSuggestion,
    GlyphCategory,
    GlyphSuggestion,
    SuggestionContext,
    SuggestionResult,
)

DEFAULT_WINDOW = 100

_SENTENCE_END_CHARS = frozenset(".!?:;")
_SENTENCE_ENDER = re.compile(r"[.!?]")


def _category_filter(enabled_categories: Collection[GlyphCategory | str] | None) -> set[GlyphCategory] | None:
    if enabled_categories is None:
        return None
    return {normalize_category(c) if isinstance(c, str) else c for c in enabled_categories}


def context_window(text: str, cursor: int | None, window: int = DEFAULT_WINDOW) -> str:
    if cursor is None:
        return text
    return text[max(0, cursor - window) : min(len(text), cursor + window)]


def match_rules(
    text: str,
    cursor: int | None = None,
    rules: Sequence[SuggestionRule] = SUGGESTION_RULES,
    window: int = DEFAULT_WINDOW,
    enabled_categories: Collection[GlyphCategory | str] | None = None,
) -> list[GlyphSuggestion]:
    """Glyphs proposed by the context rules for the text around ``cursor``.

    Each rule fires at most once, on its first matching trigger. A glyph is
    proposed by the first rule that reaches it; the list is sorted by
    confidence, highest first, with rule order breaking ties.
    """
    relevant = context_window(text, cursor, window)
    allowed = _category_filter(enabled_categories)

    suggestions: list[GlyphSuggestion] = []
    seen: set[str] = set()
    for rule in rules:
        if not any(pattern.search(relevant) for pattern in rule.patterns):
            continue
        for symbol in rule.glyphs:
            glyph = get_glyph(symbol)
            if glyph is None or symbol in seen:
                continue
            if allowed is not None and glyph.category not in allowed:
                continue
            seen.add(symbol)
            suggestions.append(
                GlyphSuggestion(glyph=glyph, confidence=rule.confidence, reason=rule.reason, context=rule.context)
            )

    suggestions.sort(key=lambda s: s.confidence, reverse=True)
    return suggestions


def is_at_sentence_start(text: str, cursor: int) -> bool:
    before = text[:cursor].rstrip()
    return not before or before[-1] in _SENTENCE_END_CHARS


def current_sentence(text: str, cursor: int) -> tuple[str, int, int]:
    """The sentence around ``cursor`` as ``(sentence, start, end)``.

    ``start`` and ``end`` bound the untrimmed span; the sentence itself is stripped.
    """
    start, end = 0, len(text)
    for found in _SENTENCE_ENDER.finditer(text):
        if found.start() < cursor:
            start = found.start() + 1
        else:
            end = found.start() + 1
            break
    return text[start:end].strip(), start, end


def _dedupe_dotid_suggestions(suggestions: Sequence[DotIdSuggestion]) -> list[DotIdSuggestion]:
    seen: set[str] = set()
    result: list[DotIdSuggestion] = []
    for suggestion in suggestions:
        key = suggestion.term.casefold()
        if key in seen:
            continue
        seen.add(key)
        result.append(suggestion)
    result.sort(key=lambda s: s.confidence, reverse=True)
    return result


def get_suggestions(
    text: str,
    cursor: int,
    existing_declarations: Sequence[Declaration] = (),
    *,
    enabled_categories: Collection[GlyphCategory | str] | None = None,
    min_confidence: float = 0.0,
) -> SuggestionResult:
    """Glyph and DotId proposals for the document at ``cursor``.

    Nothing here mutates the document. Host preferences come in as arguments:
    ``enabled_categories`` limits the glyph pool and ``min_confidence`` drops
    anything scored below it.
    """
    cursor = max(0, min(cursor, len(text)))
    allowed = _category_filter(enabled_categories)
    glyphs = match_rules(text, cursor, enabled_categories=allowed)

    at_sentence_start = is_at_sentence_start(text, cursor)
    if at_sentence_start:
        suggested = {s.glyph.symbol for s in glyphs}
        for symbol in SENTENCE_START_GLYPHS:
            glyph = get_glyph(symbol)
            if glyph is None or symbol in suggested:
                continue
            if allowed is not None and glyph.category not in allowed:
                continue
            glyphs.append(
                GlyphSuggestion(
                    glyph=glyph,
                    confidence=SENTENCE_START_CONFIDENCE,
                    reason="Available at sentence start",
                    context=SuggestionContext.SENTENCE_START,
                )
            )

    counter = DotIdCounter(existing_declarations)
    nouns = track_nouns(text)
    from_pronouns = suggest_from_pronouns(text, existing_declarations, counter=counter, nouns=nouns)
    from_repetition = suggest_from_repetition(
        text,
        existing_declarations,
        counter=counter,
        nouns=nouns,
        skip_terms=[s.term for s in from_pronouns],
    )
    dotids = _dedupe_dotid_suggestions([*from_pronouns, *from_repetition])

    glyphs.sort(key=lambda s: s.confidence, reverse=True)
    return SuggestionResult(
        glyphs=[s for s in glyphs if s.confidence >= min_confidence],
        dotids=[s for s in dotids if s.confidence >= min_confidence],
        at_sentence_start=at_sentence_start,
    )
