"""Shallow noun and pronoun tracking for DotId suggestions.

No grammar here: capitalisation, quotes and a fixed pronoun list are the only
signals. The output is advisory, so false positives are cheap.
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Literal

from semantic_glyph.core.counter import DotIdCounter
from semantic_glyph.core.rules import COMMON_CAPITALIZED, ORDINAL_PRONOUNS, PRONOUNS
from semantic_glyph.core.text import LineIndex
from semantic_glyph.models import Declaration, DotIdSuggestion, SuggestionSource

NounType = Literal["proper", "quoted", "capitalized"]

PRONOUN_CONFIDENCE = 0.7
REPETITION_CONFIDENCE = 0.6
MIN_REPETITIONS = 3
CANDIDATE_WINDOW = 300
MAX_FALLBACK_CANDIDATES = 3

_PROPER_PHRASE = re.compile(r"\b[A-Z][a-z]+(?: +[A-Z][a-z]+)*\b")
_PHRASE_WORD = re.compile(r"[A-Z][a-z]+")
_QUOTED = re.compile(r'"([^"\n]+)"|“([^”\n]+)”|(?<!\w)\'([^\'\n]+)\'(?!\w)|‘([^’\n]+)’')
_CAPITALIZED = re.compile(r"\b[A-Z][a-zA-Z]*\b")
_WORD = re.compile(r"\S+")
_PUNCTUATION = re.compile(r"[.,;:!?'\"()\[\]{}]")
_ORDINAL_FOLLOWERS = frozenset(p.split()[1] for p in ORDINAL_PRONOUNS)


@dataclass(frozen=True)
class TrackedNoun:
    text: str
    type: NounType
    position: int
    line: int

    @property
    def key(self) -> str:
        return self.text.casefold()


@dataclass(frozen=True)
class TrackedPronoun:
    text: str
    position: int
    line: int
    candidates: list[TrackedNoun] = field(default_factory=list)

    @property
    def is_ambiguous(self) -> bool:
        return len(self.candidates) > 1


def _is_noun_word(word: str) -> bool:
    return len(word) > 2 and word not in COMMON_CAPITALIZED


def _proper_phrases(text: str) -> Iterable[tuple[str, int]]:
    # A sentence-initial "When Socrates" is really "Socrates".
    for found in _PROPER_PHRASE.finditer(text):
        words = list(_PHRASE_WORD.finditer(found.group(0)))
        while words and words[0].group(0) in COMMON_CAPITALIZED:
            words.pop(0)
        if not words:
            continue
        phrase = found.group(0)[words[0].start() :]
        if len(words) == 1 and not _is_noun_word(phrase):
            continue
        yield phrase, found.start() + words[0].start()


def track_nouns(text: str) -> list[TrackedNoun]:
    """Proper phrases, quoted phrases and capitalized words, in order of appearance.

    Each term is kept once, case-insensitively, at its first sighting by the
    highest-priority class.
    """
    index = LineIndex(text)
    nouns: list[TrackedNoun] = []
    seen: set[str] = set()

    def _add(term: str, noun_type: NounType, position: int) -> None:
        key = term.casefold()
        if key in seen:
            return
        seen.add(key)
        nouns.append(TrackedNoun(text=term, type=noun_type, position=position, line=index.line_of(position)))

    for phrase, position in _proper_phrases(text):
        _add(phrase, "proper", position)
    for found in _QUOTED.finditer(text):
        term = next(g for g in found.groups() if g)
        _add(term, "quoted", found.start())
    for found in _CAPITALIZED.finditer(text):
        if _is_noun_word(found.group(0)):
            _add(found.group(0), "capitalized", found.start())

    nouns.sort(key=lambda n: n.position)
    return nouns


def _recent_candidates(candidates: Sequence[TrackedNoun], text: str, position: int) -> list[TrackedNoun]:
    nearby = [c for c in candidates if position - c.position < CANDIDATE_WINDOW]
    paragraph_start = text.rfind("\n\n", 0, position)
    in_paragraph = [c for c in nearby if c.position > paragraph_start]
    return in_paragraph or nearby[-MAX_FALLBACK_CANDIDATES:]


def track_pronouns(
    text: str, nouns: Sequence[TrackedNoun], declared_terms: Iterable[str] = ()
) -> list[TrackedPronoun]:
    """Pronouns that have at least one undeclared noun before them."""
    declared = {t.casefold() for t in declared_terms}
    undeclared = [n for n in nouns if n.key not in declared]
    index = LineIndex(text)

    words = [(m.start(), _PUNCTUATION.sub("", m.group(0)).lower()) for m in _WORD.finditer(text)]
    pronouns: list[TrackedPronoun] = []
    for i, (position, word) in enumerate(words):
        if word == "the" and i + 1 < len(words) and words[i + 1][1] in _ORDINAL_FOLLOWERS:
            pronoun = f"the {words[i + 1][1]}"
        elif word in PRONOUNS:
            pronoun = word
        else:
            continue

        before = [n for n in undeclared if n.position < position]
        candidates = _recent_candidates(before, text, position)
        if candidates:
            pronouns.append(
                TrackedPronoun(text=pronoun, position=position, line=index.line_of(position), candidates=candidates)
            )
    return pronouns


def _count_occurrences(text: str, term: str) -> int:
    pattern = re.compile(rf"(?<!\w){re.escape(term)}(?!\w)", re.IGNORECASE)
    return sum(1 for _ in pattern.finditer(text))


def suggest_from_pronouns(
    text: str,
    existing_declarations: Sequence[Declaration] = (),
    counter: DotIdCounter | None = None,
    nouns: Sequence[TrackedNoun] | None = None,
) -> list[DotIdSuggestion]:
    """Propose a DotId for every undeclared candidate of an ambiguous pronoun.

    Values come from ``counter``, which is updated as suggestions are made;
    pass the same counter to ``suggest_from_repetition`` to avoid collisions.
    """
    if counter is None:
        counter = DotIdCounter(existing_declarations)
    if nouns is None:
        nouns = track_nouns(text)
    declared = {d.term.casefold() for d in existing_declarations}

    suggestions: list[DotIdSuggestion] = []
    for pronoun in track_pronouns(text, nouns, declared):
        if not pronoun.is_ambiguous:
            continue
        for candidate in pronoun.candidates:
            if candidate.key in declared:
                continue
            dotid = counter.next_available()
            if dotid is None:
                return suggestions
            counter.reserve(dotid.value)
            declared.add(candidate.key)
            suggestions.append(
                DotIdSuggestion(
                    term=candidate.text,
                    dotid=dotid,
                    reason=(
                        f'"{pronoun.text}" could refer to multiple things. '
                        f'Adding a DotId to "{candidate.text}" would clarify.'
                    ),
                    confidence=PRONOUN_CONFIDENCE,
                    source=SuggestionSource.PRONOUN_AMBIGUITY,
                )
            )
    return suggestions


def suggest_from_repetition(
    text: str,
    existing_declarations: Sequence[Declaration] = (),
    counter: DotIdCounter | None = None,
    nouns: Sequence[TrackedNoun] | None = None,
    skip_terms: Iterable[str] = (),
) -> list[DotIdSuggestion]:
    """Propose a DotId for each undeclared noun seen at least three times."""
    if counter is None:
        counter = DotIdCounter(existing_declarations)
    if nouns is None:
        nouns = track_nouns(text)
    declared = {d.term.casefold() for d in existing_declarations}
    declared.update(t.casefold() for t in skip_terms)

    suggestions: list[DotIdSuggestion] = []
    for noun in nouns:
        if noun.key in declared:
            continue
        count = _count_occurrences(text, noun.text)
        if count < MIN_REPETITIONS:
            continue
        dotid = counter.next_available()
        if dotid is None:
            break
        counter.reserve(dotid.value)
        declared.add(noun.key)
        suggestions.append(
            DotIdSuggestion(
                term=noun.text,
                dotid=dotid,
                reason=f'"{noun.text}" appears {count} times. A DotId would track references clearly.',
                confidence=REPETITION_CONFIDENCE,
                source=SuggestionSource.REPETITION,
            )
        )
    return suggestions
