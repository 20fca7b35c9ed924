"""Tests for context-rule glyph suggestions and the combined engine."""

from __future__ import annotations

import re
from collections.abc import Callable

from semantic_glyph.core.rules import SENTENCE_START_GLYPHS, SUGGESTION_RULES, SuggestionRule
from semantic_glyph.core.suggestions import current_sentence, get_suggestions, is_at_sentence_start, match_rules
from semantic_glyph.core.tokenizer import parse
from semantic_glyph.models import Declaration, GlyphCategory, SuggestionContext, SuggestionSource


class TestMatchRules:
    def test_because_suggests_causation(self) -> None:
        suggestions = match_rules("This happens because of pressure", cursor=20)
        arrow = [s for s in suggestions if s.glyph.symbol == "→"]
        assert len(arrow) == 1
        assert arrow[0].confidence >= 0.7
        assert arrow[0].context is SuggestionContext.AFTER_CAUSAL

    def test_window_clips_distant_text(self) -> None:
        text = "because " + "x" * 300
        assert match_rules(text, cursor=len(text)) == []
        assert any(s.glyph.symbol == "→" for s in match_rules(text))

    def test_glyph_proposed_once_by_first_rule(self) -> None:
        suggestions = match_rules("because of the feedback loop")
        symbols = [s.glyph.symbol for s in suggestions]
        assert len(symbols) == len(set(symbols))
        feedback = next(s for s in suggestions if s.glyph.symbol == "↻")
        assert feedback.confidence == 0.75

    def test_sorted_by_confidence(self) -> None:
        suggestions = match_rules("Unlike Hume, perhaps this increases because of it?")
        confidences = [s.confidence for s in suggestions]
        assert confidences == sorted(confidences, reverse=True)
        assert suggestions[0].glyph.symbol == "¿"

    def test_enabled_categories(self) -> None:
        suggestions = match_rules("because it increases", enabled_categories=["magnitude"])
        assert [s.glyph.symbol for s in suggestions] == ["▲"]

    def test_custom_rule_table(self) -> None:
        rule = SuggestionRule(
            id="test",
            context=SuggestionContext.UNKNOWN,
            patterns=(re.compile(r"\bzebra\b"),),
            glyphs=("★",),
            confidence=0.9,
            reason="zebras are memorable",
        )
        suggestions = match_rules("a zebra", rules=[rule])
        assert [(s.glyph.symbol, s.reason) for s in suggestions] == [("★", "zebras are memorable")]

    def test_every_rule_glyph_exists(self) -> None:
        from semantic_glyph.core.glyphs import GLYPH_SYMBOLS

        for rule in SUGGESTION_RULES:
            assert set(rule.glyphs) <= GLYPH_SYMBOLS
            assert 0.0 <= rule.confidence <= 1.0


class TestSentencePosition:
    def test_sentence_start(self) -> None:
        assert is_at_sentence_start("", 0)
        assert is_at_sentence_start("Hello. ", 7)
        assert is_at_sentence_start("Title:\n", 7)
        assert not is_at_sentence_start("Hello wor", 9)

    def test_current_sentence(self) -> None:
        assert current_sentence("One. Two three. Four", 8) == ("Two three.", 4, 15)
        assert current_sentence("No enders here", 3) == ("No enders here", 0, 14)


class TestGetSuggestions:
    def test_sentence_start_pool(self) -> None:
        result = get_suggestions("Done. ", 6)
        assert result.at_sentence_start
        pool = [s for s in result.glyphs if s.context is SuggestionContext.SENTENCE_START]
        assert {s.glyph.symbol for s in pool} == set(SENTENCE_START_GLYPHS)
        assert all(s.confidence == 0.2 for s in pool)

    def test_whitespace_only_cursor_gets_the_pool(self) -> None:
        result = get_suggestions("  \n  ", 3)
        assert result.at_sentence_start
        pool = {s.glyph.symbol for s in result.glyphs if s.context is SuggestionContext.SENTENCE_START}
        assert pool == set(SENTENCE_START_GLYPHS)

    def test_pool_skips_rule_suggestions(self) -> None:
        result = get_suggestions("Perhaps. ", 9)
        hypothesis = [s for s in result.glyphs if s.glyph.symbol == "◇"]
        assert len(hypothesis) == 1
        assert hypothesis[0].confidence == 0.7

    def test_min_confidence_drops_low_scores(self) -> None:
        result = get_suggestions("Done. ", 6, min_confidence=0.5)
        assert result.glyphs == []

    def test_enabled_categories_limit_pool(self) -> None:
        result = get_suggestions("Done. ", 6, enabled_categories=[GlyphCategory.PROVENANCE])
        assert [s.glyph.symbol for s in result.glyphs] == ["§"]

    def test_repeated_name_gets_a_dotid(self) -> None:
        text = "Socrates taught. Socrates asked. Socrates died."
        result = get_suggestions(text, 0)
        socrates = [s for s in result.dotids if s.term == "Socrates"]
        assert len(socrates) == 1
        assert socrates[0].source is SuggestionSource.REPETITION
        assert socrates[0].dotid.value == 1

    def test_declared_name_is_left_alone(self) -> None:
        text = "Socrates{•} taught. Socrates asked. Socrates died."
        result = get_suggestions(text, len(text), parse(text).declarations)
        assert result.dotids == []

    def test_merged_dotids_never_collide(self, make_declaration: Callable[..., Declaration]) -> None:
        text = "Plato met Aristotle. He argued with him. Plato, Plato, Aristotle, Athens, Athens, Athens."
        result = get_suggestions(text, len(text), [make_declaration("Zeno", 1)])
        values = [s.dotid.value for s in result.dotids]
        assert len(values) == len(set(values))
        assert 1 not in values
        terms = [s.term.casefold() for s in result.dotids]
        assert len(terms) == len(set(terms))
        assert {"plato", "aristotle", "athens"} <= set(terms)
        confidences = [s.confidence for s in result.dotids]
        assert confidences == sorted(confidences, reverse=True)

    def test_cursor_is_clamped(self) -> None:
        result = get_suggestions("because", 500)
        assert any(s.glyph.symbol == "→" for s in result.glyphs)
