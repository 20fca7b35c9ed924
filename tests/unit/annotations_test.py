"""Tests for DotId annotation recognition and the text builders."""

from __future__ import annotations

import pytest

from semantic_glyph.core.annotations import (
    build_declaration,
    build_glyph_attachment,
    build_reference,
    contains_dotids,
    extract_declaration_attempts,
    extract_declarations,
    extract_references,
    extract_term_from_declaration,
    parse_annotations,
)
from semantic_glyph.core.dotid import dotid_for
from semantic_glyph.models import AttachmentKind, DotId


def _dotid(value: int) -> DotId:
    dotid = dotid_for(value)
    assert dotid is not None
    return dotid


class TestPatterns:
    def test_all_four_forms(self) -> None:
        text = '"Free Will"{•} and Socrates{••} see ↑{•••} then {•}'
        matches = parse_annotations(text)
        assert [m.kind for m in matches] == [
            AttachmentKind.TERM,
            AttachmentKind.TERM,
            AttachmentKind.GLYPH,
            AttachmentKind.REFERENCE,
        ]
        assert matches[0].term == "Free Will"
        assert matches[1].term == "Socrates"
        assert matches[2].glyph == "↑"
        assert matches[2].term is None
        assert [m.dotid.value for m in matches] == [1, 2, 3, 1]

    def test_invalid_signature_is_skipped(self) -> None:
        assert parse_annotations("Cat{•••••} and {○○}") == []

    def test_quote_before_brace_is_not_a_reference(self) -> None:
        assert parse_annotations('"{•}"') == []

    def test_glyph_anchor_wins_over_reference(self) -> None:
        matches = parse_annotations("x→{○}")
        assert len(matches) == 1
        assert matches[0].kind is AttachmentKind.GLYPH
        assert matches[0].raw == "→{○}"

    def test_hebrew_boundary_glyph_is_an_anchor(self) -> None:
        matches = parse_annotations("ת{•}")
        assert len(matches) == 1
        assert matches[0].kind is AttachmentKind.GLYPH

    def test_term_never_starts_inside_a_word(self) -> None:
        matches = parse_annotations("תורה{•}")
        assert all(m.position.offset != 1 for m in matches)
        assert [m.term for m in matches if m.kind is AttachmentKind.TERM] == []

    def test_term_after_glyph_boundary_outside_a_word(self) -> None:
        matches = parse_annotations("→Socrates{•}")
        assert [(m.kind, m.term) for m in matches] == [(AttachmentKind.TERM, "Socrates")]

    def test_underscore_terms(self) -> None:
        matches = parse_annotations("free_will{••}")
        assert matches[0].term == "free_will"

    def test_positions(self) -> None:
        matches = parse_annotations("line one\nSocrates{•}")
        position = matches[0].position
        assert (position.line, position.column, position.offset, position.length) == (1, 0, 9, 11)

    def test_matches_are_sorted_and_disjoint(self) -> None:
        text = '{•} "A b"{••} ⌂{•} C{○} {••}{○} "x"{⦿} D{•○}{•○}'
        matches = parse_annotations(text)
        offsets = [m.position.offset for m in matches]
        assert offsets == sorted(offsets)
        for a, b in zip(matches, matches[1:], strict=False):
            assert a.position.end <= b.position.offset
        for m in matches:
            assert text[m.position.offset : m.position.end] == m.raw


class TestIncomplete:
    def test_excluded_by_default(self) -> None:
        assert parse_annotations("Socrates{••") == []

    def test_unfinished_term_at_line_end(self) -> None:
        matches = parse_annotations("Plato{•} and Socrates{••", include_incomplete=True)
        assert [(m.term, m.incomplete) for m in matches] == [("Plato", False), ("Socrates", True)]
        assert matches[1].dotid.value == 2

    def test_unfinished_term_before_crlf(self) -> None:
        matches = parse_annotations("Socrates{••\r\nnext", include_incomplete=True)
        assert len(matches) == 1
        assert matches[0].term == "Socrates"
        assert matches[0].incomplete
        assert matches[0].raw == "Socrates{••"
        assert matches[0].position.length == len("Socrates{••")

    def test_unfinished_glyph_on_earlier_line(self) -> None:
        matches = parse_annotations("→{○\nnext line", include_incomplete=True)
        assert len(matches) == 1
        assert matches[0].kind is AttachmentKind.GLYPH
        assert matches[0].incomplete


class TestExtraction:
    def test_declarations_and_references(self) -> None:
        matches = parse_annotations("Cat{○} then Dog{○} and {○}")
        declarations = extract_declarations(matches)
        assert [d.term for d in declarations] == ["Cat"]

        references = extract_references(matches, declarations)
        assert len(references) == 2
        assert all(r.declaration is not None and r.declaration.term == "Cat" for r in references)

    def test_one_declaration_per_value(self) -> None:
        matches = parse_annotations("A{•} B{••} C{•} D{••} E{○}")
        values = [d.dotid.value for d in extract_declarations(matches)]
        assert values == [1, 2, 5]
        assert len(values) == len(set(values))

    def test_reference_without_declaration_is_unlinked(self) -> None:
        references = extract_references(parse_annotations("only {•••}"))
        assert len(references) == 1
        assert references[0].declaration is None

    def test_attempts_keep_distinct_labels(self) -> None:
        attempts = extract_declaration_attempts(parse_annotations("Cat{○} Dog{○} cat{○}"))
        assert [a.term for a in attempts] == ["Cat", "Dog"]


class TestBuilders:
    def test_single_word_round_trip(self) -> None:
        text = build_declaration("Socrates", _dotid(1))
        assert text == "Socrates{•}"
        matches = parse_annotations(text)
        assert len(matches) == 1
        assert matches[0].term == "Socrates"
        assert matches[0].dotid.value == 1

    def test_multi_word_is_quoted(self) -> None:
        text = build_declaration("Free Will", _dotid(3))
        assert text == '"Free Will"{•••}'
        matches = parse_annotations(text)
        assert matches[0].term == "Free Will"
        assert matches[0].dotid.value == 3

    @pytest.mark.parametrize("term", ["", 'say "hi"'])
    def test_rejects_unbuildable_terms(self, term: str) -> None:
        with pytest.raises(ValueError):
            build_declaration(term, _dotid(1))

    def test_glyph_attachment(self) -> None:
        assert build_glyph_attachment("→", _dotid(2)) == "→{••}"
        with pytest.raises(ValueError, match="Unknown glyph"):
            build_glyph_attachment("x", _dotid(2))

    def test_reference(self) -> None:
        assert build_reference(_dotid(10)) == "{⦿}"

    def test_extract_term_from_declaration(self) -> None:
        assert extract_term_from_declaration('"Free Will"{•}') == "Free Will"
        assert extract_term_from_declaration("Socrates{•}") == "Socrates"
        assert extract_term_from_declaration("{•}") is None

    def test_contains_dotids(self) -> None:
        assert contains_dotids("see {•○}")
        assert not contains_dotids("see {x}")
