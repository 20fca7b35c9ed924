from semantic_glyph.core.analysis import analyze_note
from semantic_glyph.core.annotations import (
    build_declaration,
    build_glyph_attachment,
    build_reference,
    extract_declarations,
    extract_references,
    parse_annotations,
)
from semantic_glyph.core.counter import DotIdCounter, check_note_density, counter_from_text
from semantic_glyph.core.dotid import decode, dotid_for, encode
from semantic_glyph.core.glyphs import GLYPH_SYMBOLS, get_glyph
from semantic_glyph.core.suggestions import get_suggestions
from semantic_glyph.core.tokenizer import parse, tokenize
from semantic_glyph.core.validator import suggest_fixes, validate

__all__ = [
    "GLYPH_SYMBOLS",
    "DotIdCounter",
    "analyze_note",
    "build_declaration",
    "build_glyph_attachment",
    "build_reference",
    "check_note_density",
    "counter_from_text",
    "decode",
    "dotid_for",
    "encode",
    "extract_declarations",
    "extract_references",
    "get_glyph",
    "get_suggestions",
    "parse",
    "parse_annotations",
    "suggest_fixes",
    "tokenize",
    "validate",
]
