import logging
from collections import Counter

from semantic_glyph.core.annotations import (
    contains_dotids,
    extract_declaration_attempts,
    extract_declarations,
    extract_references,
    parse_annotations,
)
from semantic_glyph.core.compounds import compound_at
from semantic_glyph.core.glyphs import GLYPH_SYMBOLS, get_glyph
from semantic_glyph.core.micro_glyphs import MICRO_GLYPH_LETTERS, get_micro_glyph
from semantic_glyph.core.text import LineIndex
from semantic_glyph.core.validator import validate, validate_glyph_limit
from semantic_glyph.models import (
    AnnotationMatch,
    Declaration,
    Glyph,
    GlyphCompound,
    GlyphUsage,
    ParseResult,
    Reference,
    Token,
    TokenType,
)

logger = logging.getLogger(__name__)

_SEMANTIC_CHARS = GLYPH_SYMBOLS | MICRO_GLYPH_LETTERS


def _dotid_tokens(matches: list[AnnotationMatch], declarations: list[Declaration]) -> list[Token]:
    by_value = {d.dotid.value: d for d in declarations}
    tokens: list[Token] = []
    for match in matches:
        declaration = by_value.get(match.dotid.value)
        if declaration is not None and declaration.position.offset == match.position.offset:
            tokens.append(
                Token(type=TokenType.DOTID_DECLARATION, raw=match.raw, position=match.position, value=declaration)
            )
        else:
            reference = Reference(dotid=match.dotid, position=match.position, declaration=declaration)
            tokens.append(Token(type=TokenType.DOTID_REFERENCE, raw=match.raw, position=match.position, value=reference))
    return tokens


def _tokenize(
    text: str,
    matches: list[AnnotationMatch],
    declarations: list[Declaration],
    index: LineIndex,
    include_text: bool,
) -> list[Token]:
    tokens = _dotid_tokens(matches, declarations)

    claimed = bytearray(len(text))
    for match in matches:
        claimed[match.position.offset : match.position.end] = b"\x01" * match.position.length

    text_start: int | None = None

    def _flush_text(end: int) -> None:
        nonlocal text_start
        if include_text and text_start is not None and end > text_start:
            tokens.append(
                Token(type=TokenType.TEXT, raw=text[text_start:end], position=index.position(text_start, end - text_start))
            )
        text_start = None

    i = 0
    while i < len(text):
        if claimed[i]:
            _flush_text(i)
            i += 1
            continue

        compound = compound_at(text, i)
        if compound is not None and claimed.find(1, i, i + len(compound.symbols)) == -1:
            _flush_text(i)
            length = len(compound.symbols)
            tokens.append(
                Token(type=TokenType.COMPOUND, raw=compound.symbols, position=index.position(i, length), value=compound)
            )
            i += length
            continue

        char = text[i]
        glyph = get_glyph(char)
        if glyph is not None:
            _flush_text(i)
            tokens.append(Token(type=TokenType.GLYPH, raw=char, position=index.position(i, 1), value=glyph))
        else:
            micro = get_micro_glyph(char)
            if micro is not None:
                _flush_text(i)
                tokens.append(Token(type=TokenType.MICRO_GLYPH, raw=char, position=index.position(i, 1), value=micro))
            elif text_start is None:
                text_start = i
        i += 1
    _flush_text(len(text))

    tokens.sort(key=lambda t: t.position.offset)
    return tokens


def tokenize(text: str, include_text: bool = False) -> list[Token]:
    """Split ``text`` into semantic tokens ordered by offset.

    Plain prose is dropped unless ``include_text`` is set, in which case each run
    of it becomes a single ``text`` token.
    """
    index = LineIndex(text)
    matches = parse_annotations(text, line_index=index)
    return _tokenize(text, matches, extract_declarations(matches), index, include_text)


def parse(text: str) -> ParseResult:
    index = LineIndex(text)
    matches = parse_annotations(text, line_index=index)
    declarations = extract_declarations(matches)
    references = extract_references(matches, declarations)
    tokens = _tokenize(text, matches, declarations, index, include_text=False)

    validation = validate(extract_declaration_attempts(matches), references)

    glyphs = [
        GlyphUsage(symbol=t.raw, glyph=t.value, position=t.position)
        for t in tokens
        if isinstance(t.value, (Glyph, GlyphCompound))
    ]
    per_line = Counter(g.position.line for g in glyphs)
    diagnostics = [*validation.diagnostics, *validate_glyph_limit(per_line, index)]
    diagnostics.sort(key=lambda d: d.position.offset)

    logger.debug(
        "Parsed %d token(s), %d declaration(s), %d reference(s)", len(tokens), len(declarations), len(references)
    )
    return ParseResult(
        tokens=tokens,
        matches=matches,
        declarations=declarations,
        references=references,
        glyphs=glyphs,
        validation=validation,
        diagnostics=diagnostics,
    )


def has_semantic_content(text: str) -> bool:
    """Cheap check before a full parse."""
    return contains_dotids(text) or any(ch in _SEMANTIC_CHARS for ch in text)
