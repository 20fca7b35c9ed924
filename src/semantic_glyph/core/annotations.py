"""Recognition of DotId annotations inside prose.

Four surface patterns, tried in priority order:

1. ``"Some Term"{•••}``  quoted multi-word term
2. ``Term{•••}``         single-word term
3. ``■{•}``              glyph attachment
4. ``{•}``               standalone reference

A candidate whose dots do not form one of the ten signatures is not an
annotation and is skipped without complaint.
"""

import re
from collections.abc import Iterable, Sequence

from semantic_glyph.core.dotid import DOT_CHARS, dotid_from_signature
from semantic_glyph.core.glyphs import GLYPH_SYMBOLS
from semantic_glyph.core.text import LineIndex
from semantic_glyph.models import AnnotationMatch, AttachmentKind, Declaration, DotId, Reference


def _char_class(chars: Iterable[str]) -> str:
    return "".join(re.escape(c) for c in sorted(chars))


_DOTS = f"(?P<dots>[{_char_class(DOT_CHARS)}]+)"
_GLYPHS = _char_class(GLYPH_SYMBOLS)
# Word characters that are not themselves glyphs, so ``ת{•}`` stays a glyph attachment.
# The lookbehind uses the full word class so a term never starts inside a word.
_TERM_CHAR = rf"[^\W{_GLYPHS}]"

_QUOTED_TERM = '"(?P<anchor>[^"]+)"'
_SINGLE_TERM = rf'(?<!["\w])(?P<anchor>{_TERM_CHAR}+)'
_GLYPH_ANCHOR = f"(?P<anchor>[{_GLYPHS}])"
_NO_ANCHOR = rf'(?<!["\w{_GLYPHS}])'

_COMPLETE_PASSES: tuple[tuple[re.Pattern[str], AttachmentKind], ...] = (
    (re.compile(_QUOTED_TERM + r"\{" + _DOTS + r"\}"), AttachmentKind.TERM),
    (re.compile(_SINGLE_TERM + r"\{" + _DOTS + r"\}"), AttachmentKind.TERM),
    (re.compile(_GLYPH_ANCHOR + r"\{" + _DOTS + r"\}"), AttachmentKind.GLYPH),
    (re.compile(_NO_ANCHOR + r"\{" + _DOTS + r"\}"), AttachmentKind.REFERENCE),
)

# Live-typing preview: the closing brace has not been typed yet. A trailing
# carriage return still ends the line but stays outside the match.
_LINE_END = r"(?=\r?$)"
_INCOMPLETE_PASSES: tuple[tuple[re.Pattern[str], AttachmentKind], ...] = (
    (re.compile(_SINGLE_TERM + r"\{" + _DOTS + _LINE_END, re.MULTILINE), AttachmentKind.TERM),
    (re.compile(_QUOTED_TERM + r"\{" + _DOTS + _LINE_END, re.MULTILINE), AttachmentKind.TERM),
    (re.compile(_GLYPH_ANCHOR + r"\{" + _DOTS + _LINE_END, re.MULTILINE), AttachmentKind.GLYPH),
)

_ANY_DOTID = re.compile(r"\{" + _DOTS + r"\}")
_WHOLE_TERM = re.compile(f"{_TERM_CHAR}+")
_LEADING_QUOTED = re.compile('^"([^"]+)"\\{')
_LEADING_TERM = re.compile(f"^({_TERM_CHAR}+)\\{{")


def _by_offset(match: AnnotationMatch) -> int:
    return match.position.offset


def parse_annotations(
    text: str, include_incomplete: bool = False, line_index: LineIndex | None = None
) -> list[AnnotationMatch]:
    """Find every DotId annotation in ``text``.

    Matches never overlap: once a pattern claims a span, later patterns cannot
    use any character inside it. The result is ordered by offset.
    """
    index = line_index or LineIndex(text)
    claimed = bytearray(len(text))
    matches: list[AnnotationMatch] = []

    passes = _COMPLETE_PASSES + _INCOMPLETE_PASSES if include_incomplete else _COMPLETE_PASSES
    for number, (pattern, kind) in enumerate(passes):
        incomplete = number >= len(_COMPLETE_PASSES)
        for found in pattern.finditer(text):
            dotid = dotid_from_signature(found.group("dots"))
            if dotid is None:
                continue
            start, end = found.span()
            if claimed.find(1, start, end) != -1:
                continue
            claimed[start:end] = b"\x01" * (end - start)

            anchor = found.group("anchor") if kind is not AttachmentKind.REFERENCE else None
            matches.append(
                AnnotationMatch(
                    raw=found.group(0),
                    kind=kind,
                    term=anchor if kind is AttachmentKind.TERM else None,
                    glyph=anchor if kind is AttachmentKind.GLYPH else None,
                    dotid=dotid,
                    position=index.position(start, end - start),
                    incomplete=incomplete,
                )
            )

    matches.sort(key=_by_offset)
    return matches


def _to_declaration(match: AnnotationMatch) -> Declaration:
    return Declaration(term=match.label, dotid=match.dotid, position=match.position, kind=match.kind)


def extract_declarations(matches: Sequence[AnnotationMatch]) -> list[Declaration]:
    """The earliest term or glyph attachment for each DotId value."""
    declarations: list[Declaration] = []
    seen: set[int] = set()
    for match in sorted(matches, key=_by_offset):
        if match.kind is AttachmentKind.REFERENCE or match.dotid.value in seen:
            continue
        seen.add(match.dotid.value)
        declarations.append(_to_declaration(match))
    return declarations


def extract_declaration_attempts(matches: Sequence[AnnotationMatch]) -> list[Declaration]:
    """Every attachment that tries to bind a value, ignoring repeats of the same label.

    ``Cat{○} ... Dog{○}`` yields two attempts for 5; ``Cat{○} ... Cat{○}`` yields one.
    """
    attempts: list[Declaration] = []
    seen: set[tuple[int, str]] = set()
    for match in sorted(matches, key=_by_offset):
        if match.kind is AttachmentKind.REFERENCE:
            continue
        key = (match.dotid.value, match.label.casefold())
        if key in seen:
            continue
        seen.add(key)
        attempts.append(_to_declaration(match))
    return attempts


def extract_references(
    matches: Sequence[AnnotationMatch], declarations: Sequence[Declaration] | None = None
) -> list[Reference]:
    """Standalone references plus any attachment that follows its value's declaration."""
    if declarations is None:
        declarations = extract_declarations(matches)
    by_value = {d.dotid.value: d for d in declarations}

    references: list[Reference] = []
    for match in sorted(matches, key=_by_offset):
        declaration = by_value.get(match.dotid.value)
        if match.kind is AttachmentKind.REFERENCE:
            references.append(Reference(dotid=match.dotid, position=match.position, declaration=declaration))
        elif declaration is not None and match.position.offset > declaration.position.offset:
            references.append(Reference(dotid=match.dotid, position=match.position, declaration=declaration))
    return references


def contains_dotids(text: str) -> bool:
    return _ANY_DOTID.search(text) is not None


def extract_term_from_declaration(declaration: str) -> str | None:
    quoted = _LEADING_QUOTED.match(declaration)
    if quoted:
        return quoted.group(1)
    word = _LEADING_TERM.match(declaration)
    return word.group(1) if word else None


def build_declaration(term: str, dotid: DotId) -> str:
    """Format ``term`` with ``dotid``; anything but a single word is quoted."""
    if not term:
        raise ValueError("Term must not be empty.")
    if '"' in term:
        raise ValueError(f"Term cannot contain a double quote: {term!r}")
    if _WHOLE_TERM.fullmatch(term):
        return f"{term}{{{dotid.signature}}}"
    return f'"{term}"{{{dotid.signature}}}'


def build_glyph_attachment(symbol: str, dotid: DotId) -> str:
    if symbol not in GLYPH_SYMBOLS:
        raise ValueError(f"Unknown glyph '{symbol}'.")
    return f"{symbol}{{{dotid.signature}}}"


def build_reference(dotid: DotId) -> str:
    return f"{{{dotid.signature}}}"
