from collections import Counter, defaultdict

from semantic_glyph.core.tokenizer import parse
from semantic_glyph.models import GlyphUsage, NoteAnalysis, NoteObject, ParseResult


def analyze_parse(result: ParseResult) -> NoteAnalysis:
    glyphs_by_line: dict[int, list[GlyphUsage]] = defaultdict(list)
    for usage in result.glyphs:
        glyphs_by_line[usage.position.line].append(usage)

    objects: list[NoteObject] = []
    for declaration in result.declarations:
        references = [r.position for r in result.references if r.dotid.value == declaration.dotid.value]
        lines = sorted({declaration.position.line, *(p.line for p in references)})
        objects.append(
            NoteObject(
                term=declaration.term,
                dotid=declaration.dotid,
                declaration_position=declaration.position,
                references=references,
                associated_glyphs=[usage for line in lines for usage in glyphs_by_line.get(line, ())],
            )
        )

    return NoteAnalysis(
        objects=objects,
        orphaned_references=result.validation.orphaned_references,
        duplicate_declarations=result.validation.duplicate_declarations,
        glyph_usage=dict(Counter(usage.symbol for usage in result.glyphs)),
    )


def analyze_note(text: str) -> NoteAnalysis:
    """Declared objects with their references and the glyphs sharing their lines."""
    return analyze_parse(parse(text))
