from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from semantic_glyph.config import get_settings
from semantic_glyph.core.analysis import analyze_note
from semantic_glyph.core.suggestions import get_suggestions
from semantic_glyph.core.tokenizer import parse, tokenize
from semantic_glyph.models import Declaration, Glyph, GlyphCompound, MicroGlyph, Reference, Token

inspect_app = typer.Typer(help="Show how a note is read.")
console = Console()

FileArgument = Annotated[Path | None, typer.Argument(help="Note file to read.")]
TextOption = Annotated[str | None, typer.Option("--text", "-t", help="Inline text to read instead of a file.")]


def _render_table(headers: Sequence[str], rows: Sequence[tuple[Any, ...]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(escape(str(v)) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def _read_input(file: Path | None, text: str | None) -> str:
    if text is not None:
        return text
    if file is None:
        console.print("[red]Pass a note file or --text.[/red]")
        raise typer.Exit(2)
    if not file.is_file():
        console.print(f"[red]No such file: {escape(str(file))}[/red]")
        raise typer.Exit(2)
    return file.read_text(encoding="utf-8", errors="replace")


def _describe(token: Token) -> str:
    value = token.value
    if isinstance(value, Glyph):
        return f"{value.name} ({value.category.value})"
    if isinstance(value, GlyphCompound):
        return value.meaning
    if isinstance(value, MicroGlyph):
        return value.bias
    if isinstance(value, Declaration):
        return f"{value.term} = {value.dotid.value}"
    if isinstance(value, Reference):
        return f"-> {value.declaration.term}" if value.declaration else "undeclared"
    return ""


@inspect_app.command("tokens")
def tokens(
    file: FileArgument = None,
    text: TextOption = None,
    include_text: Annotated[bool, typer.Option("--include-text", help="Show plain text runs too.")] = False,
) -> None:
    """List the semantic tokens of a note."""
    content = _read_input(file, text)
    rows = [
        (t.position.line + 1, t.position.column + 1, t.type.value, t.raw, _describe(t))
        for t in tokenize(content, include_text=include_text)
    ]
    _render_table(["line", "col", "type", "raw", "meaning"], rows)


@inspect_app.command("objects")
def objects(file: FileArgument = None, text: TextOption = None) -> None:
    """List declared objects with their references and nearby glyphs."""
    content = _read_input(file, text)
    analysis = analyze_note(content)
    rows = [
        (
            obj.dotid.signature,
            obj.term,
            len(obj.references) or "unused",
            obj.declaration_position.line + 1,
            " ".join(g.symbol for g in obj.associated_glyphs),
        )
        for obj in analysis.objects
    ]
    _render_table(["dotid", "term", "refs", "line", "glyphs"], rows)

    for ref in analysis.orphaned_references:
        console.print(f"[red]Orphaned reference {{{ref.dotid.signature}}} at line {ref.position.line + 1}[/red]")
    for dup in analysis.duplicate_declarations:
        console.print(f"[red]Duplicate declaration of {escape(dup.term)} at line {dup.position.line + 1}[/red]")


@inspect_app.command("suggest")
def suggest(
    file: FileArgument = None,
    text: TextOption = None,
    cursor: Annotated[int | None, typer.Option(help="Cursor offset; defaults to the end of the text.")] = None,
    min_confidence: Annotated[
        float | None, typer.Option(help="Hide suggestions below this confidence; defaults to the configured threshold.")
    ] = None,
) -> None:
    """Suggest glyphs and DotIds at a cursor position."""
    content = _read_input(file, text)
    settings = get_settings()
    result = get_suggestions(
        content,
        len(content) if cursor is None else cursor,
        parse(content).declarations,
        enabled_categories=settings.enabled_categories,
        min_confidence=settings.suggestion_threshold if min_confidence is None else min_confidence,
    )

    if result.at_sentence_start:
        console.print("[cyan]Cursor is at a sentence start.[/cyan]")
    _render_table(
        ["glyph", "name", "confidence", "reason"],
        [(s.glyph.symbol, s.glyph.name, f"{s.confidence:.2f}", s.reason) for s in result.glyphs],
    )
    _render_table(
        ["term", "dotid", "confidence", "reason"],
        [(s.term, s.dotid.signature, f"{s.confidence:.2f}", s.reason) for s in result.dotids],
    )
