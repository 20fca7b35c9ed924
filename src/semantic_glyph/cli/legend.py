"""Reference tables for the glyph vocabulary."""

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from semantic_glyph.core.categories import CATEGORIES, normalize_category
from semantic_glyph.core.compounds import all_compounds
from semantic_glyph.core.dotid import DOT_IDS, to_nikkud_size
from semantic_glyph.core.glyphs import glyphs_by_category
from semantic_glyph.core.micro_glyphs import all_micro_glyphs

legend_app = typer.Typer(help="Print the glyph, compound, micro-glyph and DotId tables.")
console = Console()


@legend_app.command("glyphs")
def glyphs(
    category: Annotated[str | None, typer.Option(help="Only show one category.")] = None,
) -> None:
    """List glyphs grouped by category."""
    try:
        wanted = normalize_category(category) if category else None
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(2) from None

    table = Table(show_lines=False)
    for header in ("category", "question", "glyph", "name", "description"):
        table.add_column(header)
    for info in CATEGORIES:
        if wanted is not None and info.id is not wanted:
            continue
        for glyph in glyphs_by_category(info.id):
            table.add_row(info.name, info.question, f"[{info.color}]{glyph.symbol}[/]", glyph.name, glyph.description)
    console.print(table)


@legend_app.command("compounds")
def compounds() -> None:
    """List glyph compounds."""
    table = Table(show_lines=False)
    for header in ("symbols", "category", "meaning"):
        table.add_column(header)
    for compound in all_compounds():
        table.add_row(compound.symbols, compound.compound_category.value, compound.meaning)
    console.print(table)


@legend_app.command("micro")
def micro() -> None:
    """List Hebrew micro-glyphs."""
    table = Table(show_lines=False)
    for header in ("letter", "bias", "description"):
        table.add_column(header)
    for micro_glyph in all_micro_glyphs():
        table.add_row(micro_glyph.letter, micro_glyph.bias, micro_glyph.description)
    console.print(table)


@legend_app.command("dotids")
def dotids() -> None:
    """List the ten DotIds."""
    table = Table(show_lines=False)
    for header in ("value", "signature", "small", "cluster"):
        table.add_column(header)
    for dotid in DOT_IDS:
        cluster = f"{''.join(dotid.cluster.top)} / {dotid.cluster.bottom}" if dotid.cluster else ""
        table.add_row(str(dotid.value), dotid.signature, to_nikkud_size(dotid.signature), cluster)
    console.print(table)
