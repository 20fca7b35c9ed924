import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from semantic_glyph.cli.check import check
from semantic_glyph.cli.inspection import inspect_app
from semantic_glyph.cli.legend import legend_app
from semantic_glyph.cli.serve import serve_app
from semantic_glyph.config import get_settings

app = typer.Typer(
    name="semantic-glyph",
    help="Semantic Glyph CLI: check, inspect and explain glyph-annotated notes.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console(stderr=True)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output.")] = False,
) -> None:
    """Set up logging before any command runs."""
    try:
        level = logging.DEBUG if verbose else get_settings().log_level_number
    except ValueError as exc:
        console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(2) from None
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


app.command("check")(check)
app.add_typer(inspect_app, name="inspect")
app.add_typer(legend_app, name="legend")
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
