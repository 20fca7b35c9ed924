"""Lint notes for DotId consistency and glyph density."""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from semantic_glyph.core.lint import lint_file, lint_paths
from semantic_glyph.models import NoteReport, Severity

console = Console()

_SEVERITY_STYLES = {Severity.ERROR: "red", Severity.WARNING: "yellow", Severity.INFO: "cyan"}


def render_reports(reports: Sequence[NoteReport]) -> None:
    table = Table(show_lines=False)
    for header in ("file", "line", "col", "severity", "code", "message"):
        table.add_column(header)
    for report in reports:
        for diagnostic in report.diagnostics:
            style = _SEVERITY_STYLES[diagnostic.severity]
            table.add_row(
                escape(report.path),
                str(diagnostic.position.line + 1),
                str(diagnostic.position.column + 1),
                f"[{style}]{diagnostic.severity.value}[/{style}]",
                diagnostic.code.value,
                escape(diagnostic.message),
            )
    if table.row_count:
        console.print(table)

    for report in reports:
        if report.density.reason:
            console.print(f"[yellow]{escape(report.path)}:[/yellow] {escape(report.density.reason)}")

    errors = sum(r.error_count for r in reports)
    warnings = sum(r.warning_count for r in reports)
    console.print(f"({len(reports)} file(s), {errors} error(s), {warnings} warning(s))")


async def _watch(paths: Sequence[Path]) -> None:
    from semantic_glyph.core.ports.watcher import FileWatcherPort
    from semantic_glyph.watcher.watchfiles_adapter import WatchfilesWatcher

    async def _on_change(changed: set[Path]) -> None:
        render_reports([lint_file(p) for p in sorted(changed) if p.is_file()])

    watcher: FileWatcherPort = WatchfilesWatcher(paths, _on_change)
    await watcher.start()
    try:
        await watcher.wait()
    finally:
        await watcher.stop()


def check(
    paths: Annotated[list[Path], typer.Argument(help="Note files or directories to check.")],
    strict: Annotated[bool, typer.Option(help="Fail on warnings as well as errors.")] = False,
    watch: Annotated[bool, typer.Option(help="Keep running and re-check notes as they change.")] = False,
) -> None:
    """Check notes for orphaned, duplicate and unused DotIds and overfull lines."""
    try:
        reports = lint_paths(paths)
    except FileNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(2) from None

    render_reports(reports)

    if watch:
        console.print("[green]Watching for changes (Ctrl+C to stop)[/green]")
        with contextlib.suppress(KeyboardInterrupt):
            asyncio.run(_watch(paths))
        return

    errors = sum(r.error_count for r in reports)
    warnings = sum(r.warning_count for r in reports)
    if errors or (strict and warnings):
        raise typer.Exit(1)
