import logging
from collections.abc import Iterable
from pathlib import Path

from semantic_glyph.core.counter import DotIdCounter, check_note_density
from semantic_glyph.core.tokenizer import has_semantic_content, parse
from semantic_glyph.models import DensityReport, NoteReport

logger = logging.getLogger(__name__)

NOTE_SUFFIXES: frozenset[str] = frozenset({".md", ".markdown", ".txt"})


def is_note_file(path: Path) -> bool:
    return path.suffix.lower() in NOTE_SUFFIXES


def collect_note_files(paths: Iterable[str | Path]) -> list[Path]:
    """Expand directories into the note files below them.

    Files named explicitly are kept whatever their suffix.
    """
    files: list[Path] = []
    seen: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if not path.exists():
            raise FileNotFoundError(f"No such file or directory: {path}")
        candidates = sorted(p for p in path.rglob("*") if p.is_file() and is_note_file(p)) if path.is_dir() else [path]
        for candidate in candidates:
            if candidate not in seen:
                seen.add(candidate)
                files.append(candidate)
    return files


def lint_text(text: str, path: str = "<text>") -> NoteReport:
    if not has_semantic_content(text):
        return NoteReport(
            path=path, diagnostics=[], declarations=0, references=0, density=DensityReport(used=0, should_split=False)
        )
    result = parse(text)
    return NoteReport(
        path=path,
        diagnostics=result.diagnostics,
        declarations=len(result.declarations),
        references=len(result.references),
        density=check_note_density(DotIdCounter(result.declarations)),
    )


def lint_file(path: str | Path) -> NoteReport:
    file_path = Path(path)
    text = file_path.read_text(encoding="utf-8", errors="replace")
    report = lint_text(text, str(file_path))
    logger.debug("Linted %s: %d diagnostic(s)", file_path, len(report.diagnostics))
    return report


def lint_paths(paths: Iterable[str | Path]) -> list[NoteReport]:
    files = collect_note_files(paths)
    logger.info("Checking %d note file(s)", len(files))
    return [lint_file(f) for f in files]
