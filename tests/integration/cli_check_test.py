"""End-to-end tests for ``semantic-glyph check`` against notes on disk."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from semantic_glyph.cli.app import app

runner = CliRunner()


@pytest.fixture
def notes(tmp_path: Path) -> Path:
    (tmp_path / "clean.md").write_text("→ Socrates{•} taught. Later {•} died.\n", encoding="utf-8")
    (tmp_path / "unused.md").write_text("Plato{•} wrote dialogues.\n", encoding="utf-8")
    (tmp_path / "orphan.txt").write_text("As {••} said before.\n", encoding="utf-8")
    (tmp_path / "ignored.py").write_text("x = '{••}'\n", encoding="utf-8")
    return tmp_path


def test_clean_note_passes(notes: Path, clean_env: pytest.MonkeyPatch) -> None:
    result = runner.invoke(app, ["check", str(notes / "clean.md")])
    assert result.exit_code == 0
    assert "(1 file(s), 0 error(s), 0 warning(s))" in result.output


def test_warnings_pass_unless_strict(notes: Path, clean_env: pytest.MonkeyPatch) -> None:
    target = str(notes / "unused.md")
    assert runner.invoke(app, ["check", target]).exit_code == 0
    assert runner.invoke(app, ["check", "--strict", target]).exit_code == 1


def test_orphan_fails(notes: Path, clean_env: pytest.MonkeyPatch) -> None:
    result = runner.invoke(app, ["check", str(notes / "orphan.txt")])
    assert result.exit_code == 1
    assert "(1 file(s), 1 error(s), 0 warning(s))" in result.output


def test_directory_checks_note_files_only(notes: Path, clean_env: pytest.MonkeyPatch) -> None:
    result = runner.invoke(app, ["check", str(notes)])
    assert result.exit_code == 1
    assert "(3 file(s), 1 error(s), 1 warning(s))" in result.output


def test_missing_path_is_a_usage_error(notes: Path, clean_env: pytest.MonkeyPatch) -> None:
    result = runner.invoke(app, ["check", str(notes / "missing.md")])
    assert result.exit_code == 2


def test_dense_note_mentions_splitting(tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
    signatures = ["•", "••", "•••", "•○", "○", "○•", "○••"]
    text = "\n".join(f"T{i}{{{sig}}} then {{{sig}}}" for i, sig in enumerate(signatures, start=1))
    note = tmp_path / "dense.md"
    note.write_text(text, encoding="utf-8")
    result = runner.invoke(app, ["check", str(note)])
    assert result.exit_code == 0
    assert "7 DotIds in use" in " ".join(result.output.split())
