"""Tests for the CLI surface: help flags, legend tables and inspection commands."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from semantic_glyph.cli.app import app

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["check"],
        ["inspect"],
        ["inspect", "tokens"],
        ["legend"],
        ["serve"],
    ],
    ids=["root", "check", "inspect", "inspect-tokens", "legend", "serve"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_legend_dotids_lists_all_ten(clean_env: pytest.MonkeyPatch) -> None:
    result = runner.invoke(app, ["legend", "dotids"])
    assert result.exit_code == 0
    assert "⦿" in result.output
    assert "•○" in result.output


def test_legend_glyphs_filters_by_category(clean_env: pytest.MonkeyPatch) -> None:
    result = runner.invoke(app, ["legend", "glyphs", "--category", "causal"])
    assert result.exit_code == 0
    assert "→" in result.output
    assert "▲" not in result.output


def test_legend_glyphs_rejects_unknown_category(clean_env: pytest.MonkeyPatch) -> None:
    result = runner.invoke(app, ["legend", "glyphs", "--category", "vibes"])
    assert result.exit_code == 2


def test_inspect_tokens_from_inline_text(clean_env: pytest.MonkeyPatch) -> None:
    result = runner.invoke(app, ["inspect", "tokens", "--text", "→ Socrates{•}"])
    assert result.exit_code == 0
    assert "dotid_declaration" in result.output
    assert "(2 rows)" in result.output


def test_inspect_tokens_without_input(clean_env: pytest.MonkeyPatch) -> None:
    result = runner.invoke(app, ["inspect", "tokens"])
    assert result.exit_code == 2


def test_inspect_tokens_missing_file(clean_env: pytest.MonkeyPatch) -> None:
    result = runner.invoke(app, ["inspect", "tokens", "does-not-exist.md"])
    assert result.exit_code == 2


def test_inspect_objects_reports_orphans(clean_env: pytest.MonkeyPatch) -> None:
    result = runner.invoke(app, ["inspect", "objects", "--text", "Socrates{•} taught. {••}"])
    assert result.exit_code == 0
    assert "Orphaned reference" in result.output


def test_inspect_suggest_uses_explicit_threshold(clean_env: pytest.MonkeyPatch) -> None:
    result = runner.invoke(app, ["inspect", "suggest", "--text", "because", "--min-confidence", "0"])
    assert result.exit_code == 0
    assert "→" in result.output


def test_invalid_configuration_exits_with_usage_error(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("SEMANTIC_GLYPH_LOG_LEVEL", "LOUD")
    result = runner.invoke(app, ["legend", "dotids"])
    assert result.exit_code == 2
    assert "Invalid configuration" in result.output


def test_serve_mcp_defaults_to_stdio(clean_env: pytest.MonkeyPatch) -> None:
    with patch("semantic_glyph.mcp.server.create_mcp_server") as create:
        result = runner.invoke(app, ["serve", "mcp"])
    assert result.exit_code == 0
    create.return_value.run.assert_called_once_with(transport="stdio")


def test_serve_mcp_network_transport(clean_env: pytest.MonkeyPatch) -> None:
    with patch("semantic_glyph.mcp.server.create_mcp_server") as create:
        result = runner.invoke(app, ["serve", "mcp", "--transport", "sse", "--port", "9000"])
    assert result.exit_code == 0
    create.return_value.run.assert_called_once_with(transport="sse", host="127.0.0.1", port=9000)


def test_serve_api_uses_configured_log_level(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("SEMANTIC_GLYPH_LOG_LEVEL", "INFO")
    with patch("uvicorn.run") as run:
        result = runner.invoke(app, ["serve", "api", "--port", "8123"])
    assert result.exit_code == 0
    assert run.call_args.kwargs == {"host": "127.0.0.1", "port": 8123, "log_level": "info"}


def test_configured_log_level_reaches_root_logger(clean_env: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    clean_env.setattr(root, "level", root.level)
    clean_env.setenv("SEMANTIC_GLYPH_LOG_LEVEL", "INFO")
    result = runner.invoke(app, ["legend", "dotids"])
    assert result.exit_code == 0
    assert root.level == logging.INFO


def test_verbose_flag_overrides_configured_level(clean_env: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    clean_env.setattr(root, "level", root.level)
    clean_env.setenv("SEMANTIC_GLYPH_LOG_LEVEL", "ERROR")
    result = runner.invoke(app, ["-v", "legend", "dotids"])
    assert result.exit_code == 0
    assert root.level == logging.DEBUG
