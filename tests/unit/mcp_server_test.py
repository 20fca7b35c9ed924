"""Tests for the MCP server tool definitions."""

from __future__ import annotations

from typing import Any

import pytest

from semantic_glyph.config import Settings
from semantic_glyph.mcp.server import create_mcp_server


def _tool(name: str, settings: Settings | None = None) -> Any:
    server = create_mcp_server(settings)
    return server._tool_manager._tools[name].fn  # type: ignore[attr-defined]


class TestMcpServerCreation:
    def test_creates_server(self) -> None:
        server = create_mcp_server()
        assert server.name == "semantic-glyph"

    def test_server_has_tools(self) -> None:
        server = create_mcp_server()
        tool_names = {t.name for t in server._tool_manager._tools.values()}
        assert tool_names == {
            "parse_note",
            "validate_note",
            "suggest",
            "analyze_note",
            "lookup_glyph",
            "dotid",
            "build_declaration",
        }


class TestMcpTools:
    @pytest.mark.asyncio
    async def test_parse_note(self) -> None:
        result = await _tool("parse_note")("Socrates{•} taught. {•}")
        assert result["declarations"][0]["term"] == "Socrates"
        assert result["validation"]["is_valid"] is True

    @pytest.mark.asyncio
    async def test_validate_note_reports_orphan(self) -> None:
        result = await _tool("validate_note")("see {••}")
        assert result["is_valid"] is False
        assert result["diagnostics"][0]["code"] == "orphaned_reference"
        assert result["fixes"][0]["type"] == "add_declaration"

    @pytest.mark.asyncio
    async def test_suggest_uses_configured_threshold(self) -> None:
        strict = _tool("suggest", Settings(suggestion_threshold=0.9))
        assert (await strict("because"))["glyphs"] == []

        loose = _tool("suggest", Settings(suggestion_threshold=0.0))
        result = await loose("because")
        assert "→" in [s["glyph"]["symbol"] for s in result["glyphs"]]

    @pytest.mark.asyncio
    async def test_suggest_explicit_threshold_wins(self) -> None:
        suggest = _tool("suggest", Settings(suggestion_threshold=0.9))
        result = await suggest("because", min_confidence=0.0)
        assert result["glyphs"]

    @pytest.mark.asyncio
    async def test_analyze_note(self) -> None:
        result = await _tool("analyze_note")("→ Socrates{•}")
        assert result["objects"][0]["term"] == "Socrates"
        assert result["glyph_usage"] == {"→": 1}

    @pytest.mark.asyncio
    async def test_lookup_glyph_kinds(self) -> None:
        lookup = _tool("lookup_glyph")
        glyph = await lookup("→")
        assert glyph["kind"] == "glyph"
        assert glyph["name"] == "Causation"
        assert glyph["question"]
        assert (await lookup("◇→"))["kind"] == "compound"
        assert (await lookup("א"))["kind"] == "micro_glyph"
        assert "error" in await lookup("x")

    @pytest.mark.asyncio
    async def test_dotid_encode_and_decode(self) -> None:
        dotid = _tool("dotid")
        assert (await dotid(value=7))["signature"] == "○••"
        assert (await dotid(signature="•⦿"))["value"] == 9
        assert "error" in await dotid(value=0)
        assert "error" in await dotid(signature="○○")
        assert "error" in await dotid()

    @pytest.mark.asyncio
    async def test_build_declaration(self) -> None:
        build = _tool("build_declaration")
        assert await build("free will", 2) == '"free will"{••}'
        assert (await build("Socrates", 11)).startswith("Error:")
        assert (await build("", 1)).startswith("Error:")
