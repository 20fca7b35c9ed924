"""FastMCP server exposing semantic-glyph tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from semantic_glyph.config import Settings
from semantic_glyph.core.analysis import analyze_note as _analyze_note
from semantic_glyph.core.annotations import build_declaration as _build_declaration
from semantic_glyph.core.categories import get_category
from semantic_glyph.core.compounds import get_compound
from semantic_glyph.core.dotid import decode, dotid_for
from semantic_glyph.core.glyphs import get_glyph
from semantic_glyph.core.micro_glyphs import get_micro_glyph
from semantic_glyph.core.suggestions import get_suggestions
from semantic_glyph.core.tokenizer import parse
from semantic_glyph.core.validator import suggest_fixes


def create_mcp_server(settings: Settings | None = None) -> FastMCP:
    """Create a FastMCP server; ``settings`` supplies suggestion defaults."""
    settings = settings or Settings()
    mcp = FastMCP("semantic-glyph", instructions="Parse, validate and annotate glyph-marked notes.")

    @mcp.tool()
    async def parse_note(text: str) -> dict[str, Any]:
        """Parse a note into tokens, DotId declarations and references, and diagnostics."""
        return parse(text).model_dump(mode="json")

    @mcp.tool()
    async def validate_note(text: str) -> dict[str, Any]:
        """Check DotId consistency and propose fixes."""
        result = parse(text)
        return {
            "is_valid": result.is_valid,
            "diagnostics": [d.model_dump(mode="json") for d in result.diagnostics],
            "fixes": [f.model_dump(mode="json") for f in suggest_fixes(result.validation)],
        }

    @mcp.tool()
    async def suggest(text: str, cursor: int | None = None, min_confidence: float | None = None) -> dict[str, Any]:
        """Suggest glyphs and DotIds at a cursor offset (default: end of text)."""
        result = get_suggestions(
            text,
            len(text) if cursor is None else cursor,
            parse(text).declarations,
            enabled_categories=settings.enabled_categories,
            min_confidence=settings.suggestion_threshold if min_confidence is None else min_confidence,
        )
        return result.model_dump(mode="json")

    @mcp.tool()
    async def analyze_note(text: str) -> dict[str, Any]:
        """List declared objects with their references and associated glyphs."""
        return _analyze_note(text).model_dump(mode="json")

    @mcp.tool()
    async def lookup_glyph(symbol: str) -> dict[str, Any]:
        """Explain a glyph, compound or Hebrew micro-glyph."""
        glyph = get_glyph(symbol)
        if glyph is not None:
            category = get_category(glyph.category)
            return {
                "kind": "glyph",
                **glyph.model_dump(mode="json"),
                "question": category.question if category else None,
            }
        compound = get_compound(symbol)
        if compound is not None:
            return {"kind": "compound", **compound.model_dump(mode="json")}
        micro = get_micro_glyph(symbol)
        if micro is not None:
            return {"kind": "micro_glyph", **micro.model_dump(mode="json")}
        return {"error": f"Unknown glyph '{symbol}'."}

    @mcp.tool()
    async def dotid(value: int | None = None, signature: str | None = None) -> dict[str, Any]:
        """Encode a value (1-10) or decode a dot signature."""
        if value is None and signature is not None:
            value = decode(signature)
            if value is None:
                return {"error": f"'{signature}' is not a DotId signature."}
        if value is None:
            return {"error": "Either 'value' or 'signature' must be provided."}
        found = dotid_for(value)
        if found is None:
            return {"error": f"DotId value must be between 1 and 10, got {value}."}
        return found.model_dump(mode="json")

    @mcp.tool()
    async def build_declaration(term: str, value: int) -> str:
        """Format a term with a DotId declaration, quoting multi-word terms."""
        found = dotid_for(value)
        if found is None:
            return f"Error: DotId value must be between 1 and 10, got {value}."
        try:
            return _build_declaration(term, found)
        except ValueError as exc:
            return f"Error: {exc}"

    return mcp
