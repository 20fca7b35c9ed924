from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint listing what the API offers."""
    return {
        "meta": {
            "title": "Semantic Glyph API",
            "description": "Parse, validate and annotate glyph-marked notes.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "parse": "/parse",
            "tokenize": "/tokenize",
            "annotations": "/annotations",
            "validate": "/validate",
            "analyze": "/analyze",
            "suggest": "/suggest",
            "build": "/build/declaration",
            "glyphs": "/glyphs",
            "categories": "/categories",
            "compounds": "/compounds",
            "micro-glyphs": "/micro-glyphs",
            "dotids": "/dotids",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
