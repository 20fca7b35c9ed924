from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Query, status

from semantic_glyph.api.dependencies import require_dotid
from semantic_glyph.core.categories import CATEGORIES, category_with_glyphs, normalize_category
from semantic_glyph.core.compounds import all_compounds
from semantic_glyph.core.dotid import DOT_IDS
from semantic_glyph.core.glyphs import all_glyphs, get_glyph, glyphs_by_category
from semantic_glyph.core.micro_glyphs import all_micro_glyphs
from semantic_glyph.models import DotId, Glyph, GlyphCompound, MicroGlyph

router = APIRouter(tags=["registry"])


@router.get("/glyphs", response_model=list[Glyph])
async def glyphs(category: str | None = Query(None)) -> list[Glyph]:
    if category is None:
        return all_glyphs()
    try:
        return glyphs_by_category(normalize_category(category))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from None


@router.get("/glyphs/{symbol}", response_model=Glyph)
async def glyph(symbol: str) -> Glyph:
    found = get_glyph(symbol)
    if found is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown glyph '{symbol}'.")
    return found


@router.get("/categories")
async def categories() -> list[dict[str, Any]]:
    return [category_with_glyphs(info.id) for info in CATEGORIES]


@router.get("/compounds", response_model=list[GlyphCompound])
async def compounds() -> list[GlyphCompound]:
    return all_compounds()


@router.get("/micro-glyphs", response_model=list[MicroGlyph])
async def micro_glyphs() -> list[MicroGlyph]:
    return all_micro_glyphs()


@router.get("/dotids", response_model=list[DotId])
async def dotids() -> list[DotId]:
    return list(DOT_IDS)


@router.get("/dotids/{value}", response_model=DotId)
async def dotid(value: int) -> DotId:
    return require_dotid(value)
