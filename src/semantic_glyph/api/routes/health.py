from fastapi import APIRouter

from semantic_glyph.api.schemas import HealthResponse, LivenessResponse
from semantic_glyph.core.categories import CATEGORIES
from semantic_glyph.core.dotid import DOT_IDS
from semantic_glyph.core.glyphs import GLYPHS

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Status plus the size of the loaded vocabulary."""
    return HealthResponse(categories=len(CATEGORIES), glyphs=len(GLYPHS), dotids=len(DOT_IDS))


@router.get("/healthz/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    return LivenessResponse()
