from fastapi import APIRouter, Depends, HTTPException, status

from semantic_glyph.api.dependencies import get_app_settings
from semantic_glyph.api.schemas import SuggestRequest
from semantic_glyph.config import Settings
from semantic_glyph.core.suggestions import get_suggestions
from semantic_glyph.core.tokenizer import parse
from semantic_glyph.models import SuggestionResult

router = APIRouter(tags=["suggest"])


@router.post("/suggest", response_model=SuggestionResult)
async def suggest(body: SuggestRequest, settings: Settings = Depends(get_app_settings)) -> SuggestionResult:
    """Glyph and DotId suggestions at a cursor. Request fields override configured preferences."""
    cursor = len(body.text) if body.cursor is None else body.cursor
    categories = settings.enabled_categories if body.enabled_categories is None else body.enabled_categories
    threshold = settings.suggestion_threshold if body.min_confidence is None else body.min_confidence
    try:
        return get_suggestions(
            body.text,
            cursor,
            parse(body.text).declarations,
            enabled_categories=categories,
            min_confidence=threshold,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from None
