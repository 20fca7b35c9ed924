from fastapi import APIRouter

from semantic_glyph.api.schemas import AnnotationsRequest, TextRequest, TokenizeRequest, ValidateResponse
from semantic_glyph.core.analysis import analyze_note
from semantic_glyph.core.annotations import parse_annotations
from semantic_glyph.core.tokenizer import parse, tokenize
from semantic_glyph.core.validator import suggest_fixes
from semantic_glyph.models import AnnotationMatch, NoteAnalysis, ParseResult, Token

router = APIRouter(tags=["parse"])


@router.post("/parse", response_model=ParseResult)
async def parse_text(body: TextRequest) -> ParseResult:
    return parse(body.text)


@router.post("/tokenize", response_model=list[Token])
async def tokenize_text(body: TokenizeRequest) -> list[Token]:
    return tokenize(body.text, include_text=body.include_text)


@router.post("/annotations", response_model=list[AnnotationMatch])
async def annotations(body: AnnotationsRequest) -> list[AnnotationMatch]:
    """DotId annotations only, optionally including unfinished ones at line ends."""
    return parse_annotations(body.text, include_incomplete=body.include_incomplete)


@router.post("/validate", response_model=ValidateResponse)
async def validate_text(body: TextRequest) -> ValidateResponse:
    validation = parse(body.text).validation
    return ValidateResponse(validation=validation, fixes=suggest_fixes(validation))


@router.post("/analyze", response_model=NoteAnalysis)
async def analyze(body: TextRequest) -> NoteAnalysis:
    return analyze_note(body.text)
