from __future__ import annotations

from pydantic import BaseModel, Field

from semantic_glyph.models import ValidationFix, ValidationResult


class LivenessResponse(BaseModel):
    status: str = "ok"


class HealthResponse(LivenessResponse):
    categories: int
    glyphs: int
    dotids: int


class TextRequest(BaseModel):
    text: str


class TokenizeRequest(TextRequest):
    include_text: bool = False


class AnnotationsRequest(TextRequest):
    include_incomplete: bool = False


class SuggestRequest(TextRequest):
    cursor: int | None = Field(None, ge=0, description="Cursor offset; defaults to the end of the text.")
    min_confidence: float | None = Field(None, ge=0.0, le=1.0)
    enabled_categories: list[str] | None = None


class ValidateResponse(BaseModel):
    validation: ValidationResult
    fixes: list[ValidationFix]


class DeclarationRequest(BaseModel):
    term: str
    value: int


class GlyphAttachmentRequest(BaseModel):
    symbol: str
    value: int


class ReferenceRequest(BaseModel):
    value: int


class BuildResponse(BaseModel):
    text: str
