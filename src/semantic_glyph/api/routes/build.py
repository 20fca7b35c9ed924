from fastapi import APIRouter, HTTPException, status

from semantic_glyph.api.dependencies import require_dotid
from semantic_glyph.api.schemas import BuildResponse, DeclarationRequest, GlyphAttachmentRequest, ReferenceRequest
from semantic_glyph.core.annotations import build_declaration, build_glyph_attachment, build_reference

router = APIRouter(prefix="/build", tags=["build"])


@router.post("/declaration", response_model=BuildResponse)
async def declaration(body: DeclarationRequest) -> BuildResponse:
    dotid = require_dotid(body.value)
    try:
        return BuildResponse(text=build_declaration(body.term, dotid))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from None


@router.post("/glyph", response_model=BuildResponse)
async def glyph(body: GlyphAttachmentRequest) -> BuildResponse:
    dotid = require_dotid(body.value)
    try:
        return BuildResponse(text=build_glyph_attachment(body.symbol, dotid))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from None


@router.post("/reference", response_model=BuildResponse)
async def reference(body: ReferenceRequest) -> BuildResponse:
    return BuildResponse(text=build_reference(require_dotid(body.value)))
