from __future__ import annotations

from fastapi import HTTPException, status

from semantic_glyph.config import Settings, get_settings
from semantic_glyph.core.dotid import MAX_VALUE, dotid_for
from semantic_glyph.models import DotId


def get_app_settings() -> Settings:
    """Settings for request handlers, read from the environment per request."""
    return get_settings()


def require_dotid(value: int) -> DotId:
    dotid = dotid_for(value)
    if dotid is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown DotId value {value}; expected 1 to {MAX_VALUE}.",
        )
    return dotid
