from __future__ import annotations

from fastapi import FastAPI

from semantic_glyph.api.routes.build import router as build_router
from semantic_glyph.api.routes.health import router as health_router
from semantic_glyph.api.routes.parse import router as parse_router
from semantic_glyph.api.routes.registry import router as registry_router
from semantic_glyph.api.routes.root import router as root_router
from semantic_glyph.api.routes.suggest import router as suggest_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Semantic Glyph API",
        description="Parse, validate and annotate glyph-marked notes.",
        version="0.1.0",
    )

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(parse_router)
    app.include_router(suggest_router)
    app.include_router(build_router)
    app.include_router(registry_router)

    return app
