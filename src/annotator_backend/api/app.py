"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from annotator_backend.api.middleware import RequestLoggingMiddleware
from annotator_backend.api.routers import create_annotations_router, session_router
from annotator_backend.settings import BackendSettings, get_settings
from annotator_backend.web import pages_router


def create_api(settings: BackendSettings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = settings or get_settings()

    app = FastAPI(title="Annotator API")
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(session_router)
    app.include_router(create_annotations_router())
    app.include_router(pages_router)
    return app
