"""Route definitions for public HTTP endpoints."""

from annotator_backend.api.routers.annotations import (
    create_router as create_annotations_router,
)
from annotator_backend.api.routers.session import router as session_router

__all__ = ["create_annotations_router", "session_router"]
