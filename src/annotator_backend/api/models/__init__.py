"""Models used for API request and response payloads."""

from annotator_backend.api.models.annotations import (
    AnnotationRequest,
    AttributeResponse,
    ItemResponse,
    OverallStatsResponse,
    PostAnnotationsRequest,
    PostAnnotationsResponse,
    WorkloadResponse,
)
from annotator_backend.api.models.session import (
    AnnotatorResponse,
    CurrentSessionResponse,
    SessionRequest,
    SessionResponse,
    SessionTokenResponse,
)

__all__ = [
    "AnnotationRequest",
    "AnnotatorResponse",
    "AttributeResponse",
    "CurrentSessionResponse",
    "ItemResponse",
    "OverallStatsResponse",
    "PostAnnotationsRequest",
    "PostAnnotationsResponse",
    "SessionRequest",
    "SessionResponse",
    "SessionTokenResponse",
    "WorkloadResponse",
]
