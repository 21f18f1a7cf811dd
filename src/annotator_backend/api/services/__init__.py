"""Service layer for API-specific business logic."""

from annotator_backend.api.services.annotations import (
    AnnotationService,
    AnnotationSubmission,
    InvalidAnnotationValueError,
    OverallStats,
    UnknownAttributeError,
    UnknownItemError,
    Workload,
)
from annotator_backend.api.services.catalog import CatalogSeed, load_catalog
from annotator_backend.api.services.session import (
    AnnotatorAlreadyExistsError,
    AnnotatorSession,
    InvalidCredentialsError,
    InvalidSessionError,
    IssuedSession,
    SessionService,
)

__all__ = [
    "AnnotationService",
    "AnnotationSubmission",
    "AnnotatorAlreadyExistsError",
    "AnnotatorSession",
    "CatalogSeed",
    "InvalidAnnotationValueError",
    "InvalidCredentialsError",
    "InvalidSessionError",
    "IssuedSession",
    "OverallStats",
    "SessionService",
    "UnknownAttributeError",
    "UnknownItemError",
    "Workload",
    "load_catalog",
]
