"""Repository helpers encapsulating persistence operations."""

from annotator_backend.database.repositories.annotation import AnnotationRepository
from annotator_backend.database.repositories.annotator import AnnotatorRepository
from annotator_backend.database.repositories.catalog import CatalogRepository

__all__ = ["AnnotationRepository", "AnnotatorRepository", "CatalogRepository"]
