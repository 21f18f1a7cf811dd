"""Database connectivity helpers, schemas and repositories."""

from annotator_backend.database.base import BaseSchema
from annotator_backend.database.dependencies import (
    SettingsDep,
    database_for,
    get_database,
    get_session,
)
from annotator_backend.database.repositories import (
    AnnotationRepository,
    AnnotatorRepository,
    CatalogRepository,
)
from annotator_backend.database.schemas import (
    AnnotationSchema,
    AnnotatorSchema,
    AttributeSchema,
    ItemSchema,
)
from annotator_backend.database.service import DatabaseService

__all__ = [
    "AnnotationRepository",
    "AnnotationSchema",
    "AnnotatorRepository",
    "AnnotatorSchema",
    "AttributeSchema",
    "BaseSchema",
    "CatalogRepository",
    "DatabaseService",
    "ItemSchema",
    "SettingsDep",
    "database_for",
    "get_database",
    "get_session",
]
