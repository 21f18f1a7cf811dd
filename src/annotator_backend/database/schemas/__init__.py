"""SQLAlchemy schemas for annotators, the catalog and collected annotations."""

from annotator_backend.database.schemas.annotation import AnnotationSchema
from annotator_backend.database.schemas.annotator import AnnotatorSchema
from annotator_backend.database.schemas.attribute import AttributeSchema
from annotator_backend.database.schemas.item import ItemSchema

__all__ = ["AnnotationSchema", "AnnotatorSchema", "AttributeSchema", "ItemSchema"]
