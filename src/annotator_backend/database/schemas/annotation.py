"""Annotation database schema."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from annotator_backend.database.base import BaseSchema


class AnnotationSchema(BaseSchema):
    """One annotator's value for one attribute of one item."""

    __tablename__ = "annotations"
    __table_args__ = (
        UniqueConstraint(
            "item_id",
            "attribute_id",
            "annotator_id",
            name="uq_annotations_item_attribute_annotator",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    item_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("items.id", ondelete="CASCADE"), nullable=False, index=True
    )
    attribute_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("attributes.id", ondelete="CASCADE"), nullable=False
    )
    annotator_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("annotators.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    value: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
