"""Repository helpers for attributes and items."""

from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from annotator_backend.database.schemas import AttributeSchema, ItemSchema


class CatalogRepository:
    """Read and seed the attributes and items offered to annotators."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_attributes(self) -> list[AttributeSchema]:
        stmt = select(AttributeSchema).order_by(AttributeSchema.id)
        return list(self._session.scalars(stmt))

    def get_attributes(self, attribute_ids: Iterable[int]) -> dict[int, AttributeSchema]:
        """Return the existing attributes among ``attribute_ids`` keyed by ID."""
        ids = set(attribute_ids)
        if not ids:
            return {}
        stmt = select(AttributeSchema).where(AttributeSchema.id.in_(ids))
        return {attribute.id: attribute for attribute in self._session.scalars(stmt)}

    def get_attribute_by_name(self, name: str) -> AttributeSchema | None:
        stmt = select(AttributeSchema).where(AttributeSchema.name == name)
        return self._session.scalar(stmt)

    def existing_item_ids(self, item_ids: Iterable[int]) -> set[int]:
        """Return the subset of ``item_ids`` present in the database."""
        ids = set(item_ids)
        if not ids:
            return set()
        stmt = select(ItemSchema.id).where(ItemSchema.id.in_(ids))
        return set(self._session.scalars(stmt))

    def count_items(self) -> int:
        return self._session.scalar(select(func.count(ItemSchema.id))) or 0

    def add_attribute(self, attribute: AttributeSchema) -> AttributeSchema:
        self._session.add(attribute)
        self._session.flush()
        return attribute

    def add_item(self, item: ItemSchema) -> ItemSchema:
        self._session.add(item)
        self._session.flush()
        return item
