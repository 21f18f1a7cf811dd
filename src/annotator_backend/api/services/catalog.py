"""Loading attributes and items into the catalog."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from annotator_backend.database import AttributeSchema, CatalogRepository, ItemSchema

logger = logging.getLogger(__name__)


class AttributeSeed(BaseModel):
    name: str = Field(min_length=1, max_length=64)
    description: str = ""
    options: list[str] = Field(default_factory=list)


class ItemSeed(BaseModel):
    content: str = Field(min_length=1)


class CatalogSeed(BaseModel):
    """Catalog file contents accepted by :func:`load_catalog`."""

    attributes: list[AttributeSeed] = Field(default_factory=list)
    items: list[ItemSeed] = Field(default_factory=list)


def load_catalog(session: Session, data: dict[str, Any]) -> tuple[int, int]:
    """Insert the attributes and items described by ``data``.

    Attributes whose name already exists are left untouched. Returns the
    number of attributes and items added.
    """

    seed = CatalogSeed.model_validate(data)
    repository = CatalogRepository(session)

    added_attributes = 0
    for attribute in seed.attributes:
        if repository.get_attribute_by_name(attribute.name) is not None:
            logger.info("Skipping existing attribute %s", attribute.name)
            continue
        repository.add_attribute(
            AttributeSchema(
                name=attribute.name,
                description=attribute.description,
                options=attribute.options,
            )
        )
        added_attributes += 1

    for item in seed.items:
        repository.add_item(ItemSchema(content=item.content))

    return added_attributes, len(seed.items)
