"""Annotation collection domain logic."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.orm import Session

from annotator_backend.database import (
    AnnotationRepository,
    AttributeSchema,
    CatalogRepository,
    ItemSchema,
)
from annotator_backend.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)


class UnknownItemError(Exception):
    """Raised when an annotation references an item that does not exist."""

    def __init__(self, item_ids: Sequence[int]) -> None:
        super().__init__(f"Unknown items: {sorted(item_ids)}")
        self.item_ids = sorted(item_ids)


class UnknownAttributeError(Exception):
    """Raised when an annotation references an attribute that does not exist."""

    def __init__(self, attribute_ids: Sequence[int]) -> None:
        super().__init__(f"Unknown attributes: {sorted(attribute_ids)}")
        self.attribute_ids = sorted(attribute_ids)


class InvalidAnnotationValueError(Exception):
    """Raised when a value is not among the options of its attribute."""

    def __init__(self, attribute: str, value: str) -> None:
        super().__init__(f"{value!r} is not a valid value for {attribute!r}")
        self.attribute = attribute
        self.value = value


@dataclass(slots=True, frozen=True)
class AnnotationSubmission:
    """A single value submitted for one attribute of one item."""

    item_id: int
    attribute_id: int
    value: str


@dataclass(slots=True)
class Workload:
    items: list[ItemSchema]
    completed: int
    remaining: int


@dataclass(slots=True)
class OverallStats:
    items: int
    annotations: int
    annotators: int
    completed_items: int

    @property
    def completion(self) -> float:
        if self.items == 0:
            return 0.0
        return self.completed_items / self.items


class AnnotationService:
    """Serves the catalog, per-annotator workload and aggregate progress."""

    def __init__(
        self,
        *,
        batch_size: int | None = None,
        annotations_per_item: int | None = None,
        settings: BackendSettings | None = None,
    ) -> None:
        config = settings or get_settings()
        self._batch_size = batch_size or config.workload_batch_size
        self._target = annotations_per_item or config.annotations_per_item

    def list_attributes(self, *, session: Session) -> list[AttributeSchema]:
        return CatalogRepository(session).list_attributes()

    def get_workload(self, *, session: Session, annotator_id: UUID) -> Workload:
        repository = AnnotationRepository(session)
        return Workload(
            items=repository.pending_items(
                annotator_id, target=self._target, limit=self._batch_size
            ),
            completed=repository.count_items_annotated_by(annotator_id),
            remaining=repository.count_pending_items(annotator_id, target=self._target),
        )

    def get_overall_stats(self, *, session: Session) -> OverallStats:
        repository = AnnotationRepository(session)
        return OverallStats(
            items=CatalogRepository(session).count_items(),
            annotations=repository.count_annotations(),
            annotators=repository.count_annotators(),
            completed_items=repository.count_completed_items(target=self._target),
        )

    def record(
        self,
        *,
        session: Session,
        annotator_id: UUID,
        submissions: Sequence[AnnotationSubmission],
    ) -> int:
        """Validate the whole batch, then store it.

        A repeated (item, attribute) pair from the same annotator overwrites
        the previous value, including within one batch where the last entry
        wins. Returns the number of annotations written.
        """

        catalog = CatalogRepository(session)
        attributes = catalog.get_attributes(entry.attribute_id for entry in submissions)
        missing_attributes = {entry.attribute_id for entry in submissions} - attributes.keys()
        if missing_attributes:
            raise UnknownAttributeError(list(missing_attributes))

        item_ids = {entry.item_id for entry in submissions}
        missing_items = item_ids - catalog.existing_item_ids(item_ids)
        if missing_items:
            raise UnknownItemError(list(missing_items))

        for entry in submissions:
            attribute = attributes[entry.attribute_id]
            if attribute.options and entry.value not in attribute.options:
                raise InvalidAnnotationValueError(attribute.name, entry.value)

        latest: dict[tuple[int, int], str] = {}
        for entry in submissions:
            latest[(entry.item_id, entry.attribute_id)] = entry.value

        repository = AnnotationRepository(session)
        for (item_id, attribute_id), value in latest.items():
            repository.upsert(
                item_id=item_id,
                attribute_id=attribute_id,
                annotator_id=annotator_id,
                value=value,
            )

        logger.info("Stored %d annotations from annotator %s", len(latest), annotator_id)
        return len(latest)
