"""Repository helpers for stored annotations and their aggregates."""

from uuid import UUID, uuid4

from sqlalchemy import Select, distinct, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from annotator_backend.database.schemas import AnnotationSchema, ItemSchema

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class AnnotationRepository:
    """Encapsulates persistence operations for :class:`AnnotationSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def upsert(
        self, *, item_id: int, attribute_id: int, annotator_id: UUID, value: str
    ) -> None:
        """Insert the annotation or overwrite the annotator's earlier value.

        Runs as one statement: concurrent submissions for the same
        (item, attribute, annotator) resolve to whichever commits last.
        """
        dialect = self._session.get_bind().dialect.name
        try:
            insert = _UPSERT_DIALECTS[dialect]
        except KeyError as exc:
            msg = f"Annotation upsert is not supported on {dialect!r}"
            raise NotImplementedError(msg) from exc

        stmt = insert(AnnotationSchema).values(
            id=uuid4(),
            item_id=item_id,
            attribute_id=attribute_id,
            annotator_id=annotator_id,
            value=value,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["item_id", "attribute_id", "annotator_id"],
            set_={"value": stmt.excluded.value, "updated_at": func.now()},
        )
        self._session.execute(stmt)

    def pending_items(
        self, annotator_id: UUID, *, target: int, limit: int
    ) -> list[ItemSchema]:
        """Return up to ``limit`` items still waiting for this annotator."""
        stmt = self._pending_items_query(annotator_id, target).order_by(ItemSchema.id)
        return list(self._session.scalars(stmt.limit(limit)))

    def count_pending_items(self, annotator_id: UUID, *, target: int) -> int:
        subquery = self._pending_items_query(annotator_id, target).subquery()
        return self._session.scalar(select(func.count()).select_from(subquery)) or 0

    def count_items_annotated_by(self, annotator_id: UUID) -> int:
        stmt = select(func.count(distinct(AnnotationSchema.item_id))).where(
            AnnotationSchema.annotator_id == annotator_id
        )
        return self._session.scalar(stmt) or 0

    def count_annotations(self) -> int:
        return self._session.scalar(select(func.count(AnnotationSchema.id))) or 0

    def count_annotators(self) -> int:
        """Count annotators with at least one stored annotation."""
        stmt = select(func.count(distinct(AnnotationSchema.annotator_id)))
        return self._session.scalar(stmt) or 0

    def count_completed_items(self, *, target: int) -> int:
        """Count items annotated by at least ``target`` distinct annotators."""
        coverage = self._coverage_query().subquery()
        stmt = (
            select(func.count())
            .select_from(coverage)
            .where(coverage.c.annotator_count >= target)
        )
        return self._session.scalar(stmt) or 0

    @staticmethod
    def _coverage_query() -> Select:
        return select(
            AnnotationSchema.item_id,
            func.count(distinct(AnnotationSchema.annotator_id)).label("annotator_count"),
        ).group_by(AnnotationSchema.item_id)

    def _pending_items_query(self, annotator_id: UUID, target: int) -> Select:
        coverage = self._coverage_query().subquery()
        annotated_by_annotator = select(AnnotationSchema.item_id).where(
            AnnotationSchema.annotator_id == annotator_id
        )
        return (
            select(ItemSchema)
            .outerjoin(coverage, coverage.c.item_id == ItemSchema.id)
            .where(
                ItemSchema.id.not_in(annotated_by_annotator),
                func.coalesce(coverage.c.annotator_count, 0) < target,
            )
        )
