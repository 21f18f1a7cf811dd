"""Lookups and creation of annotator accounts."""

from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from annotator_backend.database.schemas import AnnotatorSchema


class AnnotatorRepository:
    """Access to the ``annotators`` table."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find(self, annotator_id: UUID) -> AnnotatorSchema | None:
        return self._session.get(AnnotatorSchema, annotator_id)

    def find_by_nickname(self, nickname: str) -> AnnotatorSchema | None:
        return self._session.scalars(
            select(AnnotatorSchema).where(AnnotatorSchema.nickname == nickname)
        ).one_or_none()

    def nickname_taken(self, nickname: str) -> bool:
        return bool(
            self._session.scalar(
                select(exists().where(AnnotatorSchema.nickname == nickname))
            )
        )

    def create(self, *, nickname: str, password_hash: str) -> AnnotatorSchema:
        """Insert an annotator and return it with server defaults loaded."""
        annotator = AnnotatorSchema(nickname=nickname, password_hash=password_hash)
        self._session.add(annotator)
        self._session.flush()
        self._session.refresh(annotator)
        return annotator
