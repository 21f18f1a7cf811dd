"""Dependency providers for FastAPI routers."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from annotator_backend.api.routing import Precondition
from annotator_backend.api.services import (
    AnnotationService,
    AnnotatorSession,
    InvalidSessionError,
    SessionService,
)
from annotator_backend.database import SettingsDep, get_session

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)

DbSessionDep = Annotated[Session, Depends(get_session)]


def get_session_service(settings: SettingsDep) -> SessionService:
    """Return a :class:`SessionService` bound to the current settings."""

    return SessionService(settings=settings)


def get_annotation_service(settings: SettingsDep) -> AnnotationService:
    """Return an :class:`AnnotationService` bound to the current settings."""

    return AnnotationService(settings=settings)


SessionServiceDep = Annotated[SessionService, Depends(get_session_service)]
AnnotationServiceDep = Annotated[AnnotationService, Depends(get_annotation_service)]


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def ensure_session(
    db: DbSessionDep,
    session_service: SessionServiceDep,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
) -> AnnotatorSession:
    """Resolve the annotator session from a bearer token or reject the request."""

    if credentials is None:
        raise _unauthorized("Missing session")

    try:
        return session_service.resolve(session=db, token=credentials.credentials)
    except InvalidSessionError as exc:
        logger.info("Rejected request with invalid session: %s", exc)
        raise _unauthorized("Invalid session") from exc


CurrentSessionDep = Annotated[AnnotatorSession, Depends(ensure_session)]

SESSION_REQUIRED = Precondition(name="session", dependency=ensure_session)


__all__ = [
    "SESSION_REQUIRED",
    "AnnotationServiceDep",
    "CurrentSessionDep",
    "DbSessionDep",
    "SessionServiceDep",
    "ensure_session",
    "get_annotation_service",
    "get_session_service",
]
