"""Session endpoints: registration, login and the current session."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from annotator_backend.api.dependencies import (
    CurrentSessionDep,
    DbSessionDep,
    SessionServiceDep,
)
from annotator_backend.api.models import (
    AnnotatorResponse,
    CurrentSessionResponse,
    SessionRequest,
    SessionResponse,
    SessionTokenResponse,
)
from annotator_backend.api.services import (
    AnnotatorAlreadyExistsError,
    InvalidCredentialsError,
)

router = APIRouter(prefix="/api/session", tags=["session"])


@router.post(
    "/register",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_annotator(
    payload: SessionRequest,
    db: DbSessionDep,
    session_service: SessionServiceDep,
) -> SessionResponse:
    """Register a new annotator and open a session for them."""

    try:
        annotator, issued = session_service.register(
            session=db, nickname=payload.nickname, password=payload.password
        )
    except AnnotatorAlreadyExistsError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="Annotator already exists"
        ) from exc

    return SessionResponse(
        annotator=AnnotatorResponse.model_validate(annotator),
        session=SessionTokenResponse(
            access_token=issued.access_token, expires_at=issued.expires_at
        ),
    )


@router.post("/", response_model=SessionResponse)
def open_session(
    payload: SessionRequest,
    db: DbSessionDep,
    session_service: SessionServiceDep,
) -> SessionResponse:
    """Authenticate an existing annotator using nickname and password."""

    try:
        annotator, issued = session_service.open(
            session=db, nickname=payload.nickname, password=payload.password
        )
    except InvalidCredentialsError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        ) from exc

    return SessionResponse(
        annotator=AnnotatorResponse.model_validate(annotator),
        session=SessionTokenResponse(
            access_token=issued.access_token, expires_at=issued.expires_at
        ),
    )


@router.get("/", response_model=CurrentSessionResponse)
def read_session(current: CurrentSessionDep) -> CurrentSessionResponse:
    return CurrentSessionResponse(
        annotator=AnnotatorResponse(id=current.annotator_id, nickname=current.nickname),
        expires_at=current.expires_at,
    )
