"""Pydantic models for session endpoints."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

NICKNAME_PATTERN = r"^[A-Za-z0-9_]{3,32}$"
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 64


def _check_password_strength(value: str) -> str:
    if not any(char.isalpha() for char in value):
        msg = "password must contain at least one letter"
        raise ValueError(msg)
    if not any(char.isdigit() for char in value):
        msg = "password must contain at least one digit"
        raise ValueError(msg)
    return value


class AnnotatorResponse(BaseModel):
    """Public representation of a registered annotator."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    nickname: str


class SessionTokenResponse(BaseModel):
    """Bearer token payload returned by the API."""

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime


class SessionRequest(BaseModel):
    """Credentials used to register or to open a session."""

    nickname: str = Field(pattern=NICKNAME_PATTERN)
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password_strength(value)


class SessionResponse(BaseModel):
    """Response returned after registering or opening a session."""

    annotator: AnnotatorResponse
    session: SessionTokenResponse


class CurrentSessionResponse(BaseModel):
    annotator: AnnotatorResponse
    expires_at: datetime
