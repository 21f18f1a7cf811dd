"""Session issuing and verification for annotators."""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from sqlalchemy.orm import Session

from annotator_backend.database import AnnotatorRepository, AnnotatorSchema
from annotator_backend.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000


class AnnotatorAlreadyExistsError(Exception):
    """Raised when attempting to register a taken nickname."""


class InvalidCredentialsError(Exception):
    """Raised when supplied credentials are invalid."""


class InvalidSessionError(Exception):
    """Raised when a session token cannot be trusted."""


@dataclass(slots=True, frozen=True)
class AnnotatorSession:
    """An authenticated annotator bound to a request."""

    annotator_id: UUID
    nickname: str
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class IssuedSession:
    """A freshly issued session token."""

    access_token: str
    expires_at: datetime


class SessionService:
    """Handles password hashing and session token lifecycle."""

    def __init__(
        self,
        *,
        secret_key: str | None = None,
        algorithm: str = "HS256",
        ttl_minutes: int | None = None,
        settings: BackendSettings | None = None,
    ) -> None:
        config = settings or get_settings()
        self._secret_key = secret_key or config.auth_secret_key
        self._algorithm = algorithm
        self._ttl = timedelta(minutes=ttl_minutes or config.session_ttl_minutes)

    def hash_password(self, password: str) -> str:
        """Hash a password using PBKDF2 with a random salt."""

        salt = secrets.token_bytes(16)
        digest = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS
        )
        return f"{base64.b64encode(salt).decode()}:{base64.b64encode(digest).decode()}"

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Validate a password against a stored PBKDF2 hash."""

        try:
            salt_b64, hash_b64 = password_hash.split(":", 1)
        except ValueError:
            return False
        salt = base64.b64decode(salt_b64.encode())
        expected = base64.b64decode(hash_b64.encode())
        actual = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS
        )
        return hmac.compare_digest(actual, expected)

    def issue(self, annotator: AnnotatorSchema) -> IssuedSession:
        expires_at = datetime.now(tz=timezone.utc) + self._ttl
        payload = {"sub": str(annotator.id), "nick": annotator.nickname, "exp": expires_at}
        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return IssuedSession(access_token=token, expires_at=expires_at)

    def resolve(self, *, session: Session, token: str) -> AnnotatorSession:
        """Turn a bearer token into the session of an existing annotator."""

        try:
            data = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
            annotator_id = UUID(data["sub"])
        except (jwt.PyJWTError, KeyError, ValueError) as exc:
            raise InvalidSessionError("Invalid session token") from exc

        annotator = AnnotatorRepository(session).find(annotator_id)
        if annotator is None:
            raise InvalidSessionError("Unknown annotator")

        return AnnotatorSession(
            annotator_id=annotator.id,
            nickname=annotator.nickname,
            expires_at=datetime.fromtimestamp(data["exp"], tz=timezone.utc),
        )

    def register(
        self, *, session: Session, nickname: str, password: str
    ) -> tuple[AnnotatorSchema, IssuedSession]:
        repository = AnnotatorRepository(session)
        if repository.nickname_taken(nickname):
            raise AnnotatorAlreadyExistsError(nickname)

        annotator = repository.create(
            nickname=nickname, password_hash=self.hash_password(password)
        )
        logger.info("Registered annotator %s", annotator.nickname)
        return annotator, self.issue(annotator)

    def open(
        self, *, session: Session, nickname: str, password: str
    ) -> tuple[AnnotatorSchema, IssuedSession]:
        annotator = AnnotatorRepository(session).find_by_nickname(nickname)
        if annotator is None or not self.verify_password(password, annotator.password_hash):
            logger.warning("Rejected session for %s", nickname)
            raise InvalidCredentialsError(nickname)
        return annotator, self.issue(annotator)
