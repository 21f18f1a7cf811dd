from __future__ import annotations

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt
import pytest
from fastapi.testclient import TestClient

from tests.helpers import TEST_PASSWORD, TEST_SECRET_KEY, register


def test_register_annotator_success(client: TestClient) -> None:
    payload = {"nickname": "AnnotatorOne", "password": TEST_PASSWORD}
    response = client.post("/api/session/register", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["session"]["token_type"] == "bearer"  # noqa: S105
    assert data["annotator"]["nickname"] == payload["nickname"]
    assert "access_token" in data["session"]
    assert "password" not in data["annotator"]


def test_register_annotator_conflict(client: TestClient) -> None:
    payload = {"nickname": "AnnotatorOne", "password": TEST_PASSWORD}
    assert client.post("/api/session/register", json=payload).status_code == 201

    response = client.post("/api/session/register", json=payload)

    assert response.status_code == 409


@pytest.mark.parametrize(
    "payload",
    [
        {"nickname": "ab", "password": TEST_PASSWORD},
        {"nickname": "has space", "password": TEST_PASSWORD},
        {"nickname": "AnnotatorOne", "password": "short1"},
        {"nickname": "AnnotatorOne", "password": "onlyletters"},
        {"nickname": "AnnotatorOne", "password": "12345678"},
    ],
)
def test_register_rejects_invalid_payload(
    client: TestClient, payload: dict[str, str]
) -> None:
    response = client.post("/api/session/register", json=payload)

    assert response.status_code == 422


def test_open_session_success(client: TestClient) -> None:
    register(client, "AnnotatorTwo")

    response = client.post(
        "/api/session/", json={"nickname": "AnnotatorTwo", "password": TEST_PASSWORD}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["session"]["token_type"] == "bearer"  # noqa: S105
    assert data["annotator"]["nickname"] == "AnnotatorTwo"


def test_open_session_invalid_credentials(client: TestClient) -> None:
    register(client, "AnnotatorTwo")

    response = client.post(
        "/api/session/", json={"nickname": "AnnotatorTwo", "password": "Wrong12345"}
    )

    assert response.status_code == 401


def test_open_session_unknown_annotator(client: TestClient) -> None:
    response = client.post(
        "/api/session/", json={"nickname": "Unknown", "password": TEST_PASSWORD}
    )

    assert response.status_code == 401


def test_read_current_session(client: TestClient) -> None:
    headers = register(client, "AnnotatorThree")

    response = client.get("/api/session/", headers=headers)

    assert response.status_code == 200
    assert response.json()["annotator"]["nickname"] == "AnnotatorThree"


def test_read_session_requires_token(client: TestClient) -> None:
    response = client.get("/api/session/")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_garbage_token_is_rejected(client: TestClient) -> None:
    response = client.get(
        "/api/session/", headers={"Authorization": "Bearer not-a-token"}
    )

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid session"}


def test_expired_token_is_rejected(client: TestClient) -> None:
    token = jwt.encode(
        {"sub": str(uuid4()), "exp": datetime.now(UTC) - timedelta(minutes=1)},
        TEST_SECRET_KEY,
        algorithm="HS256",
    )

    response = client.get("/api/session/", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_token_for_unknown_annotator_is_rejected(client: TestClient) -> None:
    token = jwt.encode(
        {"sub": str(uuid4()), "exp": datetime.now(UTC) + timedelta(minutes=5)},
        TEST_SECRET_KEY,
        algorithm="HS256",
    )

    response = client.get("/api/session/", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid session"}


def test_token_signed_with_other_key_is_rejected(client: TestClient) -> None:
    token = jwt.encode(
        {"sub": str(uuid4()), "exp": datetime.now(UTC) + timedelta(minutes=5)},
        "another-secret-key",
        algorithm="HS256",
    )

    response = client.get("/api/session/", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
