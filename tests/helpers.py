"""Shared helpers for API tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi.testclient import TestClient

TEST_SECRET_KEY = "test-secret-key"  # noqa: S105
TEST_PASSWORD = "Password123"  # noqa: S105

CATALOG = {
    "attributes": [
        {
            "name": "sentiment",
            "description": "Overall tone of the text.",
            "options": ["positive", "neutral", "negative"],
        },
        {"name": "topic", "description": "Free-form topic label."},
    ],
    "items": [
        {"content": "The service was quick and friendly."},
        {"content": "My order arrived two weeks late."},
        {"content": "Prices are listed on the website."},
    ],
}


def register(client: TestClient, nickname: str = "annotator_one") -> dict[str, str]:
    """Register an annotator and return the authorization header for them."""
    response = client.post(
        "/api/session/register",
        json={"nickname": nickname, "password": TEST_PASSWORD},
    )
    assert response.status_code == 201, response.text
    token = response.json()["session"]["access_token"]
    return {"Authorization": f"Bearer {token}"}
