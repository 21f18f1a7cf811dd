"""Tests for the declarative annotation route table and its validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi import FastAPI
from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from annotator_backend.api.controllers import annotations as controller
from annotator_backend.api.dependencies import SESSION_REQUIRED, ensure_session
from annotator_backend.api.routers.annotations import LOCATION, ROUTES, create_router
from annotator_backend.api.routing import (
    RouteEntry,
    RouteTableError,
    build_router,
    validate_route_table,
)
from annotator_backend.database import get_database
from tests.helpers import register

if TYPE_CHECKING:
    from annotator_backend.database import DatabaseService


def _noop() -> dict[str, str]:
    return {"status": "ok"}


def test_annotation_table_has_exactly_four_entries() -> None:
    table = {
        (entry.method, entry.path): tuple(check.name for check in entry.preconditions)
        for entry in ROUTES
    }

    assert LOCATION == "/api/annotations"
    assert len(ROUTES) == 4
    assert table == {
        ("GET", "/attributes"): ("session",),
        ("GET", "/workload"): ("session",),
        ("GET", "/overall-stats"): (),
        ("POST", "/"): ("session",),
    }


def test_gated_routes_share_one_precondition() -> None:
    gated = [entry for entry in ROUTES if entry.preconditions]

    assert len(gated) == 3
    assert all(entry.preconditions == (SESSION_REQUIRED,) for entry in gated)


def test_handler_chains_run_gate_before_controller() -> None:
    chains = {entry.key: entry.handler_chain for entry in ROUTES}

    assert chains[("GET", "/attributes")] == (ensure_session, controller.get_attributes)
    assert chains[("GET", "/workload")] == (ensure_session, controller.get_workload)
    assert chains[("GET", "/overall-stats")] == (controller.get_overall_stats,)
    assert chains[("POST", "/")] == (ensure_session, controller.post_annotations)


def test_mounted_router_matches_table() -> None:
    router = create_router()
    mounted = {
        (method, route.path)
        for route in router.routes
        if isinstance(route, APIRoute) and route.include_in_schema
        for method in route.methods
    }

    assert mounted == {
        ("GET", "/api/annotations/attributes"),
        ("GET", "/api/annotations/workload"),
        ("GET", "/api/annotations/overall-stats"),
        ("POST", "/api/annotations/"),
    }


def test_root_entry_is_also_served_without_trailing_slash() -> None:
    router = create_router()
    aliases = {
        (method, route.path)
        for route in router.routes
        if isinstance(route, APIRoute) and not route.include_in_schema
        for method in route.methods
    }
    alias = next(route for route in router.routes if route.path == "/api/annotations")

    assert aliases == {("POST", "/api/annotations")}
    assert alias.endpoint is controller.post_annotations
    assert alias.status_code == 201
    assert [dep.dependency for dep in alias.dependencies] == [ensure_session]


def test_duplicate_routes_are_rejected() -> None:
    routes = (
        RouteEntry("GET", "/stats", _noop),
        RouteEntry("GET", "/stats", _noop, (SESSION_REQUIRED,)),
    )

    with pytest.raises(RouteTableError, match="Duplicate route GET /api/x/stats"):
        build_router("/api/x", routes)


def test_same_path_with_different_methods_is_allowed() -> None:
    routes = (
        RouteEntry("GET", "/", _noop),
        RouteEntry("POST", "/", _noop),
    )

    validate_route_table("/api/x", routes)


@pytest.mark.parametrize(
    ("location", "entry"),
    [
        ("/api/x", RouteEntry("FETCH", "/stats", _noop)),
        ("/api/x", RouteEntry("get", "/stats", _noop)),
        ("/api/x", RouteEntry("GET", "stats", _noop)),
        ("api/x", RouteEntry("GET", "/stats", _noop)),
        ("/api/x/", RouteEntry("GET", "/stats", _noop)),
    ],
)
def test_malformed_tables_are_rejected(location: str, entry: RouteEntry) -> None:
    with pytest.raises(RouteTableError):
        validate_route_table(location, (entry,))


def test_failed_precondition_stops_the_chain(database: DatabaseService) -> None:
    calls: list[str] = []

    def guarded() -> dict[str, str]:
        calls.append("guarded")
        return {"status": "ok"}

    app = FastAPI()
    app.include_router(
        build_router("/api/x", (RouteEntry("GET", "/guarded", guarded, (SESSION_REQUIRED,)),))
    )
    app.dependency_overrides[get_database] = lambda: database

    with TestClient(app) as client:
        rejected = client.get("/api/x/guarded")

    assert rejected.status_code == 401
    assert calls == []


def test_passed_precondition_reaches_the_endpoint(
    client: TestClient, database: DatabaseService
) -> None:
    headers = register(client)
    calls: list[str] = []

    def guarded() -> dict[str, str]:
        calls.append("guarded")
        return {"status": "ok"}

    app = FastAPI()
    app.include_router(
        build_router("/api/x", (RouteEntry("GET", "/guarded", guarded, (SESSION_REQUIRED,)),))
    )
    app.dependency_overrides[get_database] = lambda: database

    with TestClient(app) as guarded_client:
        response = guarded_client.get("/api/x/guarded", headers=headers)

    assert response.status_code == 200
    assert calls == ["guarded"]
