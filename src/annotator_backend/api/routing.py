"""Declarative route tables validated when the application starts.

A route table is a tuple of :class:`RouteEntry` values mounted under one base
path. Each entry names its preconditions explicitly; :func:`build_router`
turns them into FastAPI dependencies, so a precondition that raises
``HTTPException`` ends the request before the endpoint is called.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, Depends

logger = logging.getLogger(__name__)

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


class RouteTableError(ValueError):
    """Raised when a route table is malformed."""


@dataclass(frozen=True, slots=True)
class Precondition:
    """A named check that must pass before an endpoint runs."""

    name: str
    dependency: Callable[..., Any]


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One (method, path) pair and the handlers it runs, in order."""

    method: str
    path: str
    endpoint: Callable[..., Any]
    preconditions: tuple[Precondition, ...] = ()
    status_code: int | None = None

    @property
    def key(self) -> tuple[str, str]:
        return self.method, self.path

    @property
    def handler_chain(self) -> tuple[Callable[..., Any], ...]:
        return (*(check.dependency for check in self.preconditions), self.endpoint)


def validate_route_table(location: str, routes: Iterable[RouteEntry]) -> None:
    """Check a route table for unknown methods, bad paths and duplicates."""

    if not location.startswith("/") or location.endswith("/"):
        msg = f"Base path must start and not end with '/': {location!r}"
        raise RouteTableError(msg)

    seen: set[tuple[str, str]] = set()
    for entry in routes:
        if entry.method not in HTTP_METHODS:
            msg = f"Unsupported HTTP method {entry.method!r} for {entry.path!r}"
            raise RouteTableError(msg)
        if not entry.path.startswith("/"):
            msg = f"Route path must start with '/': {entry.path!r}"
            raise RouteTableError(msg)
        if entry.key in seen:
            msg = f"Duplicate route {entry.method} {location}{entry.path}"
            raise RouteTableError(msg)
        seen.add(entry.key)


def build_router(
    location: str,
    routes: tuple[RouteEntry, ...],
    *,
    tags: list[str] | None = None,
) -> APIRouter:
    """Validate ``routes`` and mount them on a new router under ``location``."""

    validate_route_table(location, routes)
    router = APIRouter(prefix=location, tags=tags)
    for entry in routes:
        extra: dict[str, Any] = {}
        if entry.status_code is not None:
            extra["status_code"] = entry.status_code
        dependencies = [Depends(check.dependency) for check in entry.preconditions]
        router.add_api_route(
            entry.path,
            entry.endpoint,
            methods=[entry.method],
            dependencies=dependencies,
            name=entry.endpoint.__name__,
            **extra,
        )
        if entry.path == "/":
            # Serve "{location}" as well as "{location}/" instead of redirecting.
            router.add_api_route(
                "",
                entry.endpoint,
                methods=[entry.method],
                dependencies=dependencies,
                name=f"{entry.endpoint.__name__}_root",
                include_in_schema=False,
                **extra,
            )
        logger.debug(
            "Mounted %s %s%s (preconditions: %s)",
            entry.method,
            location,
            entry.path,
            ", ".join(check.name for check in entry.preconditions) or "none",
        )
    return router


__all__ = [
    "HTTP_METHODS",
    "Precondition",
    "RouteEntry",
    "RouteTableError",
    "build_router",
    "validate_route_table",
]
