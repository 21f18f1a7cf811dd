"""Route table for the annotation endpoints.

``/overall-stats`` is public; every other route requires a session.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from annotator_backend.api.controllers import annotations as controller
from annotator_backend.api.dependencies import SESSION_REQUIRED
from annotator_backend.api.routing import RouteEntry, build_router

LOCATION = "/api/annotations"

ROUTES: tuple[RouteEntry, ...] = (
    RouteEntry("GET", "/attributes", controller.get_attributes, (SESSION_REQUIRED,)),
    RouteEntry("GET", "/workload", controller.get_workload, (SESSION_REQUIRED,)),
    RouteEntry("GET", "/overall-stats", controller.get_overall_stats),
    RouteEntry(
        "POST",
        "/",
        controller.post_annotations,
        (SESSION_REQUIRED,),
        status_code=status.HTTP_201_CREATED,
    ),
)


def create_router() -> APIRouter:
    """Build the annotation router, validating the table first."""

    return build_router(LOCATION, ROUTES, tags=["annotations"])
