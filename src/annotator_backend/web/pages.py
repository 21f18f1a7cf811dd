"""HTML pages linked from the navigation header."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from annotator_backend.web.header import get_environment

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)


def _render(template_name: str) -> str:
    return get_environment().get_template(template_name).render()


@router.get("/", include_in_schema=False)
def home_page() -> HTMLResponse:
    return HTMLResponse(_render("home.html"))


@router.get("/annotate", include_in_schema=False)
def annotate_page() -> HTMLResponse:
    return HTMLResponse(_render("annotate.html"))
