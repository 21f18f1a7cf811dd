"""Annotator API entrypoint."""

from __future__ import annotations

import uvicorn

from annotator_backend.api import create_api
from annotator_backend.logging_config import configure_logging
from annotator_backend.settings import get_settings

configure_logging(get_settings().log_level)
app = create_api()


def _run_uvicorn(*, reload: bool) -> None:
    """Start uvicorn with a consistent configuration."""
    config = get_settings()
    uvicorn.run(
        "annotator_backend.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=reload,
        log_config=None,
    )


def run_dev() -> None:
    """Run the development ASGI server with auto-reload."""
    _run_uvicorn(reload=True)


def run_prod() -> None:
    """Run the production ASGI server without auto-reload."""
    _run_uvicorn(reload=False)
