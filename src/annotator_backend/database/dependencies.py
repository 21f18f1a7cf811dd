"""Request-scoped database access for FastAPI routes and the CLI."""

import logging
from collections.abc import Iterator
from functools import cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session

from annotator_backend.database.service import DatabaseService
from annotator_backend.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)

SettingsDep = Annotated[BackendSettings, Depends(get_settings)]


@cache
def database_for(url: str) -> DatabaseService:
    """Return the process-wide :class:`DatabaseService` for ``url``."""
    logger.info("Opening database %s", make_url(url).render_as_string(hide_password=True))
    return DatabaseService(url)


def get_database(settings: SettingsDep) -> DatabaseService:
    return database_for(settings.database_url)


def get_session(db: Annotated[DatabaseService, Depends(get_database)]) -> Iterator[Session]:
    """Yield one transactional session per request; commits unless the request fails."""
    with db.session() as session:
        yield session
