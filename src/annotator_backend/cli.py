"""Command line helpers for preparing the annotation catalog."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError

from annotator_backend.api.services import load_catalog
from annotator_backend.database import database_for
from annotator_backend.logging_config import configure_logging
from annotator_backend.settings import get_settings

logger = logging.getLogger(__name__)


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--database-url", default=None, help="Override DATABASE_URL.")
def seed(path: Path, database_url: str | None) -> None:
    """Load attributes and items from the JSON catalog at PATH."""

    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"{path} is not valid JSON: {exc}") from exc

    database = database_for(database_url or settings.database_url)
    try:
        with database.session() as session:
            attributes, items = load_catalog(session, data)
    except ValidationError as exc:
        raise click.ClickException(f"{path} is not a valid catalog:\n{exc}") from exc

    logger.info("Seeded catalog from %s", path)
    click.echo(f"Added {attributes} attributes and {items} items.")
