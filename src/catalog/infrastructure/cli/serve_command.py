"""CLI command that runs the HTTP API."""

from __future__ import annotations

from pathlib import Path

import click
import pydantic
import uvicorn

from catalog.config.settings import CatalogSettings
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.api.app import create_app


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default 127.0.0.1).")
@click.option(
    "--port", type=click.IntRange(1, 65535), default=None, help="Bind port (default 8000)."
)
@click.option(
    "--seed",
    "seed_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON file of products to load at start-up.",
)
@click.pass_obj
def serve(settings: CatalogSettings, host: str | None, port: int | None, seed_path: Path | None) -> None:
    """Serve the products API over HTTP."""
    overrides = {
        key: value
        for key, value in (("host", host), ("port", port), ("seed_path", seed_path))
        if value is not None
    }
    try:
        settings = CatalogSettings(**{**settings.model_dump(), **overrides})
    except pydantic.ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")

    try:
        app = create_app(settings=settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
