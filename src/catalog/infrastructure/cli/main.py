import click
import pydantic

from catalog.config.logging import configure_logging
from catalog.config.settings import CatalogSettings
from catalog.infrastructure.cli.product_commands import (
    product_export,
    product_list,
    product_search,
)
from catalog.infrastructure.cli.serve_command import serve


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.option("--log-json", is_flag=True, default=False, help="Emit logs as JSON lines.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_json: bool) -> None:
    """Product Catalog: in-memory products API."""
    # Flags only switch things on; unset flags defer to CATALOG_* env vars.
    flags = {
        key: True
        for key, enabled in (("verbose", verbose), ("log_json", log_json))
        if enabled
    }
    try:
        settings = CatalogSettings(**flags)
    except pydantic.ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    ctx.obj = settings


# Register subcommands
cli.add_command(product_export)
cli.add_command(product_list)
cli.add_command(product_search)
cli.add_command(serve)
