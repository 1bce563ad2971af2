"""CLI commands that inspect a seed file through a throwaway store."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import click

from catalog.application.dto import ProductDTO, SearchCriteria
from catalog.application.list_products import SORT_KEYS, ListProductsHandler
from catalog.application.search_products import SearchProductsHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.persistence.json_seed import dump_snapshot

_SEED_OPTION = click.option(
    "--seed",
    "seed_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file of products to load.",
)


def _display_products(dtos: list[ProductDTO]) -> None:
    if not dtos:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>12} {'Qty':>6}")
    click.echo("-" * 51)
    for dto in dtos:
        price = f"${dto.price:.2f}"
        click.echo(f"{dto.id:<6} {dto.name:<24} {price:>12} {dto.quantity:>6}")


@click.command("list")
@_SEED_OPTION
@click.option("--sort", "sort_by", type=click.Choice(SORT_KEYS), default="id", show_default=True)
@click.option("--desc", is_flag=True, default=False, help="Sort descending.")
def product_list(seed_path: Path, sort_by: str, desc: bool) -> None:
    """List every product in a seed file."""
    try:
        repo = product_repository(seed_path)
        dtos = ListProductsHandler(repo).handle(sort_by=sort_by, descending=desc)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_products(dtos)


@click.command("search")
@_SEED_OPTION
@click.option("--name", default=None, help="Case-insensitive name fragment.")
@click.option("--min-price", type=Decimal, default=None, help="Inclusive lower price bound.")
@click.option("--max-price", type=Decimal, default=None, help="Exclusive upper price bound.")
@click.option("--min-quantity", type=int, default=None, help="Quantity strictly above.")
@click.option("--in-stock", is_flag=True, default=False, help="Only products on hand.")
def product_search(
    seed_path: Path,
    name: str | None,
    min_price: Decimal | None,
    max_price: Decimal | None,
    min_quantity: int | None,
    in_stock: bool,
) -> None:
    """Search the products in a seed file."""
    try:
        repo = product_repository(seed_path)
        criteria = SearchCriteria(
            name=name,
            min_price=min_price,
            max_price=max_price,
            min_quantity=min_quantity,
            in_stock_only=in_stock,
        )
        dtos = SearchProductsHandler(repo).handle(criteria)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_products(dtos)


@click.command("export")
@_SEED_OPTION
@click.option(
    "--out",
    "out_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to write the snapshot.",
)
def product_export(seed_path: Path, out_path: Path) -> None:
    """Load a seed file and write a snapshot with ids assigned."""
    try:
        repo = product_repository(seed_path)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    products = repo.list_all()
    dump_snapshot(out_path, products)
    click.echo(f"Exported {len(products)} product(s) to {out_path}")
