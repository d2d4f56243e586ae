"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from shophub.application.dto import ProductDTO
from shophub.application.refresh_catalog import RefreshCatalogHandler
from shophub.application.search_products import SearchProductsHandler
from shophub.domain.exceptions import DomainException
from shophub.infrastructure.bootstrap import (
    cart_store,
    product_repository,
    product_source,
)


@click.command("refresh")
def catalog_refresh() -> None:
    """Load a fresh catalog (new stock quotas) from the product feed."""
    handler = RefreshCatalogHandler(
        product_source=product_source(),
        product_repo=product_repository(),
    )

    try:
        count = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Loaded {count} products.")


def _display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found")
        click.echo("Try changing your search criteria")
        return

    click.echo(f"{'ID':<6} {'Title':<40} {'Price':>10} {'Stock':>14}")
    click.echo("-" * 73)
    for p in products:
        stock = f"{p.stock} in stock" if p.in_stock else "Out of stock"
        click.echo(f"{p.id:<6} {p.title[:40]:<40} {p.price:>10} {stock:>14}")


def _search(term: str) -> list[ProductDTO]:
    handler = SearchProductsHandler(
        product_repo=product_repository(),
        cart_store=cart_store(),
    )

    try:
        return handler.handle(term)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("list")
def catalog_list() -> None:
    """List every product in the catalog."""
    _display_products(_search(""))


@click.command("search")
@click.argument("term")
def catalog_search(term: str) -> None:
    """Find products whose title contains TERM."""
    _display_products(_search(term))
