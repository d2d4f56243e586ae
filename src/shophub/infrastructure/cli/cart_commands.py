"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from shophub.application.add_to_cart import AddToCartHandler
from shophub.application.clear_cart import ClearCartHandler
from shophub.application.dto import CartOutcomeDTO
from shophub.application.remove_from_cart import RemoveFromCartHandler
from shophub.application.show_cart import ShowCartHandler
from shophub.application.update_cart_item import UpdateCartItemHandler
from shophub.domain.exceptions import DomainException
from shophub.domain.service.cart_engine import CartIssue
from shophub.infrastructure.bootstrap import cart_store, product_repository


def _warn_adjustments(adjustments: list[str]) -> None:
    for note in adjustments:
        click.echo(f"Warning: {note}", err=True)


def _report(outcome: CartOutcomeDTO) -> None:
    """Shared reporting for cart mutations.

    Only an unknown product is fatal; stock warnings are printed and the
    command still succeeds.
    """
    _warn_adjustments(outcome.adjustments)
    if CartIssue.UNKNOWN_PRODUCT.value in outcome.issues:
        raise click.ClickException(f"{outcome.message} (id '{outcome.product_id}')")
    if outcome.issues:
        click.echo(f"Warning: {outcome.message}", err=True)
    elif outcome.message:
        click.echo(outcome.message)
    if outcome.quantity:
        click.echo(f"Qty in cart: {outcome.quantity}")


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID to add.")
def cart_add(product_id: str) -> None:
    """Add one unit of a product to the cart."""
    handler = AddToCartHandler(
        product_repo=product_repository(),
        cart_store=cart_store(),
    )
    try:
        outcome = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _report(outcome)


@click.command("set")
@click.option("--id", "product_id", required=True, help="Product ID in the cart.")
@click.option("--quantity", required=True, type=int, help="New quantity.")
def cart_set(product_id: str, quantity: int) -> None:
    """Change the quantity of a cart line (clamped to stock)."""
    handler = UpdateCartItemHandler(
        product_repo=product_repository(),
        cart_store=cart_store(),
    )
    try:
        outcome = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _report(outcome)


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID to remove.")
def cart_remove(product_id: str) -> None:
    """Remove a product from the cart."""
    handler = RemoveFromCartHandler(
        product_repo=product_repository(),
        cart_store=cart_store(),
    )
    try:
        outcome = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _report(outcome)


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    handler = ClearCartHandler(
        product_repo=product_repository(),
        cart_store=cart_store(),
    )
    try:
        handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Cart cleared.")


@click.command("show")
def cart_show() -> None:
    """Show cart contents and totals."""
    handler = ShowCartHandler(
        product_repo=product_repository(),
        cart_store=cart_store(),
    )
    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _warn_adjustments(dto.adjustments)

    if not dto.lines:
        click.echo("Your cart is empty")
        return

    click.echo(f"  {'Product':<30} {'Qty':>5} {'Max':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*64}")
    for line in dto.lines:
        click.echo(
            f"  {line.title[:30]:<30} {line.quantity:>5} {line.max_stock:>5} "
            f"{line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*64}")
    click.echo(f"  {'Items':<30} {dto.item_count:>34}")
    click.echo(f"  {'Subtotal':<30} {dto.subtotal:>34}")
    click.echo(f"  {'Tax (10%)':<30} {dto.tax:>34}")
    click.echo(f"  {'Total':<30} {dto.total:>34}")
