"""Domain service: Cart Engine.

Applies shopper actions to a Cart while keeping every line within the
stock quota of its product. The engine holds the session's catalog and
the persistence port; the Cart itself is owned by the caller and passed
into each operation.

Nothing here raises for stock or lookup problems. Each operation returns
a ``CartResult`` whose ``issues`` tell the caller what went wrong (or
what was clamped), and the caller decides how to show it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from shophub.domain.model.cart import Cart, CartLine
from shophub.domain.model.product import Product
from shophub.domain.repository.cart_store import CartStore

logger = logging.getLogger(__name__)

MIN_QUANTITY = 1


class CartIssue(Enum):
    UNKNOWN_PRODUCT = "UNKNOWN_PRODUCT"
    STOCK_EXCEEDED = "STOCK_EXCEEDED"
    BELOW_MINIMUM = "BELOW_MINIMUM"


@dataclass(frozen=True)
class CartResult:
    """Outcome of one engine operation.

    ``ok`` is False only when the cart was left untouched because the
    request could not be applied at all. Clamping warnings come back
    with ``ok=True``.
    """

    ok: bool
    product_id: str
    line: CartLine | None = None
    issues: tuple[CartIssue, ...] = ()
    message: str = ""
    stock: int | None = None

    def has(self, issue: CartIssue) -> bool:
        return issue in self.issues


@dataclass(frozen=True)
class StockAdjustment:
    """A change made to a restored cart so it fits the current quotas."""

    product_id: str
    title: str
    previous_quantity: int
    new_quantity: int  # 0 means the line was dropped

    @property
    def dropped(self) -> bool:
        return self.new_quantity == 0


class CartEngine:

    def __init__(self, products: Iterable[Product], store: CartStore) -> None:
        self._products: dict[str, Product] = {p.id: p for p in products}
        self._store = store

    # --- Mutations ------------------------------------------------------------

    def add_one(self, cart: Cart, product_id: str) -> CartResult:
        """Put one more unit of a product into the cart.

        Opens a new line at the end of the cart if the product is not
        there yet. Refuses when the cart already holds the full quota.
        """
        product = self._products.get(product_id)
        if product is None:
            return _unknown(product_id)

        current = cart.quantity_of(product_id)
        if current >= product.stock:
            return CartResult(
                ok=False,
                product_id=product_id,
                line=cart.get_line(product_id),
                issues=(CartIssue.STOCK_EXCEEDED,),
                message=f"Cannot add more! Only {product.stock} available in stock.",
                stock=product.stock,
            )

        line = cart.get_line(product_id)
        if line is None:
            line = CartLine.open(product)
            cart.append(line)
        else:
            line.change_quantity(current + 1)

        self._store.save(cart)
        return CartResult(
            ok=True,
            product_id=product_id,
            line=line,
            message=f"{product.title} added to cart!",
            stock=product.stock,
        )

    def set_quantity(self, cart: Cart, product_id: str, requested: int) -> CartResult:
        """Set a line's quantity, clamped to ``[1, stock]``.

        Out-of-range requests still succeed with the clamped value and a
        BELOW_MINIMUM or STOCK_EXCEEDED issue attached.
        """
        line = cart.get_line(product_id)
        product = self._products.get(product_id)
        if line is None or product is None:
            return _unknown(product_id)

        if product.stock < MIN_QUANTITY:
            # No quantity satisfies the quota, so the line cannot stay.
            cart.discard(product_id)
            self._store.save(cart)
            return CartResult(
                ok=True,
                product_id=product_id,
                issues=(CartIssue.STOCK_EXCEEDED,),
                message=f"Maximum available is {product.stock}",
                stock=product.stock,
            )

        issues: tuple[CartIssue, ...] = ()
        message = ""
        effective = requested
        if requested < MIN_QUANTITY:
            effective = MIN_QUANTITY
            issues = (CartIssue.BELOW_MINIMUM,)
            message = f"Minimum quantity is {MIN_QUANTITY}"
        elif requested > product.stock:
            effective = product.stock
            issues = (CartIssue.STOCK_EXCEEDED,)
            message = f"Maximum available is {product.stock}"

        line.change_quantity(effective)
        self._store.save(cart)
        return CartResult(
            ok=True,
            product_id=product_id,
            line=line,
            issues=issues,
            message=message,
            stock=product.stock,
        )

    def remove(self, cart: Cart, product_id: str) -> CartResult:
        """Delete a product's line. Removing an absent line is a no-op."""
        cart.discard(product_id)
        self._store.save(cart)
        return CartResult(ok=True, product_id=product_id, message="Item removed from cart.")

    def clear(self, cart: Cart) -> None:
        cart.clear()
        self._store.save(cart)

    def reconcile(self, cart: Cart) -> list[StockAdjustment]:
        """Bring a restored cart back within the current stock quotas.

        Quotas are regenerated on every catalog load, so a saved cart may
        hold more than is now available. Lines over quota are clamped;
        lines whose product vanished or has no stock are dropped. The
        cart is saved only if something changed.
        """
        adjustments: list[StockAdjustment] = []
        for line in list(cart.lines):
            product = self._products.get(line.product_id)
            previous = line.quantity.value
            if product is None or product.stock < MIN_QUANTITY:
                cart.discard(line.product_id)
                adjustments.append(
                    StockAdjustment(line.product_id, line.title, previous, 0)
                )
            elif previous > product.stock:
                line.change_quantity(product.stock)
                adjustments.append(
                    StockAdjustment(line.product_id, line.title, previous, product.stock)
                )

        if adjustments:
            for adj in adjustments:
                logger.warning(
                    "Cart line %s adjusted from %d to %d to fit current stock",
                    adj.product_id, adj.previous_quantity, adj.new_quantity,
                )
            self._store.save(cart)
        return adjustments

    # --- Queries --------------------------------------------------------------

    def stock_of(self, product_id: str) -> int:
        product = self._products.get(product_id)
        return product.stock if product is not None else 0

    def available_stock(self, cart: Cart, product_id: str) -> int:
        """Units still addable: quota minus what the cart holds, never below 0."""
        product = self._products.get(product_id)
        if product is None:
            return 0
        return max(0, product.stock - cart.quantity_of(product_id))

    def is_out_of_stock(self, product_id: str) -> bool:
        product = self._products.get(product_id)
        return product is None or product.is_out_of_stock


def _unknown(product_id: str) -> CartResult:
    return CartResult(
        ok=False,
        product_id=product_id,
        issues=(CartIssue.UNKNOWN_PRODUCT,),
        message="Product not found",
    )
