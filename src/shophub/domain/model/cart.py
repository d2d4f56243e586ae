"""Cart aggregate: the lines a shopper has picked and the totals over them.

The Cart owns its lines and keeps them in insertion order, one line per
product. Stock ceilings are *not* known here; they are enforced by the
cart engine, which has the product catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from shophub.domain.exceptions import ValidationError
from shophub.domain.model.product import Product
from shophub.domain.model.value_objects import Money, Quantity

TAX_RATE = Decimal("0.10")


@dataclass
class CartLine:
    """One product/quantity pairing.

    ``title``, ``unit_price``, ``category`` and ``image`` are copied from
    the product when the line is opened so the cart can be shown (and
    totalled) without the catalog.
    """

    product_id: str
    title: str
    unit_price: Money  # snapshot taken when the line was opened
    quantity: Quantity
    category: str = ""
    image: str = ""

    @staticmethod
    def open(product: Product) -> CartLine:
        """Start a new line holding a single unit of *product*."""
        return CartLine(
            product_id=product.id,
            title=product.title,
            unit_price=product.price,
            quantity=Quantity(1),
            category=product.category,
            image=product.image,
        )

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    def change_quantity(self, value: int) -> None:
        self.quantity = Quantity(value)


@dataclass
class Cart:
    """Aggregate root for a shopper's cart.

    Invariant: at most one line per product id. Totals are computed on
    every read from the lines themselves.
    """

    lines: list[CartLine] = field(default_factory=list)

    # --- Line access ----------------------------------------------------------

    def get_line(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def quantity_of(self, product_id: str) -> int:
        """Quantity held for *product_id*, 0 when there is no line."""
        line = self.get_line(product_id)
        return line.quantity.value if line is not None else 0

    def append(self, line: CartLine) -> None:
        if self.get_line(line.product_id) is not None:
            raise ValidationError(
                f"Cart already has a line for product '{line.product_id}'"
            )
        self.lines.append(line)

    def discard(self, product_id: str) -> bool:
        """Drop the line for *product_id*. Returns False if there was none."""
        for i, line in enumerate(self.lines):
            if line.product_id == product_id:
                del self.lines[i]
                return True
        return False

    def clear(self) -> None:
        self.lines.clear()

    # --- Computed properties --------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)

    @property
    def tax(self) -> Money:
        return self.subtotal * TAX_RATE

    @property
    def total(self) -> Money:
        return self.subtotal * (1 + TAX_RATE)
