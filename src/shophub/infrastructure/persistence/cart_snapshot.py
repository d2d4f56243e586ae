"""Cart <-> snapshot conversion.

A snapshot is a JSON array of lines in cart order. Each entry carries
the product ``id`` and ``quantity`` plus the display fields the cart
view needs::

    [{"id": "1", "quantity": 2, "title": "Backpack", "price": "109.95",
      "category": "men's clothing", "image": "https://..."}]
"""

from __future__ import annotations

from typing import Any

from shophub.domain.exceptions import SnapshotError, ValidationError
from shophub.domain.model.cart import Cart, CartLine
from shophub.domain.model.value_objects import Money, Quantity


def to_snapshot(cart: Cart) -> list[dict[str, Any]]:
    return [
        {
            "id": line.product_id,
            "quantity": line.quantity.value,
            "title": line.title,
            "price": str(line.unit_price.amount),
            "currency": line.unit_price.currency,
            "category": line.category,
            "image": line.image,
        }
        for line in cart.lines
    ]


def from_snapshot(raw: Any) -> Cart:
    """Rebuild a Cart from decoded JSON.

    Raises SnapshotError if anything in the snapshot is unusable; a
    half-restored cart is never returned.
    """
    if not isinstance(raw, list):
        raise SnapshotError(f"Cart snapshot must be a list, got {type(raw).__name__}")

    cart = Cart()
    try:
        for entry in raw:
            price = Money.of(entry["price"])
            cart.append(
                CartLine(
                    product_id=str(entry["id"]),
                    title=entry.get("title", ""),
                    unit_price=Money(price.amount, entry.get("currency", "USD")),
                    quantity=Quantity(entry["quantity"]),
                    category=entry.get("category", ""),
                    image=entry.get("image", ""),
                )
            )
    except (KeyError, TypeError, AttributeError, ValidationError) as exc:
        raise SnapshotError(f"Malformed cart snapshot: {exc}") from exc
    return cart
