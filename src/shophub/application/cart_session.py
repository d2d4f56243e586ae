"""Shared setup for the cart use cases.

Every cart command starts a session the same way: load the catalog,
restore the saved cart and reconcile it against the current quotas.
"""

from __future__ import annotations

from dataclasses import dataclass

from shophub.application.dto import CartOutcomeDTO
from shophub.domain.model.cart import Cart
from shophub.domain.repository.cart_store import CartStore
from shophub.domain.repository.product_repository import ProductRepository
from shophub.domain.service.cart_engine import CartEngine, CartResult, StockAdjustment


@dataclass
class CartSession:
    cart: Cart
    engine: CartEngine
    adjustments: list[StockAdjustment]


def open_session(product_repo: ProductRepository, cart_store: CartStore) -> CartSession:
    engine = CartEngine(product_repo.list_all(), cart_store)
    cart = cart_store.load() or Cart()
    adjustments = engine.reconcile(cart)
    return CartSession(cart=cart, engine=engine, adjustments=adjustments)


def describe_adjustment(adj: StockAdjustment) -> str:
    if adj.dropped:
        return f"{adj.title or adj.product_id} is no longer available and was removed."
    return (
        f"{adj.title or adj.product_id} reduced from {adj.previous_quantity} "
        f"to {adj.new_quantity} (stock changed)."
    )


def to_outcome(result: CartResult, session: CartSession) -> CartOutcomeDTO:
    return CartOutcomeDTO(
        ok=result.ok,
        product_id=result.product_id,
        message=result.message,
        issues=[issue.value for issue in result.issues],
        quantity=session.cart.quantity_of(result.product_id),
        adjustments=[describe_adjustment(a) for a in session.adjustments],
    )
