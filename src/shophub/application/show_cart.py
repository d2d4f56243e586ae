"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from shophub.application.cart_session import (
    CartSession,
    describe_adjustment,
    open_session,
)
from shophub.application.dto import CartDTO, CartLineDTO
from shophub.domain.repository.cart_store import CartStore
from shophub.domain.repository.product_repository import ProductRepository


class ShowCartHandler:

    def __init__(self, product_repo: ProductRepository, cart_store: CartStore) -> None:
        self._product_repo = product_repo
        self._cart_store = cart_store

    def handle(self) -> CartDTO:
        """Show the cart as it stands against this session's quotas.

        Opening the session reconciles the saved cart, so a stale snapshot
        is rewritten here too; otherwise the next command would report the
        same adjustments again.
        """
        session = open_session(self._product_repo, self._cart_store)
        return self._to_dto(session)

    @staticmethod
    def _to_dto(session: CartSession) -> CartDTO:
        cart = session.cart
        return CartDTO(
            lines=[
                CartLineDTO(
                    product_id=line.product_id,
                    title=line.title,
                    category=line.category,
                    quantity=line.quantity.value,
                    max_stock=session.engine.stock_of(line.product_id),
                    unit_price=str(line.unit_price),
                    line_total=str(line.line_total),
                )
                for line in cart.lines
            ],
            item_count=cart.item_count,
            subtotal=str(cart.subtotal),
            tax=str(cart.tax),
            total=str(cart.total),
            adjustments=[describe_adjustment(a) for a in session.adjustments],
        )
