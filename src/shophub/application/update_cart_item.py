"""Application service: Update Cart Item use case.

The requested quantity is clamped to ``[1, stock]``; the outcome says
whether clamping happened.
"""

from __future__ import annotations

from shophub.application.cart_session import open_session, to_outcome
from shophub.application.dto import CartOutcomeDTO
from shophub.domain.repository.cart_store import CartStore
from shophub.domain.repository.product_repository import ProductRepository


class UpdateCartItemHandler:

    def __init__(self, product_repo: ProductRepository, cart_store: CartStore) -> None:
        self._product_repo = product_repo
        self._cart_store = cart_store

    def handle(self, product_id: str, quantity: int) -> CartOutcomeDTO:
        session = open_session(self._product_repo, self._cart_store)
        result = session.engine.set_quantity(session.cart, product_id, quantity)
        return to_outcome(result, session)
