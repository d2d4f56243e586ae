"""Application service: Remove From Cart use case."""

from __future__ import annotations

from shophub.application.cart_session import open_session, to_outcome
from shophub.application.dto import CartOutcomeDTO
from shophub.domain.repository.cart_store import CartStore
from shophub.domain.repository.product_repository import ProductRepository


class RemoveFromCartHandler:

    def __init__(self, product_repo: ProductRepository, cart_store: CartStore) -> None:
        self._product_repo = product_repo
        self._cart_store = cart_store

    def handle(self, product_id: str) -> CartOutcomeDTO:
        session = open_session(self._product_repo, self._cart_store)
        result = session.engine.remove(session.cart, product_id)
        return to_outcome(result, session)
