"""Application service: Clear Cart use case."""

from __future__ import annotations

from shophub.application.cart_session import open_session
from shophub.domain.repository.cart_store import CartStore
from shophub.domain.repository.product_repository import ProductRepository


class ClearCartHandler:

    def __init__(self, product_repo: ProductRepository, cart_store: CartStore) -> None:
        self._product_repo = product_repo
        self._cart_store = cart_store

    def handle(self) -> None:
        session = open_session(self._product_repo, self._cart_store)
        session.engine.clear(session.cart)
