"""Application service: Search Products use case (query)."""

from __future__ import annotations

from shophub.application.dto import ProductDTO
from shophub.domain.model.cart import Cart
from shophub.domain.model.product import Product
from shophub.domain.repository.cart_store import CartStore
from shophub.domain.repository.product_repository import ProductRepository
from shophub.domain.service.cart_engine import CartEngine


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository, cart_store: CartStore) -> None:
        self._product_repo = product_repo
        self._cart_store = cart_store

    def handle(self, term: str = "") -> list[ProductDTO]:
        """List products whose title contains *term* (case-insensitive).

        An empty term lists the whole catalog. The saved cart is read but
        never rewritten.
        """
        products = self._product_repo.list_all()
        engine = CartEngine(products, self._cart_store)
        cart = self._cart_store.load() or Cart()
        return [
            self._to_dto(product, cart, engine)
            for product in products
            if product.matches(term)
        ]

    @staticmethod
    def _to_dto(product: Product, cart: Cart, engine: CartEngine) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            title=product.title,
            category=product.category,
            price=str(product.price),
            stock=product.stock,
            available=engine.available_stock(cart, product.id),
            in_stock=not engine.is_out_of_stock(product.id),
            rating=product.rating.rate if product.rating else None,
            rating_count=product.rating.count if product.rating else 0,
        )
