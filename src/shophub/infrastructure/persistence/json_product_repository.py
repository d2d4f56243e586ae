"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from shophub.domain.exceptions import CatalogError, ValidationError
from shophub.domain.model.product import Product, Rating
from shophub.domain.model.value_objects import Money
from shophub.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def replace_all(self, products: list[Product]) -> None:
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {item["id"]: self._to_domain(item) for item in raw}
        except (ValueError, KeyError, TypeError, InvalidOperation, ValidationError) as exc:
            raise CatalogError(
                f"Product catalog {self._file_path} is unreadable ({exc}); "
                f"run 'shophub catalog refresh'"
            ) from exc

    def _persist(self, products: list[Product]) -> None:
        raw = [self._to_raw(p) for p in products]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "title": product.title,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
            "category": product.category,
            "description": product.description,
            "image": product.image,
            "rating": (
                {"rate": product.rating.rate, "count": product.rating.count}
                if product.rating is not None
                else None
            ),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        rating = raw.get("rating")
        return Product(
            id=raw["id"],
            title=raw["title"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            stock=raw["stock"],
            category=raw.get("category", ""),
            description=raw.get("description", ""),
            image=raw.get("image", ""),
            rating=Rating(rating["rate"], rating["count"]) if rating else None,
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
