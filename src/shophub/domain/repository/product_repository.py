"""Abstract repository for the session's product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live in the infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shophub.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in catalog order."""

    @abstractmethod
    def replace_all(self, products: list[Product]) -> None:
        """Swap the whole catalog for a freshly loaded one."""
