"""Abstract upstream that supplies the catalog at session start."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shophub.domain.model.product import Product


class ProductSource(ABC):

    @abstractmethod
    def fetch(self) -> list[Product]:
        """Load the catalog, stock quotas included.

        Raises UpstreamError if the catalog cannot be obtained.
        """
