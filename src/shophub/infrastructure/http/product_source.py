"""Catalog source backed by a remote JSON product feed.

The feed has no notion of stock, so each product gets a random quota in
``[0, max_stock]`` every time the catalog is fetched.
"""

from __future__ import annotations

import random
from typing import Any

import httpx

from shophub.domain.exceptions import UpstreamError, ValidationError
from shophub.domain.model.product import Product, Rating
from shophub.domain.model.value_objects import Money
from shophub.domain.repository.product_source import ProductSource
from shophub.infrastructure.logging import get_logger

logger = get_logger(__name__)


class HttpProductSource(ProductSource):

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        max_stock: int = 20,
        rng: random.Random | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._max_stock = max_stock
        self._rng = rng or random.Random()
        self._client = client

    def fetch(self) -> list[Product]:
        try:
            response = self._get()
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Failed to fetch products from %s: %s", self._url, exc)
            raise UpstreamError("Error loading products. Please try again.") from exc

        if not isinstance(payload, list):
            raise UpstreamError(
                f"Expected a list of products from {self._url}, "
                f"got {type(payload).__name__}"
            )

        try:
            products = [self._to_product(raw) for raw in payload]
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise UpstreamError(f"Malformed product in feed: {exc}") from exc

        logger.info("Fetched %d products from %s", len(products), self._url)
        return products

    def _get(self) -> httpx.Response:
        if self._client is not None:
            return self._client.get(self._url, timeout=self._timeout)
        with httpx.Client(timeout=self._timeout) as client:
            return client.get(self._url)

    def _to_product(self, raw: dict[str, Any]) -> Product:
        rating = raw.get("rating")
        return Product(
            id=str(raw["id"]),
            title=raw["title"],
            price=Money.of(raw["price"]),
            stock=self._rng.randint(0, self._max_stock),
            category=raw.get("category", ""),
            description=raw.get("description", ""),
            image=raw.get("image", ""),
            rating=(
                Rating(rate=float(rating.get("rate", 0)), count=int(rating.get("count", 0)))
                if isinstance(rating, dict)
                else None
            ),
        )
