"""Application service: Refresh Catalog use case.

Starts a new shopping session: pulls the catalog (with freshly
generated stock quotas) from the product source and stores it as the
product set every cart command works against.
"""

from __future__ import annotations

import logging

from shophub.domain.repository.product_repository import ProductRepository
from shophub.domain.repository.product_source import ProductSource

logger = logging.getLogger(__name__)


class RefreshCatalogHandler:

    def __init__(self, product_source: ProductSource, product_repo: ProductRepository) -> None:
        self._product_source = product_source
        self._product_repo = product_repo

    def handle(self) -> int:
        """Replace the stored catalog. Returns the number of products loaded."""
        products = self._product_source.fetch()
        self._product_repo.replace_all(products)
        logger.info("Catalog refreshed with %d products", len(products))
        return len(products)
