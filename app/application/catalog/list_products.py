"""
Use case: List every product in the catalog.

Input: none
Output: list[ProductResult] ordered by id ascending
Side effects: None (read-only query).
Failure cases: None.
"""

import logging

from app.application.catalog.dtos import ProductResult
from app.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class ListProductsUseCase:
    """Returns the full product catalog."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self) -> list[ProductResult]:
        """Run the list products use case."""
        products = self._product_repo.find_all()
        logger.debug("Listing %d products", len(products))
        return [ProductResult.from_entity(p) for p in products]
