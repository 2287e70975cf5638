"""
Use case: Fetch a single product by id.

Input: GetProductQuery (product_id)
Output: ProductResult
Side effects: None (read-only query).
Failure cases: ProductNotFoundError.
"""

import logging

from app.application.catalog.dtos import GetProductQuery, ProductResult
from app.domain.catalog.errors import ProductNotFoundError
from app.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class GetProductUseCase:
    """Looks up one product by its identifier."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self, query: GetProductQuery) -> ProductResult:
        """Run the get product use case.

        Args:
            query: Query carrying the product id.

        Returns:
            The stored product.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        product = self._product_repo.find_by_id(query.product_id)
        if product is None:
            raise ProductNotFoundError(query.product_id)
        return ProductResult.from_entity(product)
