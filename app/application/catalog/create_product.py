"""
Use case: Create a new product.

Input: CreateProductCommand (name, price)
Output: ProductResult with the store-generated id
Side effects: Inserts one row.
Failure cases: None beyond store errors.
"""

import logging

from app.application.catalog.dtos import CreateProductCommand, ProductResult
from app.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Orchestrates product creation.

    Only name and price come from the caller; availability is
    left to the store default.
    """

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self, command: CreateProductCommand) -> ProductResult:
        """Run the create product use case.

        Args:
            command: Validated name and price.

        Returns:
            The created product.
        """
        product = self._product_repo.insert(name=command.name, price=command.price)
        logger.info("Created product id=%d", product.id)
        return ProductResult.from_entity(product)
