"""
Use case: Overwrite an existing product.

Input: UpdateProductCommand (product_id, name, price, availability)
Output: ProductResult
Side effects: Updates one row.
Failure cases: ProductNotFoundError.
"""

import logging
from dataclasses import replace

from app.application.catalog.dtos import ProductResult, UpdateProductCommand
from app.domain.catalog.errors import ProductNotFoundError
from app.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductUseCase:
    """Replaces name, price and availability of a stored product."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self, command: UpdateProductCommand) -> ProductResult:
        """Run the update product use case.

        Args:
            command: Target id and the new field values.

        Returns:
            The updated product.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        product = self._product_repo.find_by_id(command.product_id)
        if product is None:
            raise ProductNotFoundError(command.product_id)

        updated = self._product_repo.update(
            replace(
                product,
                name=command.name,
                price=command.price,
                availability=command.availability,
            )
        )
        # Deleted between lookup and write
        if updated is None:
            raise ProductNotFoundError(command.product_id)

        logger.info("Updated product id=%d", updated.id)
        return ProductResult.from_entity(updated)
