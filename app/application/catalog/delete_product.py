"""
Use case: Permanently delete a product.

Input: DeleteProductCommand (product_id)
Output: None
Side effects: Deletes one row. No tombstone is kept.
Failure cases: ProductNotFoundError.
"""

import logging

from app.application.catalog.dtos import DeleteProductCommand
from app.domain.catalog.errors import ProductNotFoundError
from app.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    """Removes a product from the catalog."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self, command: DeleteProductCommand) -> None:
        """Run the delete product use case.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        product = self._product_repo.find_by_id(command.product_id)
        if product is None:
            raise ProductNotFoundError(command.product_id)

        if not self._product_repo.delete(product.id):
            raise ProductNotFoundError(command.product_id)

        logger.info("Deleted product id=%d", product.id)
