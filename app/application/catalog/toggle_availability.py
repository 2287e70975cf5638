"""
Use case: Flip a product's availability.

Input: ToggleAvailabilityCommand (product_id)
Output: ProductResult
Side effects: Updates one row.
Failure cases: ProductNotFoundError.
"""

import logging

from app.application.catalog.dtos import ProductResult, ToggleAvailabilityCommand
from app.domain.catalog.errors import ProductNotFoundError
from app.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class ToggleAvailabilityUseCase:
    """Negates the availability flag of a stored product.

    The new value never comes from the caller, so applying the
    use case twice restores the original state.
    """

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self, command: ToggleAvailabilityCommand) -> ProductResult:
        """Run the toggle availability use case.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        product = self._product_repo.find_by_id(command.product_id)
        if product is None:
            raise ProductNotFoundError(command.product_id)

        updated = self._product_repo.update(product.with_availability_toggled())
        if updated is None:
            raise ProductNotFoundError(command.product_id)

        logger.info(
            "Product id=%d availability set to %s", updated.id, updated.availability
        )
        return ProductResult.from_entity(updated)
