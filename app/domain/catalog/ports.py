"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.catalog.entities import Product


class ProductRepository(ABC):
    """Port for persisting and retrieving products."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product ordered by id ascending."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Return the product with the given id, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def insert(self, name: str, price: float) -> Product:
        """Persist a new product and return it with its generated id.

        Availability is left to the store default.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, product: Product) -> Optional[Product]:
        """Overwrite name, price and availability of an existing product.

        Returns:
            The stored product, or None if the row no longer exists.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Remove a product permanently.

        Returns:
            True if a row was deleted.
        """
        raise NotImplementedError
