"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Product:
    """A product offered in the catalog.

    Attributes:
        id: Store-generated identifier, immutable once assigned.
        name: Non-empty display name.
        price: Unit price, always greater than zero.
        availability: Whether the product can currently be ordered.
    """

    id: int
    name: str
    price: float
    availability: bool = True

    def with_availability_toggled(self) -> "Product":
        """Return a copy with availability negated."""
        return replace(self, availability=not self.availability)
