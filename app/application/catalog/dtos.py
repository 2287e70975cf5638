"""
Data Transfer Objects for the catalog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from app.domain.catalog.entities import Product


@dataclass(frozen=True)
class GetProductQuery:
    """Input DTO for fetching a single product."""

    product_id: int


@dataclass(frozen=True)
class CreateProductCommand:
    """Input DTO for creating a product.

    Attributes:
        name: Product display name (already validated non-empty).
        price: Unit price (already validated > 0).
    """

    name: str
    price: float


@dataclass(frozen=True)
class UpdateProductCommand:
    """Input DTO for a full product update.

    Attributes:
        product_id: Id of the product to overwrite.
        name: New display name.
        price: New unit price.
        availability: New availability flag.
    """

    product_id: int
    name: str
    price: float
    availability: bool


@dataclass(frozen=True)
class ToggleAvailabilityCommand:
    """Input DTO for flipping a product's availability."""

    product_id: int


@dataclass(frozen=True)
class DeleteProductCommand:
    """Input DTO for deleting a product."""

    product_id: int


@dataclass(frozen=True)
class ProductResult:
    """Output DTO describing a stored product."""

    id: int
    name: str
    price: float
    availability: bool

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResult":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            availability=product.availability,
        )
