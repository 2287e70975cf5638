"""
Tests for the catalog application layer (use cases).

Tests use cases against an in-memory repository. No real infrastructure needed.
Each test verifies orchestration logic: lookups, not-found failures, writes.
"""

from typing import Optional

import pytest

from app.application.catalog.create_product import CreateProductUseCase
from app.application.catalog.delete_product import DeleteProductUseCase
from app.application.catalog.dtos import (
    CreateProductCommand,
    DeleteProductCommand,
    GetProductQuery,
    ProductResult,
    ToggleAvailabilityCommand,
    UpdateProductCommand,
)
from app.application.catalog.get_product import GetProductUseCase
from app.application.catalog.list_products import ListProductsUseCase
from app.application.catalog.toggle_availability import ToggleAvailabilityUseCase
from app.application.catalog.update_product import UpdateProductUseCase
from app.domain.catalog.entities import Product
from app.domain.catalog.errors import CatalogDomainError, ProductNotFoundError
from app.domain.catalog.ports import ProductRepository


class InMemoryProductRepository(ProductRepository):
    """Dict-backed repository."""

    def __init__(self, products: Optional[list[Product]] = None) -> None:
        self.rows: dict[int, Product] = {p.id: p for p in products or []}
        self._next_id = max(self.rows, default=0) + 1

    def find_all(self) -> list[Product]:
        return [self.rows[k] for k in sorted(self.rows)]

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return self.rows.get(product_id)

    def insert(self, name: str, price: float) -> Product:
        product = Product(id=self._next_id, name=name, price=price)
        self.rows[product.id] = product
        self._next_id += 1
        return product

    def update(self, product: Product) -> Optional[Product]:
        if product.id not in self.rows:
            return None
        self.rows[product.id] = product
        return product

    def delete(self, product_id: int) -> bool:
        return self.rows.pop(product_id, None) is not None


class VanishingProductRepository(InMemoryProductRepository):
    """Loses rows between lookup and write, like a concurrent delete."""

    def update(self, product: Product) -> Optional[Product]:
        return None

    def delete(self, product_id: int) -> bool:
        return False


@pytest.fixture
def repo() -> InMemoryProductRepository:
    return InMemoryProductRepository(
        [
            Product(id=2, name="Mouse", price=20.0, availability=False),
            Product(id=1, name="Monitor", price=399.0),
        ]
    )


class TestProductEntity:
    """Tests for the Product entity."""

    def test_defaults_to_available(self) -> None:
        assert Product(id=1, name="Monitor", price=10.0).availability is True

    def test_toggle_returns_new_instance(self) -> None:
        product = Product(id=1, name="Monitor", price=10.0)
        toggled = product.with_availability_toggled()
        assert toggled.availability is False
        assert product.availability is True


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_product_not_found_carries_id(self) -> None:
        error = ProductNotFoundError(7)
        assert error.product_id == 7
        assert "7" in error.message
        assert isinstance(error, CatalogDomainError)


class TestListProductsUseCase:
    def test_returns_products_ordered_by_id(self, repo) -> None:
        results = ListProductsUseCase(repo).execute()
        assert [r.id for r in results] == [1, 2]
        assert all(isinstance(r, ProductResult) for r in results)


class TestGetProductUseCase:
    def test_returns_product(self, repo) -> None:
        result = GetProductUseCase(repo).execute(GetProductQuery(product_id=2))
        assert result == ProductResult(id=2, name="Mouse", price=20.0, availability=False)

    def test_missing_product_raises(self, repo) -> None:
        with pytest.raises(ProductNotFoundError):
            GetProductUseCase(repo).execute(GetProductQuery(product_id=99))


class TestCreateProductUseCase:
    def test_inserts_available_product(self, repo) -> None:
        result = CreateProductUseCase(repo).execute(
            CreateProductCommand(name="Teclado", price=50.0)
        )
        assert result.id == 3
        assert result.availability is True
        assert repo.rows[3].name == "Teclado"


class TestUpdateProductUseCase:
    def test_overwrites_all_fields(self, repo) -> None:
        command = UpdateProductCommand(
            product_id=1, name="Monitor Curvo", price=300.0, availability=False
        )
        result = UpdateProductUseCase(repo).execute(command)
        assert result == ProductResult(
            id=1, name="Monitor Curvo", price=300.0, availability=False
        )
        assert repo.rows[1].name == "Monitor Curvo"

    def test_missing_product_raises(self, repo) -> None:
        command = UpdateProductCommand(
            product_id=99, name="X", price=1.0, availability=True
        )
        with pytest.raises(ProductNotFoundError):
            UpdateProductUseCase(repo).execute(command)

    def test_row_deleted_before_write_raises(self) -> None:
        repo = VanishingProductRepository([Product(id=1, name="A", price=1.0)])
        command = UpdateProductCommand(product_id=1, name="B", price=2.0, availability=True)
        with pytest.raises(ProductNotFoundError):
            UpdateProductUseCase(repo).execute(command)


class TestToggleAvailabilityUseCase:
    def test_negates_availability(self, repo) -> None:
        use_case = ToggleAvailabilityUseCase(repo)
        assert use_case.execute(ToggleAvailabilityCommand(product_id=2)).availability is True
        assert use_case.execute(ToggleAvailabilityCommand(product_id=2)).availability is False

    def test_missing_product_raises(self, repo) -> None:
        with pytest.raises(ProductNotFoundError):
            ToggleAvailabilityUseCase(repo).execute(ToggleAvailabilityCommand(product_id=99))


class TestDeleteProductUseCase:
    def test_removes_product(self, repo) -> None:
        DeleteProductUseCase(repo).execute(DeleteProductCommand(product_id=1))
        assert 1 not in repo.rows

    def test_missing_product_raises(self, repo) -> None:
        with pytest.raises(ProductNotFoundError):
            DeleteProductUseCase(repo).execute(DeleteProductCommand(product_id=99))

    def test_row_deleted_concurrently_raises(self) -> None:
        repo = VanishingProductRepository([Product(id=1, name="A", price=1.0)])
        with pytest.raises(ProductNotFoundError):
            DeleteProductUseCase(repo).execute(DeleteProductCommand(product_id=1))
