"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection. The engine is
created once by ``create_app`` and read from ``app.state``.
"""

from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from app.application.catalog.create_product import CreateProductUseCase
from app.application.catalog.delete_product import DeleteProductUseCase
from app.application.catalog.get_product import GetProductUseCase
from app.application.catalog.list_products import ListProductsUseCase
from app.application.catalog.toggle_availability import ToggleAvailabilityUseCase
from app.application.catalog.update_product import UpdateProductUseCase
from app.domain.catalog.ports import ProductRepository
from app.infrastructure.catalog.product_repository import SqlProductRepository


def get_engine(request: Request) -> Engine:
    """Return the engine owned by the running application."""
    return request.app.state.engine


def get_product_repository(engine: Engine = Depends(get_engine)) -> ProductRepository:
    """Build the product repository on the application engine."""
    return SqlProductRepository(engine)


def get_list_products_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> ListProductsUseCase:
    return ListProductsUseCase(product_repo=repo)


def get_product_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> GetProductUseCase:
    return GetProductUseCase(product_repo=repo)


def get_create_product_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> CreateProductUseCase:
    return CreateProductUseCase(product_repo=repo)


def get_update_product_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> UpdateProductUseCase:
    return UpdateProductUseCase(product_repo=repo)


def get_toggle_availability_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> ToggleAvailabilityUseCase:
    return ToggleAvailabilityUseCase(product_repo=repo)


def get_delete_product_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> DeleteProductUseCase:
    return DeleteProductUseCase(product_repo=repo)
