"""
FastAPI router for the catalog bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by the rule sets in ``rules``.
Error mapping is handled by centralized error handlers.
"""

from typing import Any

from fastapi import APIRouter, Depends, Path, status

from app.application.catalog.create_product import CreateProductUseCase
from app.application.catalog.delete_product import DeleteProductUseCase
from app.application.catalog.dtos import (
    DeleteProductCommand,
    GetProductQuery,
    ToggleAvailabilityCommand,
)
from app.application.catalog.get_product import GetProductUseCase
from app.application.catalog.list_products import ListProductsUseCase
from app.application.catalog.toggle_availability import ToggleAvailabilityUseCase
from app.application.catalog.update_product import UpdateProductUseCase
from app.interfaces.catalog.dependencies import (
    get_create_product_use_case,
    get_delete_product_use_case,
    get_list_products_use_case,
    get_product_use_case,
    get_toggle_availability_use_case,
    get_update_product_use_case,
)
from app.interfaces.catalog.rules import (
    parse_create_command,
    parse_product_id,
    parse_update_command,
    read_json_body,
)
from app.interfaces.catalog.schemas import (
    ErrorResponse,
    MessageResponse,
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductSchema,
    ProductUpdateRequest,
    ValidationErrorResponse,
)

PRODUCT_DELETED = "Producto Eliminado."

router = APIRouter(prefix="/products", tags=["Products"])


def _json_body(model: type) -> dict[str, Any]:
    """OpenAPI request body entry for a manually validated JSON body."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


@router.get(
    "",
    response_model=ProductListResponse,
    summary="Get a list of products",
    description="Return every product ordered by id.",
)
def get_products(
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
) -> ProductListResponse:
    """List all products."""
    results = use_case.execute()
    return ProductListResponse(
        data=[ProductSchema.model_validate(r) for r in results]
    )


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={400: {"description": "Bad Request - invalid id or product not found"}},
    summary="Get a product by ID",
    description="Return a product based on its unique ID.",
)
def get_product_by_id(
    product_id: str = Path(..., description="The id of the product"),
    use_case: GetProductUseCase = Depends(get_product_use_case),
) -> ProductResponse:
    """Fetch one product."""
    query = GetProductQuery(product_id=parse_product_id(product_id))
    result = use_case.execute(query)
    return ProductResponse(data=ProductSchema.model_validate(result))


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}},
    summary="Create a new product",
    description="Store a new product and return the created record.",
    openapi_extra=_json_body(ProductCreateRequest),
)
def create_product(
    body: dict[str, Any] = Depends(read_json_body),
    use_case: CreateProductUseCase = Depends(get_create_product_use_case),
) -> ProductResponse:
    """Create a product from name and price."""
    command = parse_create_command(body)
    result = use_case.execute(command)
    return ProductResponse(data=ProductSchema.model_validate(result))


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update a product with user input",
    description="Overwrite name, price and availability; return the updated product.",
    openapi_extra=_json_body(ProductUpdateRequest),
)
def update_product(
    product_id: str = Path(..., description="The id of the product"),
    body: dict[str, Any] = Depends(read_json_body),
    use_case: UpdateProductUseCase = Depends(get_update_product_use_case),
) -> ProductResponse:
    """Replace every mutable field of a product."""
    command = parse_update_command(product_id, body)
    result = use_case.execute(command)
    return ProductResponse(data=ProductSchema.model_validate(result))


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update product availability",
    description="Flip the product availability and return the updated product.",
)
def update_availability(
    product_id: str = Path(..., description="The id of the product"),
    use_case: ToggleAvailabilityUseCase = Depends(get_toggle_availability_use_case),
) -> ProductResponse:
    """Toggle availability; any request body is ignored."""
    command = ToggleAvailabilityCommand(product_id=parse_product_id(product_id))
    result = use_case.execute(command)
    return ProductResponse(data=ProductSchema.model_validate(result))


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Delete product by ID",
    description="Remove the product permanently and return a confirmation message.",
)
def delete_product(
    product_id: str = Path(..., description="The id of the product"),
    use_case: DeleteProductUseCase = Depends(get_delete_product_use_case),
) -> MessageResponse:
    """Delete a product."""
    use_case.execute(DeleteProductCommand(product_id=parse_product_id(product_id)))
    return MessageResponse(data=PRODUCT_DELETED)
