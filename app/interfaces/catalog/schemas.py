"""
Pydantic schemas for the products API contract.

Response envelopes wrap payloads in ``data``; failures use ``error``
or ``errors``. Request models document the expected bodies in the
OpenAPI schema; field-level checks run in the rules module so that
every failure is reported together.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductSchema(BaseModel):
    """A product as returned by the API."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Monitor Curvo 49 pulgadas",
                "price": 399,
                "availability": True,
            }
        },
    )

    id: int = Field(..., description="The product id")
    name: str = Field(..., description="The product name")
    price: float = Field(..., description="The product price")
    availability: bool = Field(..., description="The product availability")


class ProductCreateRequest(BaseModel):
    """Body accepted by POST /products."""

    name: str = Field(..., examples=["Monitor Curvo 49 pulgadas"])
    price: float = Field(..., gt=0, examples=[399])


class ProductUpdateRequest(ProductCreateRequest):
    """Body accepted by PUT /products/{id}."""

    availability: bool = Field(..., examples=[True])


class ProductResponse(BaseModel):
    """Envelope for a single product."""

    data: ProductSchema


class ProductListResponse(BaseModel):
    """Envelope for the product listing."""

    data: list[ProductSchema]


class MessageResponse(BaseModel):
    """Envelope for a plain confirmation message."""

    data: str


class ValidationErrorItem(BaseModel):
    """A single failed check."""

    type: str = "field"
    value: Optional[Any] = None
    msg: str
    path: str
    location: str


class ValidationErrorResponse(BaseModel):
    """Returned with 400 when request validation fails."""

    errors: list[ValidationErrorItem]


class ErrorResponse(BaseModel):
    """Standard error response returned by error handlers."""

    error: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str
