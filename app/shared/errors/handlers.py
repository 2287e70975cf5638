"""
Centralized error handlers for FastAPI.

Maps validation failures and domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.catalog.errors import CatalogDomainError, ProductNotFoundError
from app.shared.validation import BODY, RequestValidationFailed

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

PRODUCT_NOT_FOUND = "Producto no encontrado."


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error})


def _validation_response(errors: list[dict]) -> JSONResponse:
    return JSONResponse(status_code=HTTP_400, content={"errors": errors})


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationFailed)
    async def handle_validation_failed(
        request: Request, exc: RequestValidationFailed
    ) -> JSONResponse:
        """Answer 400 with every failed check."""
        logger.info(
            "Validation failed on %s %s: %d error(s)",
            request.method,
            request.url.path,
            len(exc.failures),
        )
        return _validation_response([f.to_dict() for f in exc.failures])

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Reshape FastAPI's own validation errors into the same format."""
        errors = []
        for error in exc.errors():
            loc = [str(part) for part in error.get("loc", ())]
            location = loc[0] if loc else BODY
            errors.append(
                {
                    "type": "field",
                    "msg": error.get("msg", "Invalid value"),
                    "path": ".".join(loc[1:]),
                    "location": "params" if location == "path" else location,
                }
            )
        logger.info("Request validation error on %s", request.url.path)
        return _validation_response(errors)

    @app.exception_handler(ProductNotFoundError)
    async def handle_product_not_found(
        request: Request, exc: ProductNotFoundError
    ) -> JSONResponse:
        """Handle missing product errors.

        Reads answer 400 while updates and deletes answer 404; existing
        clients depend on both codes.
        """
        logger.warning("Product not found: %s", exc.product_id)
        status_code = HTTP_400 if request.method == "GET" else HTTP_404
        return _error_response(status_code, PRODUCT_NOT_FOUND)

    @app.exception_handler(CatalogDomainError)
    async def handle_catalog_domain(
        _request: Request, exc: CatalogDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled catalog domain errors."""
        logger.error("Unhandled catalog domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
