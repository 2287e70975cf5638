"""
Validation rules for the products routes.

Each route has an ordered rule set. Helpers here run the rule set
against the raw request and turn accepted input into typed commands.
"""

import json
import logging
import math
from typing import Any, Mapping

from starlette.requests import Request

from app.application.catalog.dtos import CreateProductCommand, UpdateProductCommand
from app.shared.validation import (
    BODY,
    PARAMS,
    RequestInput,
    RequestValidationFailed,
    ValidationFailure,
    as_text,
    check,
    ensure_valid,
    is_boolean,
    is_int,
    is_numeric,
    is_positive,
    is_string,
    max_length,
    not_empty,
    to_boolean,
)

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 100

INVALID_ID = "El ID no es valido."
INVALID_NAME = "Nombre no valido."
EMPTY_NAME = "El nombre del producto no puede ir vacio."
NAME_TOO_LONG = f"El nombre del producto no puede superar los {NAME_MAX_LENGTH} caracteres."
NON_NUMERIC_PRICE = "No estas ingresando numeros."
EMPTY_PRICE = "El precio del producto no puede ir vacio."
NON_POSITIVE_PRICE = "El precio no puede ser negativo."
INVALID_AVAILABILITY = "El valor de disponivilidad no es valido."
INVALID_JSON = "El cuerpo de la solicitud no es JSON valido."

PRODUCT_ID_RULES = [
    check(PARAMS, "id", is_int, INVALID_ID),
]

_PRICE_RULES = [
    check(BODY, "price", is_numeric, NON_NUMERIC_PRICE),
    check(BODY, "price", not_empty, EMPTY_PRICE),
    check(BODY, "price", is_positive, NON_POSITIVE_PRICE),
]

CREATE_PRODUCT_RULES = [
    check(BODY, "name", is_string, INVALID_NAME),
    check(BODY, "name", not_empty, EMPTY_NAME),
    check(BODY, "name", max_length(NAME_MAX_LENGTH), NAME_TOO_LONG),
    *_PRICE_RULES,
]

UPDATE_PRODUCT_RULES = [
    *PRODUCT_ID_RULES,
    check(BODY, "name", not_empty, EMPTY_NAME),
    check(BODY, "name", max_length(NAME_MAX_LENGTH), NAME_TOO_LONG),
    *_PRICE_RULES,
    check(BODY, "availability", is_boolean, INVALID_AVAILABILITY),
]


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid JSON")


def _parse_finite_float(literal: str) -> float:
    number = float(literal)
    if not math.isfinite(number):
        raise ValueError(f"{literal} does not fit a float")
    return number


async def read_json_body(request: Request) -> dict[str, Any]:
    """FastAPI dependency returning the request body as a JSON object.

    Non-JSON content types and empty bodies read as ``{}``; so does a
    JSON document that is not an object. ``NaN``, ``Infinity`` and numbers
    beyond the float range are refused along with malformed JSON.

    Raises:
        RequestValidationFailed: If the body is not parseable JSON.
    """
    if "json" not in request.headers.get("content-type", ""):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        payload = json.loads(
            raw, parse_constant=_reject_constant, parse_float=_parse_finite_float
        )
    except ValueError:
        logger.info("Rejected unparseable JSON body on %s", request.url.path)
        raise RequestValidationFailed(
            [ValidationFailure(msg=INVALID_JSON, path="", location=BODY)]
        ) from None

    return payload if isinstance(payload, dict) else {}


def parse_product_id(raw_id: str) -> int:
    """Validate the ``id`` path parameter and return it as an int."""
    ensure_valid(PRODUCT_ID_RULES, RequestInput(params={"id": raw_id}))
    return int(raw_id)


def parse_create_command(body: Mapping[str, Any]) -> CreateProductCommand:
    """Validate a create body and build the command."""
    ensure_valid(CREATE_PRODUCT_RULES, RequestInput(body=body))
    return CreateProductCommand(name=body["name"], price=float(body["price"]))


def parse_update_command(raw_id: str, body: Mapping[str, Any]) -> UpdateProductCommand:
    """Validate the id and a full-update body, then build the command."""
    ensure_valid(UPDATE_PRODUCT_RULES, RequestInput(params={"id": raw_id}, body=body))
    return UpdateProductCommand(
        product_id=int(raw_id),
        name=as_text(body["name"]),
        price=float(body["price"]),
        availability=to_boolean(body["availability"]),
    )
