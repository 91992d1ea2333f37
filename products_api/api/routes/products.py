"""Product Routes - the routing table and resource handlers for /api/products.

Each route is the chain [rule set] -> [validation gate] -> [handler]:
the gate dependency is declared first, so a request that fails validation
never reaches the handler or opens a storage session.

Invariants:
    - Every handler performs one storage read and at most one storage write
    - Lookups by key go through get_product_or_404; a missing row, or an id
      wider than any storage key, answers 404 before any mutating call
    - Success bodies are {"data": ...}
"""

import logging

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from products_api.api.validation_gate import ValidatedInput, validation_gate
from products_api.core.errors import ResourceNotFoundError
from products_api.core.product_rules import (
    CREATE_PRODUCT_RULES,
    PRODUCT_ID_RULES,
    REPLACE_PRODUCT_RULES,
)
from products_api.core.repository_protocols import ProductLike, ProductRepository
from products_api.infrastructure.product_repository import get_product_repository
from products_api.schemas.product import (
    ErrorResponse,
    ProductCreate,
    ProductDeletedResponse,
    ProductListResponse,
    ProductRead,
    ProductReplace,
    ProductResponse,
    ValidationErrorResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/products", tags=["Products"])

PRODUCT_DELETED_MESSAGE = "Producto eliminado"

# Digits in the widest storage key (int32)
MAX_KEY_DIGITS = 10


# ─── OpenAPI fragments ───────────────────────────────────────────
# The gate reads params and body itself, so their schemas are documented here.

def _id_parameter(description: str) -> dict:
    return {
        "parameters": [{
            "in": "path",
            "name": "id",
            "description": description,
            "required": True,
            "schema": {"type": "integer"},
        }],
    }


def _json_body(schema: type[BaseModel]) -> dict:
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": schema.model_json_schema()},
            },
        },
    }


_BAD_REQUEST = {
    status.HTTP_400_BAD_REQUEST: {
        "model": ValidationErrorResponse,
        "description": "Bad request - invalid ID or input data",
    },
}
_NOT_FOUND = {
    status.HTTP_404_NOT_FOUND: {
        "model": ErrorResponse, "description": "Product not found",
    },
}
_SERVER_ERROR = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {
        "model": ErrorResponse, "description": "Storage failure",
    },
}


# ─── Helpers ─────────────────────────────────────────────────────

async def get_product_or_404(
    product_id: int, repository: ProductRepository,
) -> ProductLike:
    product = await repository.find_by_key(product_id)
    if product is None:
        raise ResourceNotFoundError("Product", product_id)
    return product


def requested_id(payload: ValidatedInput) -> int:
    """Path id as an int; an id wider than any storage key cannot exist."""
    digits = str(payload.params["id"]).lstrip("+-").lstrip("0")
    if len(digits) > MAX_KEY_DIGITS:
        raise ResourceNotFoundError("Product", f"{digits[:MAX_KEY_DIGITS]}...")
    return payload.int_param("id")


def _envelope(product: ProductLike) -> dict:
    return {"data": ProductRead.model_validate(product)}


# ─── Handlers ────────────────────────────────────────────────────

@router.get(
    "",
    response_model=ProductListResponse,
    summary="Get a list of products",
    description="Return a list of products, most expensive first",
    responses=_SERVER_ERROR,
)
@router.get("/", response_model=ProductListResponse, include_in_schema=False)
async def get_products(
    repository: ProductRepository = Depends(get_product_repository),
):
    products = await repository.list_all(order_by="-price")
    return {"data": [ProductRead.model_validate(p) for p in products]}


@router.get(
    "/{id}",
    response_model=ProductResponse,
    summary="Get a product by ID",
    description="Return a product based on its unique ID",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
    openapi_extra=_id_parameter("The ID of the product to retrieve"),
)
async def get_product_by_id(
    payload: ValidatedInput = Depends(validation_gate(PRODUCT_ID_RULES)),
    repository: ProductRepository = Depends(get_product_repository),
):
    product = await get_product_or_404(requested_id(payload), repository)
    return _envelope(product)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Returns the new record stored in the database",
    responses={**_BAD_REQUEST, **_SERVER_ERROR},
    openapi_extra=_json_body(ProductCreate),
)
@router.post(
    "/",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_product(
    payload: ValidatedInput = Depends(validation_gate(CREATE_PRODUCT_RULES)),
    repository: ProductRepository = Depends(get_product_repository),
):
    fields = payload.parse_body(ProductCreate)
    product = await repository.insert(fields.model_dump())
    logger.info(f"Product {product.id} created", extra={"product_id": product.id})
    return _envelope(product)


@router.put(
    "/{id}",
    response_model=ProductResponse,
    summary="Update a product with user input",
    description="Replaces name, price and availability; returns the updated product",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
    openapi_extra={
        **_id_parameter("The ID of the product to update"),
        **_json_body(ProductReplace),
    },
)
async def update_product(
    payload: ValidatedInput = Depends(validation_gate(REPLACE_PRODUCT_RULES)),
    repository: ProductRepository = Depends(get_product_repository),
):
    fields = payload.parse_body(ProductReplace)
    product = await get_product_or_404(requested_id(payload), repository)
    product = await repository.update(product, fields.model_dump())
    logger.info(f"Product {product.id} replaced", extra={"product_id": product.id})
    return _envelope(product)


@router.patch(
    "/{id}",
    response_model=ProductResponse,
    summary="Update product availability",
    description="Flips the availability flag and returns the updated product",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
    openapi_extra=_id_parameter("The ID of the product to toggle"),
)
async def update_availability(
    payload: ValidatedInput = Depends(validation_gate(PRODUCT_ID_RULES)),
    repository: ProductRepository = Depends(get_product_repository),
):
    product = await get_product_or_404(requested_id(payload), repository)
    product = await repository.update(
        product, {"availability": not product.availability},
    )
    logger.info(
        f"Product {product.id} availability set to {product.availability}",
        extra={"product_id": product.id},
    )
    return _envelope(product)


@router.delete(
    "/{id}",
    response_model=ProductDeletedResponse,
    summary="Delete a product by a given ID",
    description="Returns a confirmation message",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
    openapi_extra=_id_parameter("The ID of the product to delete"),
)
async def delete_product(
    payload: ValidatedInput = Depends(validation_gate(PRODUCT_ID_RULES)),
    repository: ProductRepository = Depends(get_product_repository),
):
    product_id = requested_id(payload)
    product = await get_product_or_404(product_id, repository)
    await repository.delete(product)
    logger.info(f"Product {product_id} deleted", extra={"product_id": product_id})
    return {"data": PRODUCT_DELETED_MESSAGE}
