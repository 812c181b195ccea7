"""
Products API Routes
"""

import json
import logging
import math
import re
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from app.errors import OperationFailedError, ProductNotFoundError
from app.store import ProductStore, StorageError

router = APIRouter(prefix="/products", tags=["products"])
logger = logging.getLogger(__name__)

# Numeric fields are echoed exactly as sent and coerced permissively, never rejected
NumericInput = Any

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"[+-]?\d+")


# ============================================================================
# Pydantic Models
# ============================================================================

class ProductCreate(BaseModel):
    """Schema for creating a product."""
    name: Optional[str] = None
    price: NumericInput = None
    description: Optional[str] = None
    quantity: NumericInput = None


class ProductReplace(ProductCreate):
    """Schema for replacing a product; every field is overwritten."""
    id: NumericInput = None


# ============================================================================
# Helper Functions
# ============================================================================

def parse_float(value) -> Optional[float]:
    """
    Coerce a request value to a float.
    Strings are read up to the end of their leading decimal literal, so
    "9.99abc" gives 9.99. Returns None when nothing numeric can be read.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            result = float(value)
        except OverflowError:
            return None
    else:
        match = _FLOAT_PREFIX.match(str(value).lstrip())
        if match is None:
            return None
        result = float(match.group())
    return result if math.isfinite(result) else None


def parse_int(value) -> Optional[int]:
    """
    Coerce a request value to an int.
    Floats are truncated toward zero and strings are read up to their first
    non-digit, so "3.7" gives 3. Returns None when nothing numeric can be read.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _INT_PREFIX.match(str(value).lstrip())
    if match is None:
        return None
    return int(match.group())


def get_store(request: Request) -> ProductStore:
    """Return the store the application was built with."""
    return request.app.state.store


async def read_body(request: Request) -> Any:
    """
    Read a product body sent either as a form or as JSON.
    An empty body reads as an empty object.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)

    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except ValueError as e:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": f"JSON decode error: {e}", "input": {}}]
        )


def _validate(model, data):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))


def product_create_body(data: Any = Depends(read_body)) -> ProductCreate:
    return _validate(ProductCreate, data)


def product_replace_body(data: Any = Depends(read_body)) -> ProductReplace:
    return _validate(ProductReplace, data)


# ============================================================================
# API Endpoints
# ============================================================================

@router.get("")
def list_products(store: ProductStore = Depends(get_store)):
    """
    List every product in storage order.
    Read failures are not handled here and surface as a 500.
    """
    return store.list_all()


@router.post("", status_code=201)
def create_product(
    product: ProductCreate = Depends(product_create_body),
    store: ProductStore = Depends(get_store),
):
    """
    Create a product.
    The response echoes the request values as sent; the stored row holds the
    coerced price and quantity.
    """
    try:
        product_id = store.insert(
            product.name,
            parse_float(product.price),
            product.description,
            parse_int(product.quantity),
        )
    except StorageError:
        logger.exception("Error adding product")
        raise OperationFailedError("Failed to add the product")

    return {
        "id": product_id,
        "name": product.name,
        "price": product.price,
        "description": product.description,
        "quantity": product.quantity,
    }


@router.put("")
def update_product(
    product: ProductReplace = Depends(product_replace_body),
    store: ProductStore = Depends(get_store),
):
    """
    Replace every field of the product identified by the body's id.
    """
    try:
        changes = store.update_by_id(
            parse_int(product.id),
            product.name,
            parse_float(product.price),
            product.description,
            parse_int(product.quantity),
        )
    except StorageError:
        logger.exception("Error updating product %s", product.id)
        raise OperationFailedError("Failed to update the product")

    if changes < 1:
        raise ProductNotFoundError()

    return {
        "id": product.id,
        "name": product.name,
        "price": product.price,
        "description": product.description,
        "quantity": product.quantity,
    }


@router.delete("/{product_id}")
def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    """
    Delete a product by ID.
    An id that cannot be read as an integer matches nothing.
    """
    try:
        changes = store.delete_by_id(parse_int(product_id))
    except StorageError:
        logger.exception("Error deleting product %s", product_id)
        raise OperationFailedError("Failed to delete the product")

    if changes != 1:
        raise ProductNotFoundError()

    return {"message": "Product deleted successfully"}
