"""
API error types and their JSON rendering.
"""

from fastapi import Request
from fastapi.responses import JSONResponse


class ProductAPIError(Exception):
    """Base class for errors rendered as {"error": message}."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProductNotFoundError(ProductAPIError):
    """An update or delete addressed an id with no matching row."""
    status_code = 404

    def __init__(self):
        super().__init__("Product not found")


class OperationFailedError(ProductAPIError):
    """A store write failed. The cause is logged, never returned."""
    status_code = 400


async def product_api_error_handler(request: Request, exc: ProductAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
