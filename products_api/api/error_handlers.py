"""Error Handlers - global exception handlers for the products API.

Invariants:
    - ProductApiError -> its own to_response() with its http_status
    - RequestValidationError -> 400 in the same errores shape as the rule sets
    - Exception (catch-all) -> 500 {"error": ...}, never leaks internal details
    - Every request ends with a response, whatever fails underneath
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from products_api.core.errors import INTERNAL_ERROR_MESSAGE, ProductApiError

logger = logging.getLogger(__name__)

# FastAPI loc prefixes -> location names used in errores entries
_LOCATIONS = {"path": "params", "query": "query", "body": "body"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_product_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_product_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ProductApiError)
    async def product_api_error_handler(request: Request, exc: ProductApiError):
        """Handle all products API domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{exc.code}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(_build_validation_error_response(exc)),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Render framework validation errors as errores entries."""
    errores = []
    for e in exc.errors():
        loc = [str(part) for part in e.get("loc", ())]
        location = "body"
        if loc and loc[0] in _LOCATIONS:
            location = _LOCATIONS[loc.pop(0)]
        entry = {"type": "field"}
        if "input" in e:
            entry["value"] = e["input"]
        entry.update(msg=e["msg"], path=".".join(loc), location=location)
        errores.append(entry)
    return {"errores": errores}
