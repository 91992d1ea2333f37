"""Error Hierarchy - typed exceptions for every failure the products API reports.

Invariants:
    - Every error has a code (str) and an http_status
    - to_response() yields exactly one of two client shapes:
      {"errores": [...]} for input validation, {"error": str} for everything else
    - Infrastructure errors never leak internal details to the client
"""

from products_api.core.validation import Violation

PRODUCT_NOT_FOUND_MESSAGE = "Producto no encontrado"
INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


class ProductApiError(Exception):
    """Base exception for all products API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        http_status: int = 500,
        user_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status
        self.user_message = user_message or message

    def to_response(self) -> dict:
        return {"error": self.user_message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationFailedError(ProductApiError):
    """One or more declared input constraints failed."""

    def __init__(self, violations: list[Violation]):
        super().__init__(
            f"{len(violations)} input constraint(s) failed",
            "VALIDATION_ERROR", 400,
        )
        self.violations = violations

    def to_response(self) -> dict:
        return {"errores": [v.to_dict() for v in self.violations]}


class ResourceNotFoundError(ProductApiError):
    """Well-formed key, no matching row."""

    def __init__(self, resource_type: str, resource_id: object):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", 404,
            user_message=PRODUCT_NOT_FOUND_MESSAGE,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ProductApiError):
    """Storage operation failed."""

    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", 500,
            user_message=INTERNAL_ERROR_MESSAGE,
        )
        self.operation = operation
