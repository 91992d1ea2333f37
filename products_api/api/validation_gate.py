"""Validation Gate - runs a route's RuleSet and short-circuits on any violation.

Invariants:
    - Runs before the handler and before any storage dependency is opened
    - Non-empty violation list -> ValidationFailedError (400, errores shape);
      the handler is never invoked
    - Empty list -> handler receives the raw params/body unchanged
    - A missing, malformed or non-object JSON body is evaluated as {}
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from products_api.core.errors import ValidationFailedError
from products_api.core.validation import RuleSet

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


@dataclass(frozen=True)
class ValidatedInput:
    """Request input that passed its rule set."""
    params: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)

    def int_param(self, name: str) -> int:
        return int(self.params[name])

    def parse_body(self, schema: type[SchemaT]) -> SchemaT:
        """Type the body; a rule set looser than the schema still answers 400."""
        try:
            return schema.model_validate(self.body)
        except ValidationError as e:
            raise RequestValidationError(
                [{**err, "loc": ("body", *err["loc"])} for err in e.errors()],
            ) from e


async def read_json_body(request: Request) -> dict[str, Any]:
    raw = await request.body()
    if not raw:
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        logger.warning(
            f"Unparseable JSON body on {request.url.path}",
            extra={"path": request.url.path},
        )
        return {}
    return payload if isinstance(payload, dict) else {}


def validation_gate(
    rules: RuleSet,
) -> Callable[[Request], Awaitable[ValidatedInput]]:
    """Build the FastAPI dependency guarding one route."""

    async def gate(request: Request) -> ValidatedInput:
        params = dict(request.path_params)
        body = await read_json_body(request) if rules.reads_body else {}
        violations = rules.validate(params, body)
        if violations:
            raise ValidationFailedError(violations)
        return ValidatedInput(params=params, body=body)

    return gate
