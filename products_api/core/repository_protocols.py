"""Boundary Protocols - storage contract between the handlers and persistence.

Invariants:
    - Handlers depend on ProductRepository only, never on a concrete engine
    - Implementations live in infrastructure/ (SQLAlchemy) and in tests (in-memory)
    - find_by_key returns None for absent rows; it never raises for "not found"
"""

from typing import Any, Protocol


class ProductLike(Protocol):
    """Structural contract for a stored product row."""
    id: int
    name: str
    price: float
    availability: bool


class ProductRepository(Protocol):
    """Contract for product persistence."""
    async def insert(self, fields: dict[str, Any]) -> ProductLike: ...
    async def find_by_key(self, product_id: int) -> ProductLike | None: ...
    async def update(
        self, product: ProductLike, fields: dict[str, Any],
    ) -> ProductLike: ...
    async def delete(self, product: ProductLike) -> None: ...
    async def list_all(self, order_by: str = "-price") -> list[ProductLike]: ...
