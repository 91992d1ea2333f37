"""Product Repository - SQLAlchemy implementation of the ProductRepository protocol.

Invariants:
    - Each mutating call commits its own unit of work
    - Any SQLAlchemyError rolls the session back and surfaces as DatabaseError
    - Keys outside the 32-bit INTEGER column range are reported as absent
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.core.errors import DatabaseError
from products_api.core.repository_protocols import ProductRepository
from products_api.infrastructure.database import get_db
from products_api.models.product import Product

logger = logging.getLogger(__name__)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_SORTABLE_COLUMNS = {
    "id": Product.id,
    "name": Product.name,
    "price": Product.price,
    "availability": Product.availability,
}


class SqlAlchemyProductRepository:
    """Row-level product persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _storage_operation(self, operation: str) -> AsyncGenerator[None, None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Product {operation} failed: {e}",
                extra={"error_code": "DATABASE_ERROR"},
                exc_info=True,
            )
            raise DatabaseError("Product storage operation failed", operation) from e

    async def insert(self, fields: dict[str, Any]) -> Product:
        async with self._storage_operation("insert"):
            product = Product(**fields)
            self._db.add(product)
            await self._db.commit()
            await self._db.refresh(product)
        return product

    async def find_by_key(self, product_id: int) -> Product | None:
        if not _INT32_MIN <= product_id <= _INT32_MAX:
            return None
        async with self._storage_operation("read"):
            return await self._db.get(Product, product_id)

    async def update(self, product: Product, fields: dict[str, Any]) -> Product:
        async with self._storage_operation("update"):
            for name, value in fields.items():
                setattr(product, name, value)
            await self._db.commit()
            await self._db.refresh(product)
        return product

    async def delete(self, product: Product) -> None:
        async with self._storage_operation("delete"):
            await self._db.delete(product)
            await self._db.commit()

    async def list_all(self, order_by: str = "-price") -> list[Product]:
        """List every product. order_by is a column name, "-" prefix for descending."""
        descending = order_by.startswith("-")
        column_name = order_by.lstrip("-")
        if column_name not in _SORTABLE_COLUMNS:
            raise ValueError(f"Cannot order products by '{column_name}'")
        column = _SORTABLE_COLUMNS[column_name]
        query = select(Product).order_by(
            column.desc() if descending else column.asc(), Product.id,
        )
        async with self._storage_operation("list"):
            result = await self._db.execute(query)
            return list(result.scalars().all())


async def get_product_repository(
    db: AsyncSession = Depends(get_db),
) -> ProductRepository:
    """FastAPI dependency: repository bound to the request's session."""
    return SqlAlchemyProductRepository(db)
