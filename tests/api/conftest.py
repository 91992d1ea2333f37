"""API test fixtures - in-memory repository and HTTP clients.

Invariants:
    - `client` overrides get_db, so routes run against the real SQLAlchemy repository
    - `fake_client` overrides get_product_repository with InMemoryProductRepository,
      which records every storage call and can be told to fail
"""

import pytest
from httpx import ASGITransport, AsyncClient

from products_api.core.errors import DatabaseError
from products_api.infrastructure.database import get_db
from products_api.infrastructure.product_repository import get_product_repository
from products_api.main import app
from products_api.models.product import Product


class InMemoryProductRepository:
    """ProductRepository fake: dict storage, call log, injectable failures."""

    def __init__(self):
        self.rows: dict[int, Product] = {}
        self.calls: list[str] = []
        self.fail_on: set[str] = set()
        self._next_id = 1

    def add(self, name: str, price: float, availability: bool = True) -> Product:
        """Seed a row without touching the call log."""
        product = Product(
            id=self._next_id, name=name, price=price, availability=availability,
        )
        self.rows[product.id] = product
        self._next_id += 1
        return product

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail_on:
            raise DatabaseError("simulated outage", operation)

    async def insert(self, fields):
        self._record("insert")
        return self.add(**{"availability": True, **fields})

    async def find_by_key(self, product_id):
        self._record("read")
        return self.rows.get(product_id)

    async def update(self, product, fields):
        self._record("update")
        for name, value in fields.items():
            setattr(product, name, value)
        return product

    async def delete(self, product):
        self._record("delete")
        del self.rows[product.id]

    async def list_all(self, order_by="-price"):
        self._record("list")
        column = order_by.lstrip("-")
        reverse = order_by.startswith("-")
        return sorted(
            self.rows.values(),
            key=lambda p: getattr(p, column),
            reverse=reverse,
        )


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def seed_product(test_db):
    """Insert one available product directly into the test DB."""
    product = Product(name="Monitor Curvo de 49 pulgadas", price=300)
    test_db.add(product)
    await test_db.commit()
    await test_db.refresh(product)
    return product


@pytest.fixture
def fake_repository():
    return InMemoryProductRepository()


@pytest.fixture
async def fake_client(fake_repository):
    """FastAPI test client backed by the in-memory repository."""
    app.dependency_overrides[get_product_repository] = lambda: fake_repository
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
