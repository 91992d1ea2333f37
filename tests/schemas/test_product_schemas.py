"""Product Schemas - coercion of inputs that already passed the rule sets."""

import pytest
from pydantic import ValidationError

from products_api.models.product import Product
from products_api.schemas.product import ProductCreate, ProductRead, ProductReplace


def test_create_coerces_numeric_text_price():
    assert ProductCreate(name="Mouse", price="50").price == 50.0


def test_create_coerces_numeric_name():
    assert ProductCreate(name=42, price=1).name == "42"


def test_create_ignores_unknown_fields():
    data = ProductCreate.model_validate({"name": "Mouse", "price": 5, "id": 9})
    assert data.model_dump() == {"name": "Mouse", "price": 5.0}


def test_create_rejects_non_positive_price():
    with pytest.raises(ValidationError):
        ProductCreate(name="Mouse", price=0)


def test_create_rejects_integer_price_beyond_float_range():
    with pytest.raises(ValidationError):
        ProductCreate(name="Mouse", price=10**400)


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("0", False), ("false", False)])
def test_replace_coerces_textual_booleans(raw, expected):
    assert ProductReplace(name="Mouse", price=5, availability=raw).availability is expected


def test_read_from_orm_object():
    product = Product(id=3, name="Mouse", price=50.0, availability=False)
    assert ProductRead.model_validate(product).model_dump() == {
        "id": 3, "name": "Mouse", "price": 50.0, "availability": False,
    }
