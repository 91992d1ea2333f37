"""Product Schemas - typed request bodies and response envelopes.

Invariants:
    - Success bodies are always {"data": ...}
    - Error bodies are {"errores": [...]} (400) or {"error": str} (404/500)
    - ProductCreate/ProductReplace coerce the loose inputs the rule set accepts
      ("10" -> 10.0, "1" -> True, 42 -> "42")
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductCreate(BaseModel):
    """Body of POST /api/products."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(min_length=1, examples=["Monitor curvo 49 pulgadas"])
    price: float = Field(gt=0, examples=[399])

    @field_validator("price", mode="before")
    @classmethod
    def _finite_price(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                float(value)
            except OverflowError:
                raise ValueError("Input should be a finite number") from None
        return value


class ProductReplace(ProductCreate):
    """Body of PUT /api/products/{id}: every mutable field."""
    availability: bool = Field(examples=[True])


class ProductRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="The product ID", examples=[1])
    name: str = Field(
        description="The product name", examples=["Monitor Curvo de 49 pulgadas"],
    )
    price: float = Field(description="The product price", examples=[300])
    availability: bool = Field(
        description="The product availability", examples=[True],
    )


class ProductResponse(BaseModel):
    data: ProductRead


class ProductListResponse(BaseModel):
    data: list[ProductRead]


class ProductDeletedResponse(BaseModel):
    data: str = Field(examples=["Producto eliminado"])


class ViolationEntry(BaseModel):
    type: str = "field"
    value: Any = None
    msg: str
    path: str
    location: str


class ValidationErrorResponse(BaseModel):
    errores: list[ViolationEntry]


class ErrorResponse(BaseModel):
    error: str = Field(examples=["Producto no encontrado"])
