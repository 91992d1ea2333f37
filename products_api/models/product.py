"""Product ORM - the single persisted resource.

Invariants:
    - id is an integer primary key assigned by the database, never reused
      (sqlite_autoincrement on SQLite, a sequence on PostgreSQL)
    - price > 0 enforced by a CHECK constraint as well as by the rule set
    - availability defaults to true on insert
"""

from sqlalchemy import Boolean, CheckConstraint, Float, Integer, Text, true
from sqlalchemy.orm import Mapped, mapped_column

from products_api.db.base import Base


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_products_price_positive"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    availability: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true(),
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"
