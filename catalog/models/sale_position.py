"""SalePosition model - a line item referencing one product."""

from typing import Any

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from catalog.models.base import Base, IdentityMixin
from catalog.models.normalize import positive_or_default
from catalog.models.product import CURRENCY, Product


class SalePosition(Base, IdentityMixin):
    """A quantity of one product inside an order or cart.

    Removed together with its product, or when dropped from the
    product's sale_positions list.
    """

    __tablename__ = "sale_positions"

    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    number: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Relationships
    product: Mapped["Product"] = relationship(
        "Product",
        back_populates="sale_positions",
        lazy="joined",
    )

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("number", 1)
        super().__init__(**kwargs)

    @validates("number")
    def _normalize_number(self, key: str, value: int | None) -> int:
        return positive_or_default(value, 1)

    @property
    def price(self) -> float:
        """Product price multiplied by the quantity, 0 without a product."""
        if self.product is None:
            return 0.0
        return self.product.price * self.number

    def increment_number(self) -> None:
        self.number += 1

    def decrement_number(self) -> None:
        """Decrease the quantity, never below one."""
        self.number -= 1

    def __str__(self) -> str:
        title = self.product.title if self.product is not None else ""
        return f"Product: {title}\nNumber = {self.number}\nPrice = {self.price} {CURRENCY}"

    def __repr__(self) -> str:
        return f"<SalePosition(id={self.id}, product_id={self.product_id}, number={self.number})>"
