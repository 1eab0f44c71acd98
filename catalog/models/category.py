"""Category model - groups products in the catalog."""

from typing import TYPE_CHECKING, Any

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from catalog.models.base import Base, IdentityMixin
from catalog.models.normalize import non_empty_or_default

if TYPE_CHECKING:
    from catalog.models.product import Product


class Category(Base, IdentityMixin):
    """Product category.

    Many products share one category; a category does not own its
    products' lifecycle.
    """

    __tablename__ = "categories"

    title: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    url: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default="")

    # Relationships
    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="category",
        lazy="select",
    )

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("title", "")
        kwargs.setdefault("url", "")
        kwargs.setdefault("description", "")
        super().__init__(**kwargs)

    @validates("title", "url", "description")
    def _normalize_text(self, key: str, value: str | None) -> str:
        return non_empty_or_default(value)

    def __str__(self) -> str:
        return f"Title: {self.title}\nURL: {self.url}\nDescription: {self.description}"

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, title='{self.title}')>"
