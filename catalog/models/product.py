"""Product model - a single catalog item."""

import random
from typing import TYPE_CHECKING, Any

from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates
from sqlalchemy.orm.attributes import set_committed_value

from catalog.infra.logging import get_logger
from catalog.models.base import Base, IdentityMixin
from catalog.models.hashing import accumulate, float_hash, string_hash
from catalog.models.normalize import non_empty_or_default, positive_or_default

if TYPE_CHECKING:
    from catalog.models.category import Category
    from catalog.models.photo import Photo
    from catalog.models.sale_position import SalePosition

logger = get_logger(__name__, entity="Product")

ARTICLE_ALPHABET = "1234567890"
ARTICLE_LENGTH = 5
CURRENCY = "UAH"


def generate_article() -> int:
    """Random numeric article of ARTICLE_LENGTH digits, in [0, 99999].

    Collisions are possible; uniqueness is left to the storage layer.
    """
    code = "".join(random.choice(ARTICLE_ALPHABET) for _ in range(ARTICLE_LENGTH))
    article = int(code)
    logger.debug("Article generated", article=article)
    return article


class Product(Base, IdentityMixin):
    """Product - one item of the catalog.

    Maps to the `products` table. Attribute assignment never fails:
    validators normalise empty strings, non-positive prices and
    non-positive articles instead of rejecting them.
    """

    __tablename__ = "products"

    article: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    title: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    url: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    parameters: Mapped[str | None] = mapped_column(Text, nullable=True, default="")
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default="")
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    category_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=True,
        index=True,
    )
    photo_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("photos.id"),
        nullable=True,
    )

    # Relationships
    category: Mapped["Category"] = relationship(
        "Category",
        back_populates="products",
        lazy="joined",
    )
    photo: Mapped["Photo"] = relationship(
        "Photo",
        cascade="all",
        lazy="joined",
    )
    sale_positions: Mapped[list["SalePosition"]] = relationship(
        "SalePosition",
        back_populates="product",
        cascade="save-update, merge, delete, delete-orphan",
        order_by="SalePosition.id",
        lazy="select",
    )

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("title", "")
        kwargs.setdefault("url", "")
        kwargs.setdefault("parameters", "")
        kwargs.setdefault("description", "")
        kwargs.setdefault("price", 0.0)
        article = kwargs.pop("article", None)
        super().__init__(**kwargs)
        if article is None:
            # Unset article stays 0; the validator would replace it with a random code
            set_committed_value(self, "article", 0)
        else:
            self.article = article

    def new_article(self) -> int:
        """Assign and return a freshly generated random article."""
        self.article = generate_article()
        return self.article

    @validates("article")
    def _validate_article(self, key: str, value: int | float | None) -> int:
        article = int(value) if value is not None else 0
        if article > 0:
            return article
        return generate_article()

    @validates("title", "url", "parameters", "description")
    def _normalize_text(self, key: str, value: str | None) -> str:
        return non_empty_or_default(value)

    @validates("price")
    def _normalize_price(self, key: str, value: float | None) -> float:
        return float(positive_or_default(value, 0.0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return (
            self.same_identity(other)
            and self.article == other.article
            and self.price == other.price
            and self.title == other.title
            and self.url == other.url
            and self.parameters == other.parameters
            and self.description == other.description
        )

    def __hash__(self) -> int:
        return accumulate(
            self.article,
            [
                string_hash(self.title),
                string_hash(self.url),
                string_hash(self.parameters or ""),
                string_hash(self.description or ""),
                float_hash(self.price),
            ],
        )

    def __str__(self) -> str:
        text = (
            f"Title: {self.title}"
            f"\nParameters: {self.parameters}"
            f"\nDescription: {self.description}"
            f"\nPrice = {self.price} {CURRENCY}"
        )
        if self.category is not None:
            text += f"\nCategory: {self.category.title}"
        return text

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, article={self.article})>"
