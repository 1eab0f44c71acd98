"""Photo model - image attached to a product."""

from typing import Any

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, validates

from catalog.models.base import Base, IdentityMixin
from catalog.models.normalize import non_empty_or_default


class Photo(Base, IdentityMixin):
    """Product photo with links to its small and full-size files.

    Saved and deleted together with the owning product.
    """

    __tablename__ = "photos"

    title: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    photo_link_short: Mapped[str | None] = mapped_column(String(500), nullable=True, default="")
    photo_link_long: Mapped[str | None] = mapped_column(String(500), nullable=True, default="")

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("title", "")
        kwargs.setdefault("photo_link_short", "")
        kwargs.setdefault("photo_link_long", "")
        super().__init__(**kwargs)

    @validates("title", "photo_link_short", "photo_link_long")
    def _normalize_text(self, key: str, value: str | None) -> str:
        return non_empty_or_default(value)

    def __str__(self) -> str:
        return (
            f"Title: {self.title}"
            f"\nShort link: {self.photo_link_short}"
            f"\nLong link: {self.photo_link_long}"
        )

    def __repr__(self) -> str:
        return f"<Photo(id={self.id}, title='{self.title}')>"
