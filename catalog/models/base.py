"""Base model infrastructure for SQLAlchemy models."""

from typing import Any

from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all catalog models."""
    pass


class IdentityMixin:
    """Mixin providing the persisted-record identity column.

    Models compose their own equality from ``same_identity`` instead of
    inheriting an equality contract.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def same_identity(self, other: Any) -> bool:
        """Whether ``other`` is the same kind of record with the same id.

        Records without an id are only identical to themselves.
        """
        if self is other:
            return True
        return type(self) is type(other) and self.id is not None and self.id == other.id
