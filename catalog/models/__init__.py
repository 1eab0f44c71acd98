"""SQLAlchemy models for the product catalog.

Import order registers every mapped class before relationships are
configured.
"""

from catalog.models.base import Base, IdentityMixin
from catalog.models.category import Category
from catalog.models.photo import Photo
from catalog.models.product import Product, generate_article
from catalog.models.sale_position import SalePosition

__all__ = [
    "Base",
    "IdentityMixin",
    "Category",
    "Photo",
    "Product",
    "SalePosition",
    "generate_article",
]
