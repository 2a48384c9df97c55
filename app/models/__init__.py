"""SQLAlchemy models for the storefront page tree and category assignments."""

from app.models.base import Base, TimestampMixin
from app.models.category_product import ProductCategoryProduct
from app.models.site_tree import ProductCategoryPage, ProductPage, SiteTree

__all__ = [
    "Base",
    "TimestampMixin",
    "ProductCategoryPage",
    "ProductCategoryProduct",
    "ProductPage",
    "SiteTree",
]
