"""Core module - catalog entities, store interfaces and listing operations."""

from app.core.breadcrumb import BreadcrumbBuilder, BreadcrumbOptions
from app.core.catalog import CategoryAssignment, CategoryNode, PagedResult, Product
from app.core.category_assignment import ensure_default_category_assignment
from app.core.category_resolver import CategoryProductResolver
from app.core.errors import (
    CatalogError,
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    StorageError,
)
from app.core.pagination import paginate
from app.core.stores import AssignmentStore, ProductRepository, TreeStore

__all__ = [
    "AssignmentStore",
    "BreadcrumbBuilder",
    "BreadcrumbOptions",
    "CatalogError",
    "ConflictError",
    "CategoryAssignment",
    "CategoryNode",
    "CategoryProductResolver",
    "InvalidArgumentError",
    "NotFoundError",
    "PagedResult",
    "Product",
    "ProductRepository",
    "StorageError",
    "TreeStore",
    "ensure_default_category_assignment",
    "paginate",
]
