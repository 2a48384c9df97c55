"""Business logic services."""

from app.services.catalog_service import CatalogService

__all__ = [
    "CatalogService",
]
