"""Pydantic schemas for request/response validation."""

from app.schemas.catalog import (
    ActiveSectionResponse,
    BreadcrumbResponse,
    CategoryChoice,
    ProductOut,
    ProductPageResponse,
    ProductWrite,
    SavedProductResponse,
)
from app.schemas.common import ErrorResponse, HealthResponse

__all__ = [
    "ActiveSectionResponse",
    "BreadcrumbResponse",
    "CategoryChoice",
    "ErrorResponse",
    "HealthResponse",
    "ProductOut",
    "ProductPageResponse",
    "ProductWrite",
    "SavedProductResponse",
]
