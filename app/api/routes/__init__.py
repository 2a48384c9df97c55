"""API routes module."""

from app.api.routes.categories import router as categories_router
from app.api.routes.health import router as health_router
from app.api.routes.products import router as products_router

__all__ = ["categories_router", "health_router", "products_router"]
