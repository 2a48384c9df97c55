"""FastAPI dependencies for dependency injection.

Provides:
- Request-scoped database session
- Catalog service bound to that session
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infra.database import get_db_session
from app.services.catalog_service import CatalogService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session committed when the request completes.

    Yields:
        AsyncSession for the request
    """
    async with get_db_session() as session:
        yield session


def get_catalog_service(session: Annotated[AsyncSession, Depends(get_db)]) -> CatalogService:
    """Get the catalog service for the request's session."""
    return CatalogService.for_session(session)


# Type alias for cleaner annotations
Catalog = Annotated[CatalogService, Depends(get_catalog_service)]
