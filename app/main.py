"""FastAPI application entry point.

Category listing service for the storefront page tree.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.core.errors import ConflictError, InvalidArgumentError, NotFoundError, StorageError
from app.infra.database import close_db_engine, verify_db_connection
from app.infra.logging import get_logger, setup_logging
from app.schemas.common import ErrorResponse

# Import routers
from app.api.routes.categories import router as categories_router
from app.api.routes.health import router as health_router
from app.api.routes.products import router as products_router

# Setup logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Startup:
    - Verify database connection

    Shutdown:
    - Close database connections
    """
    logger.info(
        "Category service starting",
        environment=settings.environment,
        products_per_page=settings.products_per_page,
    )

    db_ok = await verify_db_connection()
    if not db_ok:
        logger.warning("Database connection failed - will retry on first request")

    yield

    logger.info("Category service shutting down")
    await close_db_engine()
    logger.info("Cleanup complete")


app = FastAPI(
    title="Product Category Service",
    description="Category product listings, breadcrumbs and search for the storefront",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "dev" else None,
    redoc_url=None,
)

# CORS middleware (local development only)
if settings.environment == "dev":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# =============================================================================
# Exception Handlers
# =============================================================================


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    body = ErrorResponse(error=str(exc), error_type=type(exc).__name__)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info("Not found", error=str(exc), path=request.url.path)
    return _error_response(status.HTTP_404_NOT_FOUND, exc)


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    logger.info("Invalid argument", error=str(exc), path=request.url.path)
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    logger.info("Conflict", error=str(exc), path=request.url.path)
    return _error_response(status.HTTP_409_CONFLICT, exc)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage error", error=str(exc), path=request.url.path)
    return _error_response(status.HTTP_503_SERVICE_UNAVAILABLE, exc)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with a structured error response."""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "error_type": type(exc).__name__,
        },
    )


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router, tags=["Health"])
app.include_router(categories_router, prefix="/categories", tags=["Categories"])
app.include_router(products_router, prefix="/products", tags=["Products"])


@app.get("/")
async def root() -> dict:
    """Root endpoint - basic service info."""
    return {
        "service": "Product Category Service",
        "version": __version__,
        "environment": settings.environment,
    }
