"""Product endpoints - category search and the save workflow."""

from fastapi import APIRouter

from app.api.deps import Catalog
from app.infra.logging import get_logger
from app.schemas.catalog import ProductOut, ProductWrite, SavedProductResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("", response_model=list[ProductOut])
async def search_products(catalog: Catalog, category: str | None = None) -> list[ProductOut]:
    """Search products, optionally restricted to categories matching ``category``."""
    products = await catalog.search_products(category=category)
    return [ProductOut.model_validate(product) for product in products]


@router.put("", response_model=SavedProductResponse)
async def save_product(payload: ProductWrite, catalog: Catalog) -> SavedProductResponse:
    """Create or update a product.

    A product saved under a category page is assigned to that category.
    """
    product, category_ids = await catalog.save_product(payload.to_product())
    logger.debug("Save product request handled", product_id=product.id)
    return SavedProductResponse(
        product=ProductOut.model_validate(product),
        category_ids=category_ids,
    )
