"""Category endpoints - listings, breadcrumbs and navigation state."""

from fastapi import APIRouter

from app.api.deps import Catalog
from app.schemas.catalog import (
    ActiveSectionResponse,
    BreadcrumbResponse,
    CategoryChoice,
    ProductPageResponse,
)

router = APIRouter()


@router.get("", response_model=list[CategoryChoice])
async def list_categories(catalog: Catalog) -> list[CategoryChoice]:
    """All categories labelled by breadcrumb, for product forms and search."""
    choices = await catalog.category_choices()
    return [
        CategoryChoice(id=category_id, title=title, breadcrumb=breadcrumb)
        for category_id, title, breadcrumb in choices
    ]


@router.get("/{category_id}/products", response_model=ProductPageResponse)
async def list_category_products(
    category_id: int,
    catalog: Catalog,
    page: int = 1,
    page_size: int | None = None,
) -> ProductPageResponse:
    """Products of a category and its direct child categories.

    Invalid page parameters are rejected with 400, unknown categories with 404.
    """
    result = await catalog.list_products(category_id, page=page, page_size=page_size)
    return ProductPageResponse.from_result(category_id, result)


@router.get("/{category_id}/breadcrumb", response_model=BreadcrumbResponse)
async def get_breadcrumb(
    category_id: int,
    catalog: Catalog,
    max_depth: int | None = None,
    unlinked: bool = False,
    stop_at_type: str | None = None,
    show_hidden: bool = False,
) -> BreadcrumbResponse:
    breadcrumb = await catalog.build_breadcrumb(
        category_id,
        max_depth=max_depth,
        unlinked=unlinked,
        stop_at_type=stop_at_type,
        show_hidden=show_hidden,
    )
    return BreadcrumbResponse(node_id=category_id, breadcrumb=breadcrumb, unlinked=unlinked)


@router.get("/{category_id}/active", response_model=ActiveSectionResponse)
async def get_active_section(
    category_id: int,
    path: str,
    catalog: Catalog,
) -> ActiveSectionResponse:
    """Whether the category's navigation entry is active for a page path."""
    active = await catalog.is_active_section(path, category_id)
    return ActiveSectionResponse(category_id=category_id, path=path, active=active)
