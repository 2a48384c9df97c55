"""Schemas for category listings and product endpoints."""

from pydantic import BaseModel, Field

from app.core.catalog import PagedResult, Product


class ProductOut(BaseModel):
    """Product as returned by the API."""

    id: int = Field(description="Product id")
    url_segment: str = Field(description="Unique URL segment")
    title: str = Field(description="Product title")
    parent_id: int | None = Field(default=None, description="Tree parent page id")
    sort_order: int = Field(default=0, description="Position among siblings")

    model_config = {"from_attributes": True}


class ProductPageResponse(BaseModel):
    """One page of a category listing."""

    category_id: int = Field(description="Listed category id")
    items: list[ProductOut] = Field(default_factory=list)
    page: int = Field(description="1-based page number")
    page_size: int = Field(description="Products per page")
    total_count: int = Field(description="Products in the whole listing")
    total_pages: int = Field(description="Number of pages")

    @classmethod
    def from_result(cls, category_id: int, result: PagedResult[Product]) -> "ProductPageResponse":
        return cls(
            category_id=category_id,
            items=[ProductOut.model_validate(item) for item in result.items],
            page=result.page,
            page_size=result.page_size,
            total_count=result.total_count,
            total_pages=result.total_pages,
        )


class CategoryChoice(BaseModel):
    """A category option for product forms and search."""

    id: int
    title: str
    breadcrumb: str


class BreadcrumbResponse(BaseModel):
    node_id: int
    breadcrumb: str
    unlinked: bool = False


class ActiveSectionResponse(BaseModel):
    category_id: int
    path: str
    active: bool


class ProductWrite(BaseModel):
    """Payload for saving a product. Omit ``id`` to create one."""

    id: int | None = Field(default=None, description="Existing product id")
    url_segment: str = Field(min_length=1, max_length=255)
    title: str = Field(default="", max_length=255)
    parent_id: int | None = Field(default=None, description="Tree parent page id")
    sort_order: int = Field(default=0)

    def to_product(self) -> Product:
        return Product(
            id=self.id,
            url_segment=self.url_segment,
            parent_id=self.parent_id,
            sort_order=self.sort_order,
            title=self.title,
        )


class SavedProductResponse(BaseModel):
    product: ProductOut
    category_ids: list[int] = Field(
        default_factory=list, description="Categories the product is assigned to"
    )
