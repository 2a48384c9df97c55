"""Catalog entities - plain immutable records read from the stores."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

# Page type tags stored in the site tree's class_name column
PAGE_TYPE = "Page"
CATEGORY_PAGE_TYPE = "ProductCategory"
PRODUCT_PAGE_TYPE = "Product"


@dataclass(frozen=True)
class CategoryNode:
    """A node of the page tree.

    Nodes whose page type is ``ProductCategory`` are categories; other page
    types appear only while walking ancestors (breadcrumbs, section checks).
    """

    id: int
    parent_id: int | None
    title: str
    menu_title: str | None = None
    show_in_menus: bool = True
    url_segment: str = ""
    page_type: str = CATEGORY_PAGE_TYPE

    @property
    def is_category(self) -> bool:
        return self.page_type == CATEGORY_PAGE_TYPE

    @property
    def menu_label(self) -> str:
        """Label used in menus and breadcrumbs, falling back to the title."""
        return self.menu_title or self.title


@dataclass(frozen=True)
class Product:
    """A product page.

    ``parent_id`` is the product's position in the page tree, independent of
    explicit category assignments.
    """

    id: int | None
    url_segment: str
    parent_id: int | None = None
    sort_order: int = 0
    title: str = ""

    @property
    def tree_parent_id(self) -> int | None:
        return self.parent_id


@dataclass(frozen=True)
class CategoryAssignment:
    """Explicit link between a category and a product.

    ``order`` is stored but listings order by tree position instead.
    """

    category_id: int
    product_id: int
    order: int = 0


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page window of an ordered result set."""

    items: tuple[T, ...]
    total_count: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return -(-self.total_count // self.page_size)
