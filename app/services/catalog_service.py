"""Catalog Service - wires the SQL stores into the catalog operations.

One instance serves one request and shares that request's database session.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.breadcrumb import BreadcrumbBuilder, BreadcrumbOptions
from app.core.catalog import PagedResult, Product
from app.core.category_assignment import ensure_default_category_assignment
from app.core.category_resolver import CategoryProductResolver, ListingExtension
from app.core.stores import AssignmentStore, ProductRepository, TreeStore
from app.infra.logging import get_logger
from app.repositories import SqlAssignmentStore, SqlProductRepository, SqlTreeStore

logger = get_logger(__name__)


class CatalogService:
    """Category listings, breadcrumbs and the product save workflow."""

    def __init__(
        self,
        tree: TreeStore,
        products: ProductRepository,
        assignments: AssignmentStore,
        extensions: list[ListingExtension] | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            tree: Page tree store
            products: Product repository
            assignments: Category assignment store
            extensions: Optional listing extensions run before ordering
        """
        self.tree = tree
        self.products = products
        self.assignments = assignments
        self.resolver = CategoryProductResolver(
            tree, products, assignments, extensions=extensions or ()
        )
        self.breadcrumbs = BreadcrumbBuilder(tree)

    @classmethod
    def for_session(cls, session: AsyncSession) -> "CatalogService":
        """Build a service backed by the SQL stores on one session."""
        return cls(
            tree=SqlTreeStore(session),
            products=SqlProductRepository(session),
            assignments=SqlAssignmentStore(session),
        )

    async def list_products(
        self,
        category_id: int,
        page: int = 1,
        page_size: int | None = None,
    ) -> PagedResult[Product]:
        """Paginated products of a category, using the configured page size by default."""
        if page_size is None:
            page_size = settings.products_per_page
        return await self.resolver.list_products(category_id, page, page_size)

    async def build_breadcrumb(
        self,
        node_id: int,
        max_depth: int | None = None,
        unlinked: bool = False,
        stop_at_type: str | None = None,
        show_hidden: bool = False,
    ) -> str:
        options = BreadcrumbOptions(
            max_depth=settings.breadcrumb_max_depth if max_depth is None else max_depth,
            unlinked=unlinked,
            stop_at_type=stop_at_type,
            show_hidden=show_hidden,
            separator=settings.breadcrumb_separator,
        )
        return await self.breadcrumbs.build_breadcrumb(node_id, options)

    async def is_active_section(self, current_path: str, category_id: int) -> bool:
        return await self.resolver.is_active_section(current_path, category_id)

    async def category_choices(self) -> list[tuple[int, str, str]]:
        """Every category as ``(id, title, breadcrumb)``.

        Sorted by breadcrumb, descending, for the product edit form.
        """
        options = BreadcrumbOptions(
            max_depth=settings.breadcrumb_max_depth,
            separator=settings.breadcrumb_separator,
        )
        choices = [
            (category.id, category.title, await self.breadcrumbs.render(category, options))
            for category in await self.tree.list_categories()
        ]
        return sorted(choices, key=lambda choice: choice[2], reverse=True)

    async def search_products(self, category: str | None = None) -> list[Product]:
        return await self.products.search(category=category)

    async def save_product(self, product: Product) -> tuple[Product, list[int]]:
        """Persist a product, then link it to its tree parent category.

        Returns:
            The saved product and the ids of the categories it is assigned to
        """
        saved = await self.products.save(product)
        created = await ensure_default_category_assignment(
            saved, self.tree, self.assignments
        )

        logger.info(
            "Product saved",
            product_id=saved.id,
            parent_id=saved.parent_id,
            default_assignment_created=created,
        )
        category_ids = await self.assignments.category_ids_for_product(saved.id)  # type: ignore[arg-type]
        return saved, category_ids
