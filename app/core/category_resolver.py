"""Category product listings.

A product belongs to a category listing when it is explicitly assigned to,
or sits in the page tree directly under, the category or one of its direct
child categories. Deeper descendants are not included.
"""

from collections.abc import Callable, Sequence

from app.core.catalog import CategoryNode, PagedResult, Product
from app.core.errors import NotFoundError
from app.core.pagination import paginate, validate_page_window
from app.core.stores import AssignmentStore, ProductRepository, TreeStore
from app.infra.logging import get_logger

logger = get_logger(__name__)

# (category, matched products) -> products to list
ListingExtension = Callable[[CategoryNode, list[Product]], list[Product]]

PRODUCT_PATH_SEGMENT = "product"


def listing_sort_key(product: Product) -> tuple[int, int, int]:
    """Fixed listing order: tree parent, then sort order, then id.

    Products without a tree parent sort as if parented by the root (0).
    """
    return (product.tree_parent_id or 0, product.sort_order, product.id or 0)


class CategoryProductResolver:
    """Resolves the paginated product listing of a category."""

    def __init__(
        self,
        tree: TreeStore,
        products: ProductRepository,
        assignments: AssignmentStore,
        extensions: Sequence[ListingExtension] = (),
    ) -> None:
        self._tree = tree
        self._products = products
        self._assignments = assignments
        self._extensions = list(extensions)

    def add_extension(self, extension: ListingExtension) -> None:
        """Register a callable that can adjust matched products before ordering."""
        self._extensions.append(extension)

    async def scope_ids(self, category: CategoryNode) -> list[int]:
        """The category id followed by the ids of its direct child categories."""
        children = await self._tree.get_children(category.id)
        return [category.id] + [child.id for child in children if child.is_category]

    async def list_products(
        self,
        category_id: int,
        page: int = 1,
        page_size: int = 12,
    ) -> PagedResult[Product]:
        """List products under a category and its direct child categories.

        Args:
            category_id: Id of an existing category node
            page: 1-based page number
            page_size: Number of products per page

        Returns:
            PagedResult with the ordered page window and total count

        Raises:
            InvalidArgumentError: If page < 1 or page_size < 1
            NotFoundError: If the category does not exist
        """
        validate_page_window(page, page_size)

        category = await self._tree.get_node(category_id)
        if not category.is_category:
            raise NotFoundError("ProductCategory", category_id)

        scope = await self.scope_ids(category)
        matched = await self._products.find_by_category_scope(scope)

        # Set semantics on product id
        unique = list({product.id: product for product in matched}.values())

        for extension in self._extensions:
            unique = extension(category, unique)

        ordered = sorted(unique, key=listing_sort_key)
        result = paginate(ordered, page, page_size)

        logger.debug(
            "Resolved category products",
            category_id=category_id,
            scope_size=len(scope),
            total_count=result.total_count,
            page=page,
            page_size=page_size,
        )
        return result

    async def is_member(self, category_id: int, product: Product) -> bool:
        """Whether a product is in a category, by tree parent or assignment."""
        if product.parent_id == category_id:
            return True
        if product.id is None:
            return False
        return await self._assignments.link_exists(category_id, product.id)

    async def node_path(self, node: CategoryNode) -> list[str]:
        """URL segments from the root down to the node."""
        segments = [node.url_segment]
        seen = {node.id}
        parent_id = node.parent_id

        while parent_id is not None and parent_id not in seen:
            try:
                parent = await self._tree.get_node(parent_id)
            except NotFoundError:
                break
            segments.append(parent.url_segment)
            seen.add(parent.id)
            parent_id = parent.parent_id

        return [segment for segment in reversed(segments) if segment]

    async def is_active_section(self, current_path: str, category_id: int) -> bool:
        """Whether navigation for this category should be highlighted.

        True when the current path is the category's page or lies beneath
        it. For product paths (``.../product/<url_segment>``) it is also
        true when the product belongs to the category. An unknown product
        is not a match and falls back to the section check.

        Raises:
            NotFoundError: If the category does not exist
        """
        category = await self._tree.get_node(category_id)
        category_path = [segment.lower() for segment in await self.node_path(category)]
        raw_segments = [segment for segment in current_path.split("/") if segment]
        segments = [segment.lower() for segment in raw_segments]

        if PRODUCT_PATH_SEGMENT in segments:
            index = segments.index(PRODUCT_PATH_SEGMENT)
            if index + 1 < len(segments):
                try:
                    product = await self._products.get_by_url_segment(raw_segments[index + 1])
                except NotFoundError:
                    logger.debug(
                        "Product path did not resolve",
                        path=current_path,
                        category_id=category_id,
                    )
                else:
                    is_current = bool(category_path) and segments[:index] == category_path
                    return is_current or await self.is_member(category_id, product)

        if not category_path:
            return False
        return segments[: len(category_path)] == category_path
