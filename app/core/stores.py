"""Store interfaces consumed by the catalog operations.

The resolver, breadcrumb builder and save workflow depend only on these
abstractions. SQLAlchemy implementations live in ``app.repositories``.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from app.core.catalog import CategoryNode, Product


class TreeStore(ABC):
    """Read access to the page tree."""

    @abstractmethod
    async def get_node(self, node_id: int) -> CategoryNode:
        """Load a single node.

        Raises:
            NotFoundError: If no node has this id
        """

    @abstractmethod
    async def get_children(self, node_id: int) -> list[CategoryNode]:
        """Return the direct children of a node (one level only)."""

    @abstractmethod
    async def list_categories(self) -> list[CategoryNode]:
        """Return every category node."""


class ProductRepository(ABC):
    """Access to product pages."""

    @abstractmethod
    async def find_by_category_scope(self, scope_ids: Iterable[int]) -> list[Product]:
        """Products assigned to, or tree-parented by, any id in scope.

        Each product appears once.
        """

    @abstractmethod
    async def get_by_url_segment(self, segment: str) -> Product:
        """Resolve a product by its URL segment.

        Raises:
            NotFoundError: If no product uses this segment
        """

    @abstractmethod
    async def get(self, product_id: int) -> Product:
        """Load a product by id.

        Raises:
            NotFoundError: If no product has this id
        """

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Insert or update a product and return the persisted record."""

    @abstractmethod
    async def search(self, category: str | None = None) -> list[Product]:
        """Search products, optionally restricted to matching categories."""


class AssignmentStore(ABC):
    """Explicit category/product links."""

    @abstractmethod
    async def link_exists(self, category_id: int, product_id: int) -> bool:
        """Whether an assignment links the pair."""

    @abstractmethod
    async def link(self, category_id: int, product_id: int, order: int = 0) -> None:
        """Create an assignment unless the pair is already linked."""

    @abstractmethod
    async def category_ids_for_product(self, product_id: int) -> list[int]:
        """Ids of the categories a product is explicitly assigned to."""
