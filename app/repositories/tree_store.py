"""SQLAlchemy implementation of the page tree store."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.catalog import PRODUCT_PAGE_TYPE, CategoryNode
from app.core.errors import NotFoundError
from app.core.stores import TreeStore
from app.models.site_tree import ProductCategoryPage, SiteTree
from app.repositories.base import storage_errors, to_node


class SqlTreeStore(TreeStore):
    """Reads nodes from the ``site_tree`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_node(self, node_id: int) -> CategoryNode:
        with storage_errors("get_node", node_id=node_id):
            row = await self._session.get(SiteTree, node_id)
        if row is None:
            raise NotFoundError("Node", node_id)
        return to_node(row)

    async def get_children(self, node_id: int) -> list[CategoryNode]:
        """Direct child pages of a node. Product pages are not tree nodes."""
        stmt = (
            select(SiteTree)
            .where(SiteTree.parent_id == node_id, SiteTree.class_name != PRODUCT_PAGE_TYPE)
            .order_by(SiteTree.sort, SiteTree.id)
        )
        with storage_errors("get_children", node_id=node_id):
            result = await self._session.execute(stmt)
        return [to_node(row) for row in result.scalars().all()]

    async def list_categories(self) -> list[CategoryNode]:
        stmt = select(ProductCategoryPage).order_by(
            ProductCategoryPage.sort, ProductCategoryPage.id
        )
        with storage_errors("list_categories"):
            result = await self._session.execute(stmt)
        return [to_node(row) for row in result.scalars().all()]
