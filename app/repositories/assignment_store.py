"""SQLAlchemy implementation of the category assignment store."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.stores import AssignmentStore
from app.models.category_product import ProductCategoryProduct
from app.repositories.base import storage_errors


class SqlAssignmentStore(AssignmentStore):
    """Reads and writes the ``product_category_products`` join table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def link_exists(self, category_id: int, product_id: int) -> bool:
        stmt = (
            select(ProductCategoryProduct.id)
            .where(
                ProductCategoryProduct.product_category_id == category_id,
                ProductCategoryProduct.product_id == product_id,
            )
            .limit(1)
        )
        with storage_errors("link_exists", category_id=category_id, product_id=product_id):
            result = await self._session.execute(stmt)
        return result.scalar() is not None

    async def link(self, category_id: int, product_id: int, order: int = 0) -> None:
        if await self.link_exists(category_id, product_id):
            return

        self._session.add(
            ProductCategoryProduct(
                product_category_id=category_id,
                product_id=product_id,
                product_order=order,
            )
        )
        with storage_errors("link", category_id=category_id, product_id=product_id):
            await self._session.flush()

    async def category_ids_for_product(self, product_id: int) -> list[int]:
        stmt = (
            select(ProductCategoryProduct.product_category_id)
            .where(ProductCategoryProduct.product_id == product_id)
            .distinct()
            .order_by(ProductCategoryProduct.product_category_id)
        )
        with storage_errors("category_ids_for_product", product_id=product_id):
            result = await self._session.execute(stmt)
        return list(result.scalars().all())
