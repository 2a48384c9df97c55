"""SQLAlchemy implementation of the product repository."""

from collections.abc import Iterable

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.catalog import Product
from app.core.errors import NotFoundError
from app.core.stores import ProductRepository
from app.models.category_product import ProductCategoryProduct
from app.models.site_tree import ProductPage
from app.repositories.base import storage_errors, to_product
from app.repositories.search_filter import CategoryMembershipFilter


class SqlProductRepository(ProductRepository):
    """Reads and writes product pages in the ``site_tree`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_category_scope(self, scope_ids: Iterable[int]) -> list[Product]:
        scope = list(scope_ids)
        if not scope:
            return []

        assigned = select(ProductCategoryProduct.product_id).where(
            ProductCategoryProduct.product_category_id.in_(scope)
        )
        stmt = (
            select(ProductPage)
            .where(or_(ProductPage.id.in_(assigned), ProductPage.parent_id.in_(scope)))
            .order_by(ProductPage.parent_id, ProductPage.sort, ProductPage.id)
        )
        with storage_errors("find_by_category_scope", scope_ids=scope):
            result = await self._session.execute(stmt)
        return [to_product(row) for row in result.scalars().all()]

    async def get_by_url_segment(self, segment: str) -> Product:
        stmt = select(ProductPage).where(ProductPage.url_segment == segment)
        with storage_errors("get_by_url_segment", url_segment=segment):
            row = (await self._session.execute(stmt)).scalar_one_or_none()
        if row is None:
            raise NotFoundError("Product", segment)
        return to_product(row)

    async def get(self, product_id: int) -> Product:
        return to_product(await self._get_row(product_id))

    async def save(self, product: Product) -> Product:
        if product.id is None:
            row = ProductPage(
                url_segment=product.url_segment,
                title=product.title or product.url_segment,
                parent_id=product.parent_id,
                sort=product.sort_order,
                show_in_menus=True,
            )
            self._session.add(row)
        else:
            row = await self._get_row(product.id)
            row.url_segment = product.url_segment
            row.title = product.title or product.url_segment
            row.parent_id = product.parent_id
            row.sort = product.sort_order

        with storage_errors("save_product", url_segment=product.url_segment):
            await self._session.flush()
        return to_product(row)

    async def search(self, category: str | None = None) -> list[Product]:
        stmt = select(ProductPage).order_by(
            ProductPage.parent_id, ProductPage.sort, ProductPage.id
        )
        category_filter = CategoryMembershipFilter(category)
        if not category_filter.is_empty():
            stmt = category_filter.apply(stmt)

        with storage_errors("search_products", category=category):
            result = await self._session.execute(stmt)
        return [to_product(row) for row in result.scalars().all()]

    async def _get_row(self, product_id: int) -> ProductPage:
        stmt = select(ProductPage).where(ProductPage.id == product_id)
        with storage_errors("get_product", product_id=product_id):
            row = (await self._session.execute(stmt)).scalar_one_or_none()
        if row is None:
            raise NotFoundError("Product", product_id)
        return row
