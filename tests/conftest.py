"""Shared fixtures: in-memory stores, a SQLite database and an API client."""

import dataclasses
from collections.abc import Iterable
from types import SimpleNamespace

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.core.catalog import (
    PAGE_TYPE,
    CategoryAssignment,
    CategoryNode,
    Product,
)
from app.core.errors import NotFoundError
from app.core.stores import AssignmentStore, ProductRepository, TreeStore
from app.main import app
from app.models import Base, ProductCategoryPage, ProductCategoryProduct, ProductPage, SiteTree


# =============================================================================
# In-memory stores
# =============================================================================


class InMemoryTreeStore(TreeStore):
    def __init__(self) -> None:
        self.nodes: dict[int, CategoryNode] = {}

    def add(self, node: CategoryNode) -> CategoryNode:
        self.nodes[node.id] = node
        return node

    async def get_node(self, node_id: int) -> CategoryNode:
        try:
            return self.nodes[node_id]
        except KeyError:
            raise NotFoundError("Node", node_id) from None

    async def get_children(self, node_id: int) -> list[CategoryNode]:
        return [node for node in self.nodes.values() if node.parent_id == node_id]

    async def list_categories(self) -> list[CategoryNode]:
        return [node for node in self.nodes.values() if node.is_category]


class InMemoryAssignmentStore(AssignmentStore):
    def __init__(self) -> None:
        self.links: list[CategoryAssignment] = []

    async def link_exists(self, category_id: int, product_id: int) -> bool:
        return any(
            link.category_id == category_id and link.product_id == product_id
            for link in self.links
        )

    async def link(self, category_id: int, product_id: int, order: int = 0) -> None:
        if not await self.link_exists(category_id, product_id):
            self.links.append(CategoryAssignment(category_id, product_id, order))

    async def category_ids_for_product(self, product_id: int) -> list[int]:
        return sorted({link.category_id for link in self.links if link.product_id == product_id})


class InMemoryProductRepository(ProductRepository):
    def __init__(self, tree: InMemoryTreeStore, assignments: InMemoryAssignmentStore) -> None:
        self.items: dict[int, Product] = {}
        self._tree = tree
        self._assignments = assignments
        self._next_id = 1000

    def add(self, product: Product) -> Product:
        self.items[product.id] = product
        return product

    async def find_by_category_scope(self, scope_ids: Iterable[int]) -> list[Product]:
        scope = set(scope_ids)
        assigned = {link.product_id for link in self._assignments.links if link.category_id in scope}
        return [
            product
            for product in self.items.values()
            if product.parent_id in scope or product.id in assigned
        ]

    async def get_by_url_segment(self, segment: str) -> Product:
        for product in self.items.values():
            if product.url_segment == segment:
                return product
        raise NotFoundError("Product", segment)

    async def get(self, product_id: int) -> Product:
        try:
            return self.items[product_id]
        except KeyError:
            raise NotFoundError("Product", product_id) from None

    async def save(self, product: Product) -> Product:
        if product.id is None:
            product = dataclasses.replace(product, id=self._next_id)
            self._next_id += 1
        self.items[product.id] = product
        return product

    async def search(self, category: str | None = None) -> list[Product]:
        if not category:
            return list(self.items.values())
        needle = category.lower()
        matching = {
            node.id
            for node in self._tree.nodes.values()
            if node.is_category and (needle in str(node.id) or needle in node.title.lower())
        }
        product_ids = {link.product_id for link in self._assignments.links if link.category_id in matching}
        return [product for product in self.items.values() if product.id in product_ids]


@pytest.fixture
def memory_catalog() -> SimpleNamespace:
    """Empty in-memory tree, product and assignment stores."""
    tree = InMemoryTreeStore()
    assignments = InMemoryAssignmentStore()
    products = InMemoryProductRepository(tree, assignments)
    return SimpleNamespace(tree=tree, products=products, assignments=assignments)


@pytest.fixture
def scenario_catalog(memory_catalog: SimpleNamespace) -> SimpleNamespace:
    """Category A(1) with children B(2) and D(3, hidden from menus).

    P1 is assigned to A, P2 sits under B in the tree, P3 is assigned to D.
    """
    tree = memory_catalog.tree
    tree.add(CategoryNode(id=1, parent_id=None, title="A", url_segment="a"))
    tree.add(CategoryNode(id=2, parent_id=1, title="B", url_segment="b"))
    tree.add(CategoryNode(id=3, parent_id=1, title="D", url_segment="d", show_in_menus=False))

    products = memory_catalog.products
    products.add(Product(id=11, url_segment="p1", parent_id=None, sort_order=3, title="P1"))
    products.add(Product(id=12, url_segment="p2", parent_id=2, sort_order=1, title="P2"))
    products.add(Product(id=13, url_segment="p3", parent_id=None, sort_order=1, title="P3"))

    memory_catalog.assignments.links.extend(
        [CategoryAssignment(1, 11), CategoryAssignment(3, 13)]
    )
    return memory_catalog


# =============================================================================
# SQLite database
# =============================================================================

# Page tree used by the SQL and API tests:
#
#   shop (1, Page)
#   ├── furniture (10, category)
#   │   ├── chairs (11, category)
#   │   │   └── stools (13, category)
#   │   ├── clearance (12, category, hidden)
#   │   └── about-furniture (14, Page)
#   └── lighting (15, category, menu title "Lamps")
#
# Products: oak-table (100, under shop, assigned to furniture),
# ladder-chair (101, under chairs), bargain-lamp (102, under shop, assigned
# to clearance and lighting), bar-stool (103, under stools, assigned to
# stools), armchair (104, under furniture and assigned to it),
# unrelated-rug (105, under shop), catalogue-print (106, under
# about-furniture).


async def seed_catalog(session: AsyncSession) -> None:
    session.add_all(
        [
            SiteTree(id=1, title="Shop", url_segment="shop", sort=1),
            ProductCategoryPage(id=10, parent_id=1, title="Furniture", url_segment="furniture", sort=1),
            ProductCategoryPage(id=11, parent_id=10, title="Chairs", url_segment="chairs", sort=1),
            ProductCategoryPage(
                id=12,
                parent_id=10,
                title="Clearance",
                url_segment="clearance",
                show_in_menus=False,
                sort=2,
            ),
            ProductCategoryPage(id=13, parent_id=11, title="Stools", url_segment="stools", sort=1),
            SiteTree(id=14, parent_id=10, title="About furniture", url_segment="about-furniture", sort=3),
            ProductCategoryPage(
                id=15,
                parent_id=1,
                title="Lighting",
                menu_title="Lamps",
                url_segment="lighting",
                sort=2,
            ),
        ]
    )
    session.add_all(
        [
            ProductPage(id=100, parent_id=1, title="Oak table", url_segment="oak-table", sort=2),
            ProductPage(id=101, parent_id=11, title="Ladder chair", url_segment="ladder-chair", sort=1),
            ProductPage(id=102, parent_id=1, title="Bargain lamp", url_segment="bargain-lamp", sort=1),
            ProductPage(id=103, parent_id=13, title="Bar stool", url_segment="bar-stool", sort=1),
            ProductPage(id=104, parent_id=10, title="Armchair", url_segment="armchair", sort=5),
            ProductPage(id=105, parent_id=1, title="Rug", url_segment="unrelated-rug", sort=9),
            ProductPage(id=106, parent_id=14, title="Print", url_segment="catalogue-print", sort=1),
        ]
    )
    await session.flush()
    session.add_all(
        [
            ProductCategoryProduct(product_category_id=10, product_id=100, product_order=3),
            ProductCategoryProduct(product_category_id=12, product_id=102),
            ProductCategoryProduct(product_category_id=15, product_id=102),
            ProductCategoryProduct(product_category_id=13, product_id=103),
            ProductCategoryProduct(product_category_id=10, product_id=104, product_order=1),
        ]
    )
    await session.commit()


@pytest_asyncio.fixture
async def engine():
    """In-memory SQLite engine with the schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def session(session_factory: async_sessionmaker[AsyncSession]):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_session(session: AsyncSession) -> AsyncSession:
    """Session over a database holding the sample page tree."""
    await seed_catalog(session)
    return session


# =============================================================================
# API client
# =============================================================================


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]):
    """HTTP client against the app, backed by the seeded SQLite database."""
    async with session_factory() as seed_session:
        await seed_catalog(seed_session)

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def plain_page() -> CategoryNode:
    return CategoryNode(id=99, parent_id=None, title="Home", url_segment="home", page_type=PAGE_TYPE)
