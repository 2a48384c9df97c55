"""Default category assignment run by the product save workflow."""

from app.core.catalog import Product
from app.core.errors import NotFoundError
from app.core.stores import AssignmentStore, TreeStore
from app.infra.logging import get_logger

logger = get_logger(__name__)


async def ensure_default_category_assignment(
    product: Product,
    tree: TreeStore,
    assignments: AssignmentStore,
) -> bool:
    """Assign a saved product to the category it sits under in the page tree.

    Only persisted products whose tree parent is a category are linked, and
    an existing link is never duplicated.

    Returns:
        True if a new assignment was created
    """
    if product.id is None or product.parent_id is None:
        return False

    try:
        parent = await tree.get_node(product.parent_id)
    except NotFoundError:
        return False

    if not parent.is_category:
        return False

    if await assignments.link_exists(parent.id, product.id):
        return False

    await assignments.link(parent.id, product.id)
    logger.info(
        "Assigned product to tree parent category",
        product_id=product.id,
        category_id=parent.id,
    )
    return True
