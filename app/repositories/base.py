"""Shared helpers for the SQLAlchemy stores."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.catalog import CategoryNode, Product
from app.core.errors import ConflictError, StorageError
from app.infra.logging import get_logger
from app.models.site_tree import ProductPage, SiteTree

logger = get_logger(__name__)


@contextmanager
def storage_errors(operation: str, **context: Any) -> Iterator[None]:
    """Re-raise database failures as StorageError.

    Constraint violations are raised as ConflictError instead.

    Args:
        operation: Store operation name for the log event
        **context: Extra key/values logged with the failure
    """
    try:
        yield
    except IntegrityError as e:
        logger.warning(
            "Store operation conflicted",
            operation=operation,
            error=str(e.orig),
            **context,
        )
        raise ConflictError(f"{operation} conflicts with existing data") from e
    except SQLAlchemyError as e:
        logger.error(
            "Store operation failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
            **context,
        )
        raise StorageError(f"{operation} failed: {e}") from e


def to_node(row: SiteTree) -> CategoryNode:
    return CategoryNode(
        id=row.id,
        parent_id=row.parent_id,
        title=row.title,
        menu_title=row.menu_title,
        show_in_menus=row.show_in_menus,
        url_segment=row.url_segment,
        page_type=row.class_name,
    )


def to_product(row: ProductPage) -> Product:
    return Product(
        id=row.id,
        url_segment=row.url_segment,
        parent_id=row.parent_id,
        sort_order=row.sort,
        title=row.title,
    )
