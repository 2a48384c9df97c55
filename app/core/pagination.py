"""Page-window helpers for ordered listings."""

from collections.abc import Sequence
from typing import TypeVar

from app.core.catalog import PagedResult
from app.core.errors import InvalidArgumentError

T = TypeVar("T")


def validate_page_window(page: int, page_size: int) -> None:
    """Reject malformed pagination parameters.

    Raises:
        InvalidArgumentError: If page < 1 or page_size < 1
    """
    if page < 1:
        raise InvalidArgumentError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise InvalidArgumentError(f"page_size must be >= 1, got {page_size}")


def paginate(items: Sequence[T], page: int, page_size: int) -> PagedResult[T]:
    """Slice an already ordered sequence into a page window.

    A page past the last one yields no items but keeps the total count.
    """
    validate_page_window(page, page_size)

    start = (page - 1) * page_size
    return PagedResult(
        items=tuple(items[start:start + page_size]),
        total_count=len(items),
        page=page,
        page_size=page_size,
    )
