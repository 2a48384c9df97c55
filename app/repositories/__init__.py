"""SQLAlchemy-backed stores for the catalog."""

from app.repositories.assignment_store import SqlAssignmentStore
from app.repositories.product_repository import SqlProductRepository
from app.repositories.search_filter import CategoryMembershipFilter
from app.repositories.tree_store import SqlTreeStore

__all__ = [
    "CategoryMembershipFilter",
    "SqlAssignmentStore",
    "SqlProductRepository",
    "SqlTreeStore",
]
