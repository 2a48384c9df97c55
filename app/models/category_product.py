"""ProductCategoryProduct model - category/product assignment join table."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base

if TYPE_CHECKING:
    from app.models.site_tree import ProductCategoryPage, ProductPage


class ProductCategoryProduct(Base):
    """Explicit assignment of a product to a category.

    Pair uniqueness is enforced by the assignment store, not by the schema.
    ``product_order`` is kept for editors but listings ignore it.
    """

    __tablename__ = "product_category_products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("site_tree.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("site_tree.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    product_category: Mapped["ProductCategoryPage"] = relationship(
        "ProductCategoryPage",
        foreign_keys=[product_category_id],
        lazy="selectin",
    )
    product: Mapped["ProductPage"] = relationship(
        "ProductPage",
        foreign_keys=[product_id],
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return (
            f"<ProductCategoryProduct(category_id={self.product_category_id}, "
            f"product_id={self.product_id})>"
        )
