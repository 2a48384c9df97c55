"""SiteTree models - every page of the storefront lives in one tree.

Categories and products are page types of the same table, distinguished by
``class_name`` (single-table inheritance).
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.catalog import CATEGORY_PAGE_TYPE, PAGE_TYPE, PRODUCT_PAGE_TYPE
from app.models.base import Base, TimestampMixin


class SiteTree(Base, TimestampMixin):
    """A page in the site tree."""

    __tablename__ = "site_tree"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    class_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    parent_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("site_tree.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    menu_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    url_segment: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    show_in_menus: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    sort: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __mapper_args__ = {
        "polymorphic_on": "class_name",
        "polymorphic_identity": PAGE_TYPE,
    }

    def __repr__(self) -> str:
        return f"<{self.class_name}(id={self.id}, url_segment='{self.url_segment}')>"


class ProductCategoryPage(SiteTree):
    """A product category page. Products link to it through assignments."""

    __mapper_args__ = {"polymorphic_identity": CATEGORY_PAGE_TYPE}


class ProductPage(SiteTree):
    """A product page."""

    __mapper_args__ = {"polymorphic_identity": PRODUCT_PAGE_TYPE}
