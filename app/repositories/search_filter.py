"""Search filter restricting product searches to matching categories."""

from sqlalchemy import Select, String, cast, or_
from sqlalchemy.orm import aliased

from app.models.category_product import ProductCategoryProduct
from app.models.site_tree import ProductCategoryPage, ProductPage


class CategoryMembershipFilter:
    """Filter products by the categories they are assigned to.

    A category matches when its id, title or menu title contains the search
    value, ignoring case. LIKE wildcards in the value are escaped and the
    value is bound as a parameter.
    """

    def __init__(self, value: str | None) -> None:
        self.value = value

    def is_empty(self) -> bool:
        """Whether there is nothing to filter by."""
        return self.value is None or self.value == ""

    def apply(self, statement: Select) -> Select:
        """Restrict a ``select(ProductPage)`` statement to matching categories."""
        if self.is_empty():
            return statement

        value = str(self.value)
        category = aliased(ProductCategoryPage)

        return (
            statement.join(
                ProductCategoryProduct,
                ProductCategoryProduct.product_id == ProductPage.id,
            )
            .join(category, category.id == ProductCategoryProduct.product_category_id)
            .where(
                or_(
                    cast(category.id, String).contains(value, autoescape=True),
                    category.title.icontains(value, autoescape=True),
                    category.menu_title.icontains(value, autoescape=True),
                )
            )
            .distinct()
        )

    def exclude(self, statement: Select) -> Select:
        """Excluding by category is not supported; the statement is unchanged."""
        return statement
