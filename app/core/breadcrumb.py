"""Breadcrumb rendering over the page tree."""

from dataclasses import dataclass

from app.core.catalog import CategoryNode
from app.core.errors import NotFoundError
from app.core.stores import TreeStore

DEFAULT_SEPARATOR = " > "


@dataclass(frozen=True)
class BreadcrumbOptions:
    """Options for walking and rendering a breadcrumb.

    Attributes:
        max_depth: Maximum number of collected nodes (0 = unbounded)
        unlinked: Rendering hint for callers, does not change the result
        stop_at_type: Page type at which the walk stops (exclusive)
        show_hidden: Include nodes hidden from menus
        separator: Text placed between labels
    """

    max_depth: int = 20
    unlinked: bool = False
    stop_at_type: str | None = None
    show_hidden: bool = False
    separator: str = DEFAULT_SEPARATOR


class BreadcrumbBuilder:
    """Walks ancestor links and joins the visible menu labels root-first."""

    def __init__(self, tree: TreeStore) -> None:
        self._tree = tree

    async def collect(
        self, start: CategoryNode, options: BreadcrumbOptions
    ) -> list[CategoryNode]:
        """Nodes from the start node upwards that qualify for the breadcrumb."""
        collected: list[CategoryNode] = []
        seen: set[int] = set()
        node: CategoryNode | None = start

        while (
            node is not None
            and node.id not in seen
            and (not options.max_depth or len(collected) < options.max_depth)
            and (not options.stop_at_type or node.page_type != options.stop_at_type)
        ):
            seen.add(node.id)
            if options.show_hidden or node.show_in_menus or node.id == start.id:
                collected.append(node)
            node = await self._parent_of(node)

        return collected

    async def render(
        self, start: CategoryNode, options: BreadcrumbOptions | None = None
    ) -> str:
        options = options or BreadcrumbOptions()
        nodes = await self.collect(start, options)
        return options.separator.join(node.menu_label for node in reversed(nodes))

    async def build_breadcrumb(
        self, node_id: int, options: BreadcrumbOptions | None = None
    ) -> str:
        """Render the breadcrumb of a node, or "" if the node does not exist."""
        try:
            start = await self._tree.get_node(node_id)
        except NotFoundError:
            return ""
        return await self.render(start, options)

    async def _parent_of(self, node: CategoryNode) -> CategoryNode | None:
        if node.parent_id is None:
            return None
        try:
            return await self._tree.get_node(node.parent_id)
        except NotFoundError:
            return None
