"""HTML rendering of link structures.

Walks trees and level groups and joins each item with the configured
string fragments. Labels and descriptions are inserted as given, so they
may carry their own markup.
"""

from collections.abc import Iterable, Mapping
from enum import Enum

from navlinks.core.context import CurrentContext
from navlinks.core.paths import default_label
from navlinks.core.tree import branch_depth
from navlinks.core.types import Branch, Leaf, LevelGroup, TreeNode
from navlinks.format import FormatConfig


class LinkState(Enum):
    """How an item relates to the current page."""

    ACTIVE = "active"
    CURRENT_PARENT = "current_parent"
    LINK = "link"
    LABEL = "label"


class LinkRenderer:
    """Renders paths as HTML link items.

    Items for the current page are shown as a label rather than a link, so
    nobody is offered a link back to the page they are on.
    """

    def __init__(
        self,
        config: FormatConfig,
        context: CurrentContext,
        *,
        labels: Mapping[str, str] | None = None,
        descriptions: Mapping[str, str] | None = None,
        end_depth: int | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            config: Formatting fragments
            context: Current-URL context
            labels: Display labels keyed by path; missing labels are
                derived from the path
            descriptions: Text to put after each link, keyed by path
            end_depth: Depth whose nested lists use the "last" head/foot
        """
        self._config = config
        self._context = context
        self._labels = labels or {}
        self._descriptions = descriptions or {}
        self._end_depth = end_depth

    def label_for(self, path: str) -> str:
        return self._labels.get(path) or default_label(path)

    def state_for(self, path: str) -> LinkState:
        """Decide how an item should be shown."""
        context = self._context
        if context.is_section(path):
            return LinkState.CURRENT_PARENT
        if context.is_active(path):
            return LinkState.ACTIVE
        if context.is_parent(path):
            return LinkState.CURRENT_PARENT
        return LinkState.LINK

    def render_item(
        self,
        path: str,
        *,
        state: LinkState | None = None,
        close: bool = True,
    ) -> str:
        """Format a single item.

        Args:
            path: Path of the item
            state: Override the state derived from the current page
            close: Append post_item (nested lists come before it)

        Returns:
            HTML for the item
        """
        config = self._config
        if state is None:
            state = self.state_for(path)
        label = self.label_for(path)
        description = self._descriptions.get(path)
        desc = f" {description}" if description else ""

        if state is LinkState.ACTIVE:
            body = f"{config.pre_active_item}{label}{desc}{config.post_active_item}"
        elif state is LinkState.LABEL:
            body = f"{label}{desc}"
        elif state is LinkState.CURRENT_PARENT:
            body = (
                f"{config.pre_current_parent}{self._anchor(path, label)}"
                f"{config.post_current_parent}{desc}"
            )
        else:
            body = f"{self._anchor(path, label)}{desc}"

        item = f"{config.pre_item}{body}"
        return f"{item}{config.post_item}" if close else item

    def render_list(self, paths: Iterable[str]) -> str:
        """Render paths as a flat sequence of items."""
        return self._config.item_sep.join(self.render_item(path) for path in paths)

    def render_tree(self, nodes: Iterable[TreeNode]) -> str:
        """Render tree nodes, nesting each branch inside the item before it.

        Raises:
            ValueError: If a branch does not follow a leaf
        """
        config = self._config
        items: list[str] = []
        closed = True
        for node in nodes:
            if isinstance(node, Leaf):
                if not closed:
                    items[-1] = f"{items[-1]}{config.post_item}"
                items.append(self.render_item(node.path, close=False))
                closed = False
            elif closed:
                raise ValueError("A branch must directly follow a path")
            else:
                items[-1] = f"{items[-1]}{config.tree_sep}{self._render_branch(node)}{config.post_item}"
                closed = True
        if not closed:
            items[-1] = f"{items[-1]}{config.post_item}"
        return config.item_sep.join(items)

    def render_levels(self, groups: Iterable[LevelGroup]) -> str:
        """Render navbar level groups, each headed by its ancestor marker."""
        config = self._config
        levels: list[str] = []
        for group in groups:
            items: list[str] = []
            if group.parents:
                marker = config.parent_item_sep.join(
                    self.render_item(parent, state=LinkState.LABEL) for parent in group.parents
                )
                items.append(f"{config.pre_level_parent}{marker}{config.post_level_parent}")
            items.extend(self.render_item(path) for path in group.paths)
            levels.append(f"{config.pre_level}{config.item_sep.join(items)}{config.post_level}")
        return config.level_sep.join(levels)

    def wrap(self, body: str) -> str:
        """Surround rendered items with links_head/links_foot; empty stays empty."""
        if not body:
            return ""
        return f"{self._config.links_head}{body}{self._config.links_foot}"

    def _render_branch(self, branch: Branch) -> str:
        config = self._config
        if self._end_depth and branch_depth(branch) == self._end_depth:
            head, foot = config.last_subtree_head, config.last_subtree_foot
        else:
            head, foot = config.subtree_head, config.subtree_foot
        return f"{head}{self.render_tree(branch.nodes)}{foot}"

    def _anchor(self, path: str, label: str) -> str:
        return f'<a href="{self._config.prefix_url}{path}">{label}</a>'
