"""HTML formatting options.

Every view is assembled from the same string fragments; each view has its
own preset of defaults (an unordered list for trees, a paragraph with
"&gt;" separators for breadcrumbs, and so on).
"""

from dataclasses import dataclass, fields, replace

VIEWS = ("link_list", "link_tree", "full_tree", "breadcrumb", "nav_tree", "nav_bar")


@dataclass(frozen=True)
class FormatConfig:
    """String fragments used to assemble link HTML.

    Attributes:
        links_head: String to begin the whole list with
        links_foot: String to end the whole list with
        subtree_head: String to begin each nested list with
        subtree_foot: String to end each nested list with
        last_subtree_head: Like subtree_head, for lists at the end depth
        last_subtree_foot: Like subtree_foot, for lists at the end depth
        pre_item: String to prepend to each item
        post_item: String to append to each item
        pre_active_item: Added in front of the current page's label
        post_active_item: Added after the current page's label
        pre_current_parent: Added in front of links to ancestors of the current page
        post_current_parent: Added after links to ancestors of the current page
        item_sep: String between items
        tree_sep: String between an item and its nested list
        pre_level: String to begin a navbar level with
        post_level: String to end a navbar level with
        pre_level_parent: String in front of a level's ancestor marker
        post_level_parent: String after a level's ancestor marker
        parent_item_sep: String between paths inside an ancestor marker
        level_sep: String between navbar levels
        prefix_url: Prepended to every link target
    """

    links_head: str = "<ul>"
    links_foot: str = "\n</ul>"
    subtree_head: str = "<ul>"
    subtree_foot: str = "\n</ul>"
    last_subtree_head: str = "<ul>"
    last_subtree_foot: str = "\n</ul>"
    pre_item: str = "<li>"
    post_item: str = "</li>"
    pre_active_item: str = "<em>"
    post_active_item: str = "</em>"
    pre_current_parent: str = ""
    post_current_parent: str = ""
    item_sep: str = "\n"
    tree_sep: str = "\n"
    pre_level: str = "<li>"
    post_level: str = "</li>"
    pre_level_parent: str = "["
    post_level_parent: str = "]"
    parent_item_sep: str = " :\n"
    level_sep: str = "\n"
    prefix_url: str = ""

    @classmethod
    def link_list(cls) -> "FormatConfig":
        """Defaults for a flat list of links."""
        return cls()

    @classmethod
    def link_tree(cls) -> "FormatConfig":
        """Defaults for an explicit nested tree."""
        return cls()

    @classmethod
    def full_tree(cls) -> "FormatConfig":
        """Defaults for a site map."""
        return cls()

    @classmethod
    def nav_tree(cls) -> "FormatConfig":
        """Defaults for a nested navigation tree."""
        return cls()

    @classmethod
    def breadcrumb(cls) -> "FormatConfig":
        """Defaults for a breadcrumb trail: a paragraph with "&gt;" separators."""
        return cls(
            links_head="<p>",
            links_foot="\n</p>",
            subtree_head="",
            subtree_foot="",
            last_subtree_head="{",
            last_subtree_foot="}",
            pre_item="",
            post_item="",
            tree_sep=" &gt; ",
        )

    @classmethod
    def nav_bar(cls) -> "FormatConfig":
        """Defaults for an across-the-top navigation bar."""
        return cls(
            pre_item="",
            post_item="",
            pre_current_parent="<strong>",
            post_current_parent="</strong>",
            item_sep=" :\n",
        )

    @classmethod
    def preset(cls, view: str) -> "FormatConfig":
        """Get the default formatting for a view.

        Args:
            view: One of VIEWS

        Returns:
            FormatConfig with the view's defaults

        Raises:
            ValueError: If view is unknown
        """
        if view not in VIEWS:
            raise ValueError(f"Unknown view: {view!r} (expected one of {', '.join(VIEWS)})")
        factory = getattr(cls, view)
        return factory()

    def with_overrides(self, **overrides: str) -> "FormatConfig":
        """Create a new FormatConfig with some fragments replaced.

        Raises:
            ValueError: If an option name is unknown or its value is not a string
        """
        for name, value in overrides.items():
            if name not in FIELD_NAMES:
                raise ValueError(f"Unknown format option: {name}")
            if not isinstance(value, str):
                raise ValueError(f"Format option {name} must be a string")
        return replace(self, **overrides)


FIELD_NAMES = frozenset(f.name for f in fields(FormatConfig))
