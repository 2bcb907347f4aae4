"""Smart HTML link lists.

Each function takes a set of URLs (or site paths) and labels and returns
an HTML fragment. If given the URL of the current page, the matching item
is shown as a plain emphasized label instead of a link back to itself.
Functions return "" when there is nothing to render.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence

from navlinks.core.context import CurrentContext
from navlinks.core.expansion import extract_all_paths
from navlinks.core.filtering import filter_paths
from navlinks.core.levels import build_levels
from navlinks.core.renderer import LinkRenderer
from navlinks.core.tree import build_lol, tree_from_nested
from navlinks.core.types import LevelGroup, TreeNode
from navlinks.format import FormatConfig

logger = logging.getLogger(__name__)

ROOT_LABEL = "Home"


def render_flat_list(
    paths: Sequence[str],
    current_url: str | None = None,
    *,
    labels: Mapping[str, str] | None = None,
    descriptions: Mapping[str, str] | None = None,
    format_config: FormatConfig | None = None,
) -> str:
    """Generate a simple list of links, in the given order.

    Args:
        paths: URLs in display order
        current_url: URL of the current page
        labels: Labels keyed by URL; missing ones use the last part of the URL
        descriptions: Text to put next to the links, keyed by URL
        format_config: Formatting (default: FormatConfig.link_list())

    Returns:
        HTML fragment, "" if paths is empty
    """
    if not paths:
        return ""

    renderer = LinkRenderer(
        format_config or FormatConfig.link_list(),
        CurrentContext.from_url(current_url),
        labels=labels,
        descriptions=descriptions,
    )
    return renderer.wrap(renderer.render_list(paths))


def render_explicit_tree(
    link_tree: Sequence[object],
    current_url: str | None = None,
    *,
    labels: Mapping[str, str] | None = None,
    descriptions: Mapping[str, str] | None = None,
    format_config: FormatConfig | None = None,
) -> str:
    """Generate nested lists of links from nested lists of URLs.

    A list directly after a URL holds that URL's children, e.g.
    ``["/a.html", "/b/", ["/b/c.html", "/b/d.html"]]``. Good for tables of
    contents or hand-made site maps.

    Args:
        link_tree: Nested lists of URLs in display order
        current_url: URL of the current page
        labels: Labels keyed by URL
        descriptions: Text to put next to the links, keyed by URL
        format_config: Formatting (default: FormatConfig.link_tree())

    Returns:
        HTML fragment, "" if the tree is empty
    """
    if not link_tree:
        return ""

    renderer = LinkRenderer(
        format_config or FormatConfig.link_tree(),
        CurrentContext.from_url(current_url),
        labels=labels,
        descriptions=descriptions,
    )
    return renderer.wrap(renderer.render_tree(tree_from_nested(link_tree)))


def render_full_tree(
    paths: Iterable[str],
    current_url: str | None = None,
    *,
    labels: Mapping[str, str] | None = None,
    descriptions: Mapping[str, str] | None = None,
    hide: str | None = None,
    nohide: str | None = None,
    start_depth: int = 0,
    end_depth: int | None = 0,
    preserve_order: bool = False,
    format_config: FormatConfig | None = None,
) -> str:
    """Generate a site map of all pages and index pages in the given paths.

    Intermediate directories do not need to be listed; they are derived
    from the paths.

    Args:
        paths: Site-relative paths, e.g. "/foo/bar.html"
        current_url: URL of the current page
        labels: Labels keyed by path; "/" defaults to "Home"
        descriptions: Text to put next to the links, keyed by path
        hide: Regular expression; matching paths are left out
        nohide: Regular expression; matching paths are kept despite ``hide``
        start_depth: Start the tree at this depth (0 is the root)
        end_depth: End the tree at this depth (0 for no limit)
        preserve_order: Keep the input order instead of sorting
        format_config: Formatting (default: FormatConfig.full_tree())

    Returns:
        HTML fragment, "" if nothing is left after filtering
    """
    context = CurrentContext.from_url(current_url)
    nodes = _build_tree(
        paths,
        context,
        hide=hide,
        nohide=nohide,
        start_depth=start_depth,
        end_depth=end_depth,
        preserve_order=preserve_order,
        do_navbar=False,
    )
    renderer = LinkRenderer(
        format_config or FormatConfig.full_tree(),
        context,
        labels=_with_root_label(labels),
        descriptions=descriptions,
        end_depth=end_depth,
    )
    return renderer.wrap(renderer.render_tree(nodes))


def render_breadcrumb(
    current_url: str | None,
    *,
    labels: Mapping[str, str] | None = None,
    descriptions: Mapping[str, str] | None = None,
    hide: str | None = None,
    nohide: str | None = None,
    start_depth: int = 0,
    format_config: FormatConfig | None = None,
) -> str:
    """Generate a breadcrumb trail from the root down to the current URL.

    Laid out with "&gt;" separators by default; with a tree-style
    FormatConfig it becomes nested lists.

    Args:
        current_url: URL of the current page
        labels: Labels keyed by path; "/" defaults to "Home"
        descriptions: Text to put next to the links, keyed by path
        hide: Regular expression; matching ancestors are left out
        nohide: Regular expression; matching paths are kept despite ``hide``
        start_depth: Leave out ancestors above this depth
        format_config: Formatting (default: FormatConfig.breadcrumb())

    Returns:
        HTML fragment, "" without a current URL
    """
    context = CurrentContext.from_url(current_url)
    if not context.url:
        return ""

    nodes = _build_tree(
        [context.url],
        context,
        hide=hide,
        nohide=nohide,
        start_depth=start_depth,
        end_depth=None,
        preserve_order=False,
        do_navbar=False,
    )
    renderer = LinkRenderer(
        format_config or FormatConfig.breadcrumb(),
        context,
        labels=_with_root_label(labels),
        descriptions=descriptions,
    )
    return renderer.wrap(renderer.render_tree(nodes))


def render_nav_tree(
    paths: Iterable[str],
    current_url: str | None = None,
    *,
    labels: Mapping[str, str] | None = None,
    descriptions: Mapping[str, str] | None = None,
    hide: str | None = None,
    nohide: str | None = None,
    start_depth: int = 1,
    end_depth: int | None = None,
    preserve_order: bool = True,
    format_config: FormatConfig | None = None,
) -> str:
    """Generate a nested navigation tree around the current URL.

    Shows the top-level links, the links leading to the current URL, the
    links on the same level as the current URL, and the related links just
    above it, depending on whether it is an index page or a content page.

    Args:
        paths: Site-relative paths
        current_url: URL of the current page
        labels: Labels keyed by path; "/" defaults to "Home"
        descriptions: Text to put next to the links, keyed by path
        hide: Regular expression; matching paths are left out
        nohide: Regular expression; matching paths are kept despite ``hide``
        start_depth: Start the tree at this depth
        end_depth: End the tree at this depth; None uses the current page's
            depth, plus one for an index page
        preserve_order: Keep the input order instead of sorting
        format_config: Formatting (default: FormatConfig.nav_tree())

    Returns:
        HTML fragment, "" if nothing is left after filtering
    """
    context = CurrentContext.from_url(current_url)
    if end_depth is None:
        end_depth = _nav_end_depth(context)

    nodes = _build_tree(
        paths,
        context,
        hide=hide,
        nohide=nohide,
        start_depth=start_depth,
        end_depth=end_depth,
        preserve_order=preserve_order,
        do_navbar=True,
    )
    renderer = LinkRenderer(
        format_config or FormatConfig.nav_tree(),
        context,
        labels=_with_root_label(labels),
        descriptions=descriptions,
        end_depth=end_depth,
    )
    return renderer.wrap(renderer.render_tree(nodes))


def render_nav_bar(
    paths: Iterable[str],
    current_url: str | None = None,
    *,
    labels: Mapping[str, str] | None = None,
    descriptions: Mapping[str, str] | None = None,
    hide: str | None = None,
    nohide: str | None = None,
    start_depth: int = 1,
    preserve_order: bool = True,
    format_config: FormatConfig | None = None,
) -> str:
    """Generate a multi-level "across the top" navigation bar.

    Links on the same level of the hierarchy are grouped together, then
    the links on the next level down towards the current URL, and so on.
    Each lower level starts with a marker naming the ancestors it belongs
    to. For deep hierarchies render_nav_tree may work better.

    Args:
        paths: Site-relative paths
        current_url: URL of the current page
        labels: Labels keyed by path; "/" defaults to "Home"
        descriptions: Text to put next to the links, keyed by path
        hide: Regular expression; matching paths are left out
        nohide: Regular expression; matching paths are kept despite ``hide``
        start_depth: Depth of the first level
        preserve_order: Keep the input order instead of sorting
        format_config: Formatting (default: FormatConfig.nav_bar())

    Returns:
        HTML fragment, "" if nothing is left after filtering
    """
    context = CurrentContext.from_url(current_url)
    end_depth = _nav_end_depth(context)

    expanded = extract_all_paths(paths or (), preserve_order=preserve_order)
    wanted = filter_paths(
        expanded,
        context,
        hide=hide,
        nohide=nohide,
        start_depth=start_depth,
        end_depth=end_depth,
        do_navbar=True,
    )
    groups = build_levels(wanted, start_depth)
    logger.debug(f"Nav bar for {context.url!r}: {len(wanted)} paths in {len(groups)} levels")

    if context.is_index and _heads_level(context, groups):
        context = context.with_section(context.url)

    renderer = LinkRenderer(
        format_config or FormatConfig.nav_bar(),
        context,
        labels=_with_root_label(labels),
        descriptions=descriptions,
    )
    return renderer.wrap(renderer.render_levels(groups))


def _build_tree(
    paths: Iterable[str],
    context: CurrentContext,
    *,
    hide: str | None,
    nohide: str | None,
    start_depth: int,
    end_depth: int | None,
    preserve_order: bool,
    do_navbar: bool,
) -> tuple[TreeNode, ...]:
    """Expand, filter and nest paths."""
    expanded = extract_all_paths(paths or (), preserve_order=preserve_order)
    wanted = filter_paths(
        expanded,
        context,
        hide=hide,
        nohide=nohide,
        start_depth=start_depth,
        end_depth=end_depth,
        do_navbar=do_navbar,
    )
    logger.debug(f"Expanded to {len(expanded)} paths, kept {len(wanted)}")
    return build_lol(wanted)


def _nav_end_depth(context: CurrentContext) -> int:
    """Show children of an index page, but only siblings of a content page."""
    return context.depth + 1 if context.is_index else context.depth


def _heads_level(context: CurrentContext, groups: Iterable[LevelGroup]) -> bool:
    """Check whether the current page is the marker of a displayed level."""
    return any(group.parents and context.is_active(group.parents[-1]) for group in groups)


def _with_root_label(labels: Mapping[str, str] | None) -> dict[str, str]:
    """Copy labels, naming the root "Home" unless the caller labelled it."""
    result = dict(labels or {})
    if not result.get("/"):
        result["/"] = ROOT_LABEL
    return result
