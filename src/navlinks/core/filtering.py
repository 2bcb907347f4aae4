"""Path filtering.

Selects the paths relevant to a view: everything within the depth bounds
for a full tree, or just the neighbourhood of the current page for
navigation trees and bars.
"""

import logging
import re
from collections.abc import Iterable

from navlinks.core.context import CurrentContext
from navlinks.core.paths import canonicalize, path_depth

logger = logging.getLogger(__name__)


def compile_pattern(pattern: str | None) -> re.Pattern[str] | None:
    """Compile a hide/nohide pattern.

    Args:
        pattern: Regular expression, or None/"" for no pattern

    Returns:
        Compiled pattern or None

    Raises:
        ValueError: If the pattern is not a valid regular expression
    """
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ValueError(f"Invalid path pattern {pattern!r}: {e}") from e


def filter_paths(
    paths: Iterable[str],
    context: CurrentContext,
    *,
    hide: str | None = None,
    nohide: str | None = None,
    start_depth: int = 0,
    end_depth: int | None = None,
    do_navbar: bool = False,
) -> list[str]:
    """Filter out the paths a view does not want.

    Args:
        paths: Expanded, ordered path list
        context: Current-URL context
        hide: Drop paths matching this regular expression
        nohide: Keep paths matching this even if they match ``hide``
        start_depth: Drop paths shallower than this
        end_depth: Drop paths deeper than this (0 or None for no limit)
        do_navbar: Keep only paths related to the current URL

    Returns:
        Wanted paths in their original order
    """
    hide_re = compile_pattern(hide)
    nohide_re = compile_pattern(nohide)

    wanted: list[str] = []
    for path in paths:
        depth = path_depth(canonicalize(path))
        if hide_re and hide_re.search(path) and not (nohide_re and nohide_re.search(path)):
            continue
        if depth < start_depth:
            continue
        if end_depth and depth > end_depth:
            continue
        if do_navbar and context.url and not _is_nav_related(path, depth, context, start_depth):
            continue
        wanted.append(path)

    logger.debug(f"Kept {len(wanted)} paths (navbar={do_navbar}, depths {start_depth}..{end_depth})")
    return wanted


def _is_nav_related(
    path: str,
    depth: int,
    context: CurrentContext,
    start_depth: int,
) -> bool:
    """Check whether a navigation view shows path for the current page.

    A navbar shows the current page, its ancestors and children, the top
    level (when starting at level 1), and the siblings of the page's
    directory for a content page or of the page itself for an index page.
    """
    url = context.url
    path = canonicalize(path)
    if depth <= context.depth and url.startswith(path):
        return True
    if path == url:
        return True
    if depth >= context.depth and path.startswith(_as_directory(context.index_path)):
        return True
    if start_depth == 1 and depth == 1:
        return True
    parent_dir = _as_directory(context.index_parent)
    if not context.is_index:
        return depth == context.depth - 1 and path.startswith(parent_dir)
    return depth == context.depth and path.startswith(parent_dir)


def _as_directory(path: str) -> str:
    """Directory form of an index path; "" stays "" and matches everything."""
    if not path or path.endswith("/"):
        return path
    return f"{path}/"
