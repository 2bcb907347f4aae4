"""Level builder for navigation bars.

Instead of nesting, a navigation bar shows one group of siblings per
depth, each lower group headed by the chain of ancestors it belongs to.
"""

import logging
from collections.abc import Iterable

from navlinks.core.paths import canonicalize, path_depth
from navlinks.core.types import LevelGroup

logger = logging.getLogger(__name__)


def build_levels(paths: Iterable[str], depth: int) -> tuple[LevelGroup, ...]:
    """Build the level groups of a navigation bar.

    The first group holds the paths at ``depth``; following groups hold
    the paths below each of those, depth-first, each group listing all of
    its siblings.

    Args:
        paths: Filtered, ordered paths
        depth: Depth of the first level

    Returns:
        Level groups in display order
    """
    groups, shallower = _build_levels(tuple(paths), depth, ())
    if shallower:
        logger.debug(f"Dropped {len(shallower)} paths above depth {depth}")
    return tuple(groups)


def _build_levels(
    paths: tuple[str, ...],
    depth: int,
    parents: tuple[str, ...],
) -> tuple[list[LevelGroup], list[str]]:
    """Build groups for paths at depth and below.

    Returns:
        Tuple of (groups, paths shallower than depth for the caller)
    """
    top_level: list[str] = []
    lower_levels: list[str] = []
    shallower: list[str] = []
    for path in paths:
        current_depth = path_depth(canonicalize(path))
        if current_depth == depth:
            top_level.append(path)
        elif current_depth > depth:
            lower_levels.append(path)
        else:
            shallower.append(path)

    if not top_level:
        if lower_levels:
            logger.debug(f"Dropped {len(lower_levels)} paths with no parent at depth {depth}")
        return [], shallower

    groups = [LevelGroup(depth=depth, paths=tuple(top_level), parents=parents)]

    for top_path in top_level:
        if not lower_levels:
            break
        prefix = canonicalize(top_path)
        below = tuple(path for path in lower_levels if canonicalize(path).startswith(prefix))
        lower_levels = [path for path in lower_levels if not canonicalize(path).startswith(prefix)]
        if not below:
            continue

        following, leaked = _build_levels(below, depth + 1, (*parents, top_path))
        groups.extend(following)
        shallower.extend(leaked)

    if lower_levels:
        logger.debug(f"Dropped {len(lower_levels)} paths outside every level-{depth} entry")
    return groups, shallower
