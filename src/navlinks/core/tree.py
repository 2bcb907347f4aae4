"""Link tree builder.

Turns a flat, filtered list of paths into nested ``Leaf``/``Branch`` nodes
based on path depth. The input must keep each page's descendants
contiguous and right after it, which an alphabetical sort of
"/"-separated paths guarantees.
"""

import logging
from collections.abc import Iterable, Sequence

from navlinks.core.paths import canonicalize, path_depth
from navlinks.core.types import Branch, Leaf, TreeNode

logger = logging.getLogger(__name__)


class _PathCursor:
    """Read position over an immutable path sequence."""

    __slots__ = ("_depths", "_paths", "_pos")

    def __init__(self, paths: Iterable[str]) -> None:
        self._paths = tuple(paths)
        self._depths = tuple(path_depth(canonicalize(path)) for path in self._paths)
        self._pos = 0

    @property
    def done(self) -> bool:
        return self._pos >= len(self._paths)

    @property
    def depth(self) -> int:
        """Depth of the next path."""
        return self._depths[self._pos]

    def take(self) -> str:
        path = self._paths[self._pos]
        self._pos += 1
        return path


def build_lol(paths: Iterable[str], depth: int = 0) -> tuple[TreeNode, ...]:
    """Build a tree ("list of lists") from a flat list of paths.

    Args:
        paths: Filtered, ordered paths; not modified
        depth: Depth of the top-level entries

    Returns:
        Top-level tree nodes
    """
    cursor = _PathCursor(paths)
    nodes = _build_nodes(cursor, depth)
    while not cursor.done:
        # Entries shallower than the requested depth start a new run.
        logger.debug(f"Path above depth {depth}, continuing at depth {cursor.depth}")
        nodes.extend(_build_nodes(cursor, cursor.depth))
    return tuple(nodes)


def _build_nodes(cursor: _PathCursor, depth: int) -> list[TreeNode]:
    """Consume paths at or below depth, stopping at the first shallower one."""
    nodes: list[TreeNode] = []
    follows_leaf = False
    while not cursor.done:
        next_depth = cursor.depth
        if next_depth == depth:
            nodes.append(Leaf(cursor.take()))
            follows_leaf = True
        elif next_depth > depth:
            _attach(nodes, _build_nodes(cursor, next_depth), follows_leaf=follows_leaf)
            follows_leaf = False
        else:
            break
    return nodes


def _attach(
    nodes: list[TreeNode],
    children: Sequence[TreeNode],
    *,
    follows_leaf: bool,
) -> None:
    """Attach children as a branch of the leaf just added to nodes.

    Children with no leaf of their own level to hang from (at the start of
    a sequence, or right after another branch or splice) are spliced into
    nodes instead.
    """
    if not children:
        return
    if follows_leaf:
        nodes.append(Branch(tuple(children)))
    else:
        nodes.extend(children)


def tree_from_nested(structure: Iterable[object]) -> tuple[TreeNode, ...]:
    """Convert nested lists of paths into tree nodes.

    A list following a path holds that path's children, e.g.
    ``["/a.html", "/b/", ["/b/c.html"]]``.

    Raises:
        TypeError: If an entry is neither a string nor a nested list
    """
    nodes: list[TreeNode] = []
    follows_leaf = False
    for entry in structure:
        if isinstance(entry, str):
            nodes.append(Leaf(entry))
            follows_leaf = True
        elif isinstance(entry, (list, tuple)):
            children = tree_from_nested(entry)
            if children:
                _attach(nodes, children, follows_leaf=follows_leaf)
                follows_leaf = False
        else:
            raise TypeError(f"Expected a path or a list of paths, got {type(entry).__name__}")
    return tuple(nodes)


def flatten(nodes: Iterable[TreeNode]) -> list[str]:
    """List the leaf paths of a tree depth-first."""
    paths: list[str] = []
    for node in nodes:
        if isinstance(node, Leaf):
            paths.append(node.path)
        else:
            paths.extend(flatten(node.nodes))
    return paths


def branch_depth(branch: Branch) -> int:
    """Depth of the entries directly inside a branch."""
    for node in branch.nodes:
        if isinstance(node, Leaf):
            return path_depth(canonicalize(node.path))
    return 0
