"""Path-set expansion.

Derives every intermediate directory path from a list of page paths, so
that a tree can be built without listing each index page explicitly.
"""

from collections.abc import Iterable, Iterator

from navlinks.core.paths import split_path


def ancestor_paths(path: str) -> Iterator[str]:
    """Yield the ancestor directory paths of path, deepest first.

    "/foo/bar/baz.html" yields "/foo/bar/", "/foo/" and "/".
    The path itself is not included.
    """
    parts = split_path(path)[:-1]
    while parts:
        yield "/".join([*parts, ""])
        parts.pop()


def extract_all_paths(paths: Iterable[str], *, preserve_order: bool = False) -> list[str]:
    """Extract all possible paths out of a list of paths.

    Given "/foo/bar/baz.html" this produces "/", "/foo/", "/foo/bar/"
    and "/foo/bar/baz.html".

    Args:
        paths: Page paths in input order
        preserve_order: Keep the ordering of the input list; each derived
            directory sorts together with the first path that introduced it.
            Otherwise paths are sorted alphabetically.

    Returns:
        De-duplicated list of paths
    """
    order_keys: dict[str, int] = {}
    order = 1
    for path in paths:
        order_keys.setdefault(path, order)
        for ancestor in ancestor_paths(path):
            order_keys.setdefault(ancestor, order)
        if preserve_order:
            order += 1

    return sorted(order_keys, key=lambda path: (order_keys[path], path))


def extract_current_parents(current_url: str) -> frozenset[str]:
    """Extract the strict ancestor directory paths of the current URL."""
    if not current_url:
        return frozenset()
    return frozenset(ancestor_paths(current_url))
