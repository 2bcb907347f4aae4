"""Path utilities.

Helpers for site-relative URL paths: canonical form, depth, the
enclosing "index" directory and its parent. Paths use "/" as the
hierarchy separator; a trailing slash marks a directory (index page).
"""

import re

_INDEX_RE = re.compile(r"^(.*/)index\.\w+$")
_FILE_LABEL_RE = re.compile(r"(\w+)\.\w+$")
_DIR_LABEL_RE = re.compile(r"(\w+)/?$")
_WORD_RE = re.compile(r"\w+")


def split_path(path: str) -> list[str]:
    """Split path on "/", dropping trailing empty segments.

    A leading slash yields a leading empty segment, so joining the result
    back with "/" restores the original path minus any trailing slashes.
    """
    parts = path.split("/")
    while parts and not parts[-1]:
        parts.pop()
    return parts


def canonicalize(path: str) -> str:
    """Make a path canonical.

    Removes a trailing "index.*" file name and adds the trailing slash to
    directory paths. Directory names are assumed never to contain a dot.

    Args:
        path: Site-relative path (e.g., "/guide/index.html" or "/guide")

    Returns:
        Canonical path (e.g., "/guide/")
    """
    if not path:
        return path

    match = _INDEX_RE.match(path)
    if match:
        return match.group(1)

    if not path.endswith("/") and "." not in path.rsplit("/", 1)[-1]:
        return f"{path}/"
    return path


def is_index(path: str) -> bool:
    """Check whether path denotes an index page (directory)."""
    return canonicalize(path).endswith("/")


def path_depth(path: str) -> int:
    """Count path segments below the root.

    "/" is 0, "/guide/" is 1, "/guide/setup.html" is 2.
    """
    if path == "/":
        return 0
    if path.endswith("/"):
        path = path[:-1]
    if path.startswith("/"):
        path = path[1:]
    return len(split_path(path))


def index_path(path: str) -> str:
    """Get the "index" part of a path, without trailing slash.

    For a content page this is the directory holding it; for an index page
    it is the page's own directory. A file in the root yields "".
    """
    if not path:
        return path

    canonical = canonicalize(path)
    head, sep, last = canonical.rpartition("/")
    if sep and "." in last:
        return head
    if canonical != "/" and canonical.endswith("/"):
        return canonical[:-1]
    return canonical


def index_parent(path: str) -> str:
    """Get the parent directory of the "index" part of a path."""
    if not path:
        return path

    current = index_path(path)
    head, sep, last = current.rpartition("/")
    if sep and last:
        return head
    return current


def default_label(path: str) -> str:
    """Derive a display label from the last part of a path.

    Uses the base name of a file or the name of a directory, replacing
    underscores with spaces and capitalizing each word. Paths with no
    usable name (such as "/") fall back to the path with " :: " separators.
    """
    match = _FILE_LABEL_RE.search(path) or _DIR_LABEL_RE.search(path)
    label = match.group(1) if match else path.replace("/", " :: ")
    label = label.replace("_", " ")
    return _WORD_RE.sub(lambda word: word.group(0).capitalize(), label)
