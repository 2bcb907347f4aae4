"""Current-URL context.

Everything the filters and the renderer need to know about the page being
rendered, derived once per call from the caller's current URL.
"""

from dataclasses import dataclass, field, replace

from navlinks.core.expansion import extract_current_parents
from navlinks.core.paths import canonicalize, index_parent, index_path, path_depth


@dataclass(frozen=True)
class CurrentContext:
    """Derived facts about the current URL.

    An empty ``url`` means there is no current page: nothing is active and
    no ancestors are marked.
    """

    url: str = ""
    parents: frozenset[str] = frozenset()
    is_index: bool = False
    depth: int = 0
    index_path: str = ""
    index_parent: str = ""
    sections: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_url(cls, current_url: str | None) -> "CurrentContext":
        """Build context from a (possibly non-canonical) current URL.

        Args:
            current_url: URL of the page being rendered, or None

        Returns:
            CurrentContext for the canonical form of the URL
        """
        url = canonicalize(current_url or "")
        if not url:
            return cls()
        return cls(
            url=url,
            parents=extract_current_parents(url),
            is_index=url.endswith("/"),
            depth=path_depth(url),
            index_path=index_path(url),
            index_parent=index_parent(url),
        )

    def is_active(self, path: str) -> bool:
        """Check if path is the current page."""
        return bool(self.url) and canonicalize(path) == self.url

    def is_parent(self, path: str) -> bool:
        """Check if path is a strict ancestor of the current page."""
        return bool(self.url) and path in self.parents

    def is_section(self, path: str) -> bool:
        """Check if path is the current page shown as the head of a section."""
        return bool(self.url) and canonicalize(path) in self.sections

    def with_section(self, path: str) -> "CurrentContext":
        """Create a new context that treats path as a current section head."""
        return replace(self, sections=self.sections | {canonicalize(path)})
