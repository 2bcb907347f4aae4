"""Core type definitions."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Leaf:
    """A single path in a link tree."""

    path: str


@dataclass(frozen=True)
class Branch:
    """Children of the leaf that immediately precedes this branch."""

    nodes: tuple["TreeNode", ...]


TreeNode = Leaf | Branch


@dataclass(frozen=True)
class LevelGroup:
    """Sibling paths sharing one depth in a navigation bar.

    ``parents`` is the chain of ancestor paths leading to this level, shown
    as a bracketed marker in front of the siblings. It is empty for the
    first level.
    """

    depth: int
    paths: tuple[str, ...]
    parents: tuple[str, ...] = field(default=())
