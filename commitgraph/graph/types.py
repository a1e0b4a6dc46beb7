"""Types for commit graph layout."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class Commit:
    """A commit as supplied by the history provider."""

    id: str
    parent_ids: tuple[str, ...]
    message: str
    author: str
    date: datetime
    author_email: str = ""
    short_id: str = ""

    def __post_init__(self) -> None:
        # Accept any sequence of parents but store a tuple so commits stay hashable
        object.__setattr__(self, "parent_ids", tuple(self.parent_ids))
        if not self.short_id:
            object.__setattr__(self, "short_id", self.id[:7])

    @property
    def summary(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n", 1)[0]


@dataclass(frozen=True)
class BranchHead:
    """A named reference pointing at a commit."""

    name: str
    commit_id: str
    is_head: bool = False


@dataclass(frozen=True)
class BranchLabel:
    name: str
    is_head: bool
    color: str


class ConnectionKind(Enum):
    """How a line from a commit bends toward one of its parents."""

    STRAIGHT = "straight"
    MERGE_LEFT = "merge-left"
    MERGE_RIGHT = "merge-right"
    BRANCH_LEFT = "branch-left"
    BRANCH_RIGHT = "branch-right"

    @property
    def changes_lane(self) -> bool:
        return self is not ConnectionKind.STRAIGHT


@dataclass(frozen=True)
class ParentConnection:
    """Line from a commit to one of its parents.

    When the parent is not part of the laid-out commits, the connection
    points one row down in the same lane and ``is_offscreen`` is set.
    """

    parent_id: str
    parent_lane: int
    parent_row: int
    kind: ConnectionKind
    is_offscreen: bool = False


@dataclass(frozen=True)
class GraphNode:
    """A commit with its layout position."""

    commit: Commit
    lane: int
    row: int
    max_active_lane: int
    parent_connections: tuple[ParentConnection, ...] = ()
    branch_labels: tuple[BranchLabel, ...] = ()


@dataclass(frozen=True)
class GraphLayout:
    """Result of one layout run. Replaced wholesale, never mutated."""

    nodes: tuple[GraphNode, ...] = ()
    max_lane: int = 0
    _rows: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        rows: dict[str, int] = {}
        for node in self.nodes:
            rows.setdefault(node.commit.id, node.row)
        object.__setattr__(self, "_rows", rows)

    def __len__(self) -> int:
        return len(self.nodes)

    def row_of(self, commit_id: str) -> int | None:
        """Return the row of a commit, or None if it is not in this layout."""
        return self._rows.get(commit_id)

    def node_at(self, row: int) -> GraphNode | None:
        if 0 <= row < len(self.nodes):
            return self.nodes[row]
        return None
