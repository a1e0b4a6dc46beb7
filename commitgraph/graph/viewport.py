"""Virtualized viewport - decides which rows of the graph need rendering."""

import math
from dataclasses import dataclass

from commitgraph.constants import DEFAULT_BUFFER_ROWS, DEFAULT_ROW_HEIGHT
from commitgraph.graph.types import GraphLayout, GraphNode


@dataclass(frozen=True)
class ViewportConfig:
    row_height: int = DEFAULT_ROW_HEIGHT
    buffer_rows: int = DEFAULT_BUFFER_ROWS


@dataclass(frozen=True)
class ScrollRequest:
    """A one-shot smooth scroll to ``target`` for the renderer to carry out."""

    target: float
    serial: int


class Viewport:
    """
    Scroll state of the commit graph.

    Holds the scroll offset and height of the visible area. Everything else
    (visible rows, scroll targets) is derived from those two numbers and the
    config. The renderer reports scrolling and resizing back through
    set_scroll_offset() and on_resize().
    """

    def __init__(
        self,
        config: ViewportConfig | None = None,
        viewport_height: float = 0.0,
        scroll_offset: float = 0.0,
    ) -> None:
        self.config = config or ViewportConfig()
        self.viewport_height = viewport_height
        self.scroll_offset = scroll_offset

        self._next_serial = 0
        self._pending_scroll: ScrollRequest | None = None

    @property
    def row_height(self) -> int:
        return self.config.row_height

    @property
    def buffer_rows(self) -> int:
        return self.config.buffer_rows

    @property
    def pending_scroll(self) -> ScrollRequest | None:
        return self._pending_scroll

    def visible_range(self, total_rows: int) -> tuple[int, int]:
        """Return the half-open [start, end) row range to render, buffer included."""
        row_height = self.row_height
        start = max(0, math.floor(self.scroll_offset / row_height) - self.buffer_rows)
        end = min(
            total_rows,
            math.ceil((self.scroll_offset + self.viewport_height) / row_height) + self.buffer_rows,
        )
        return start, max(start, end)

    def content_height(self, total_rows: int) -> int:
        """Total scrollable height for the given number of rows."""
        return total_rows * self.row_height

    def row_at(self, y: float) -> int:
        """Row under a y coordinate relative to the top of the viewport."""
        return math.floor((self.scroll_offset + y) / self.row_height)

    def scroll_target_for_row(self, row: int) -> float:
        """Scroll offset that centers ``row`` vertically."""
        row_height = self.row_height
        return max(0.0, row * row_height - self.viewport_height / 2 + row_height / 2)

    def scroll_to_row(self, row: int) -> ScrollRequest:
        """
        Request a smooth scroll centering ``row``.

        A new request supersedes any request still in flight; completing
        the older one afterwards has no effect.
        """
        self._next_serial += 1
        request = ScrollRequest(target=self.scroll_target_for_row(row), serial=self._next_serial)
        self._pending_scroll = request
        return request

    def scroll_to_commit(self, commit_id: str, layout: GraphLayout) -> ScrollRequest | None:
        """Request a smooth scroll to a commit. Unknown commits are ignored."""
        row = layout.row_of(commit_id)
        if row is None:
            return None
        return self.scroll_to_row(row)

    def complete_scroll(self, request: ScrollRequest) -> bool:
        """Apply a finished scroll request. Returns False for superseded requests."""
        if self._pending_scroll is None or request.serial != self._pending_scroll.serial:
            return False
        self._pending_scroll = None
        self.scroll_offset = request.target
        return True

    def set_scroll_offset(self, offset: float) -> None:
        self.scroll_offset = max(0.0, offset)

    def on_resize(self, height: float) -> None:
        """Update the viewport height. Scroll offset is left as is."""
        self.viewport_height = height


def nodes_with_lines_in(layout: GraphLayout, start: int, end: int) -> list[GraphNode]:
    """
    Nodes whose connections must be drawn to paint rows [start, end).

    That is every node in the range plus nodes above it with a line reaching
    down into the range, such as a long-lived branch whose tip scrolled away.
    """
    above = [
        node
        for node in layout.nodes[:start]
        if any(conn.parent_row >= start for conn in node.parent_connections)
    ]
    return above + list(layout.nodes[start:end])
