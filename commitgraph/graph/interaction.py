"""Interaction layer - turns pointer activity on graph rows into events."""

from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum

from commitgraph.graph.types import GraphLayout, GraphNode
from commitgraph.graph.viewport import Viewport


class GraphEventKind(Enum):
    ACTIVATE = "activate"  # Single click on a row
    OPEN = "open"  # Double click on a row


@dataclass(frozen=True)
class GraphEvent:
    kind: GraphEventKind
    commit_id: str


EventSink = Callable[[GraphEvent], None]


class GraphEventQueue:
    """FIFO channel of graph events for consumers that poll."""

    def __init__(self) -> None:
        self._events: deque[GraphEvent] = deque()

    def __call__(self, event: GraphEvent) -> None:
        self._events.append(event)

    def __len__(self) -> int:
        return len(self._events)

    def drain(self) -> Iterator[GraphEvent]:
        """Yield and remove queued events, oldest first."""
        while self._events:
            yield self._events.popleft()


class GraphInteraction:
    """
    Maps pointer positions to commits and forwards events to a sink.

    Stateless apart from its collaborators: selection is owned by whoever
    consumes the events and is only passed back in for highlighting.
    """

    def __init__(self, viewport: Viewport, sink: EventSink) -> None:
        self.viewport = viewport
        self.sink = sink

    def node_at(self, y: float, layout: GraphLayout) -> GraphNode | None:
        """Return the node under a viewport-relative y coordinate."""
        if y < 0:
            return None
        return layout.node_at(self.viewport.row_at(y))

    def press(self, y: float, layout: GraphLayout) -> GraphEvent | None:
        return self._emit(GraphEventKind.ACTIVATE, y, layout)

    def double_press(self, y: float, layout: GraphLayout) -> GraphEvent | None:
        return self._emit(GraphEventKind.OPEN, y, layout)

    def _emit(self, kind: GraphEventKind, y: float, layout: GraphLayout) -> GraphEvent | None:
        node = self.node_at(y, layout)
        if node is None:
            return None
        event = GraphEvent(kind=kind, commit_id=node.commit.id)
        self.sink(event)
        return event


def is_highlighted(node: GraphNode, selected_commit_id: str | None) -> bool:
    return selected_commit_id is not None and node.commit.id == selected_commit_id
