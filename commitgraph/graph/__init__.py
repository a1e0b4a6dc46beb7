"""Commit graph layout engine, viewport and interaction mapping."""

from commitgraph.graph.colors import assign_branch_colors, get_lane_color
from commitgraph.graph.interaction import (
    GraphEvent,
    GraphEventKind,
    GraphEventQueue,
    GraphInteraction,
    is_highlighted,
)
from commitgraph.graph.layout import calculate_graph_layout
from commitgraph.graph.types import (
    BranchHead,
    BranchLabel,
    Commit,
    ConnectionKind,
    GraphLayout,
    GraphNode,
    ParentConnection,
)
from commitgraph.graph.viewport import ScrollRequest, Viewport, ViewportConfig

__all__ = [
    "BranchHead",
    "BranchLabel",
    "Commit",
    "ConnectionKind",
    "GraphEvent",
    "GraphEventKind",
    "GraphEventQueue",
    "GraphInteraction",
    "GraphLayout",
    "GraphNode",
    "ParentConnection",
    "ScrollRequest",
    "Viewport",
    "ViewportConfig",
    "assign_branch_colors",
    "calculate_graph_layout",
    "get_lane_color",
    "is_highlighted",
]
