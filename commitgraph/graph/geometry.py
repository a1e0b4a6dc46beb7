"""Pixel geometry of the graph column: node centers, connection paths, widths."""

from dataclasses import dataclass

from commitgraph.constants import (
    DEFAULT_ROW_HEIGHT,
    GRAPH_PADDING,
    LANE_PADDING,
    LANE_WIDTH,
    MIN_GRAPH_WIDTH,
)
from commitgraph.graph.types import GraphNode, ParentConnection


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class ConnectionPath:
    """
    Path from a commit down to its parent.

    Straight connections are a single line from start to end. Lane changes
    are a cubic bezier with both control points on the vertical midpoint,
    so the curve leaves and enters each node vertically.
    """

    start: Point
    end: Point
    control1: Point | None = None
    control2: Point | None = None

    @property
    def is_curve(self) -> bool:
        return self.control1 is not None


def lane_x(lane: int) -> float:
    return GRAPH_PADDING + lane * LANE_WIDTH


def row_center_y(row: int, row_height: int = DEFAULT_ROW_HEIGHT) -> float:
    return row * row_height + row_height / 2


def node_center(node: GraphNode, row_height: int = DEFAULT_ROW_HEIGHT) -> Point:
    return Point(lane_x(node.lane), row_center_y(node.row, row_height))


def connection_path(
    node: GraphNode, connection: ParentConnection, row_height: int = DEFAULT_ROW_HEIGHT
) -> ConnectionPath:
    """Build the path from ``node`` to the parent described by ``connection``."""
    start = node_center(node, row_height)
    end = Point(lane_x(connection.parent_lane), row_center_y(connection.parent_row, row_height))

    if not connection.kind.changes_lane:
        return ConnectionPath(start, end)

    mid_y = (start.y + end.y) / 2
    return ConnectionPath(start, end, Point(start.x, mid_y), Point(end.x, mid_y))


def row_graph_width(max_active_lane: int) -> int:
    """Width reserved for the graph in one row, before its labels and message."""
    return max(MIN_GRAPH_WIDTH, GRAPH_PADDING + (max_active_lane + 1) * LANE_WIDTH + LANE_PADDING)


def graph_width(max_lane: int) -> int:
    """Width of the whole graph column."""
    return max(MIN_GRAPH_WIDTH, (max_lane + 1) * LANE_WIDTH + GRAPH_PADDING * 2)
