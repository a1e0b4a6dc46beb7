"""Commit graph layout - assigns lanes, rows and parent connections."""

import logging
from collections.abc import Iterable, Sequence

from commitgraph.graph.colors import assign_branch_colors, get_branch_color
from commitgraph.graph.types import (
    BranchHead,
    BranchLabel,
    Commit,
    ConnectionKind,
    GraphLayout,
    GraphNode,
    ParentConnection,
)

logger = logging.getLogger(__name__)


def _find_lane(lane_track: list[str | None], occupant: str | None) -> int:
    """Return the lowest lane holding occupant, or -1."""
    for lane, slot in enumerate(lane_track):
        if slot == occupant:
            return lane
    return -1


def _claim_free_lane(lane_track: list[str | None]) -> int:
    """Return the lowest free lane, growing the track if none is free."""
    lane = _find_lane(lane_track, None)
    if lane == -1:
        lane = len(lane_track)
        lane_track.append(None)
    return lane


def _connection_kind(node_lane: int, parent_lane: int, is_first_parent: bool) -> ConnectionKind:
    if parent_lane < node_lane:
        return ConnectionKind.MERGE_LEFT if is_first_parent else ConnectionKind.BRANCH_LEFT
    if parent_lane > node_lane:
        return ConnectionKind.MERGE_RIGHT if is_first_parent else ConnectionKind.BRANCH_RIGHT
    return ConnectionKind.STRAIGHT


def calculate_graph_layout(
    commits: Sequence[Commit], heads: Iterable[BranchHead] = ()
) -> GraphLayout:
    """
    Lay out an ordered commit list as a multi-lane graph.

    Commits are taken in the given order; a commit's row is its index.
    Each lane slot remembers which commit is expected to appear next in it.
    A commit takes the lane that was waiting for it (or the lowest free one),
    hands that lane on to its first parent, and opens side lanes for any
    further parents.

    Parents missing from ``commits`` (truncated history) get a connection
    that continues one row down in the commit's own lane.

    Args:
        commits: Commits in display order (newest first)
        heads: Branch heads to attach as labels

    Returns:
        A new GraphLayout; the input is never modified.
    """
    heads = list(heads)
    if not commits:
        return GraphLayout(nodes=(), max_lane=0)

    # First pass: rows, so parents further down can be resolved
    commit_rows: dict[str, int] = {}
    for row, commit in enumerate(commits):
        commit_rows.setdefault(commit.id, row)

    heads_by_commit: dict[str, list[BranchHead]] = {}
    for head in heads:
        heads_by_commit.setdefault(head.commit_id, []).append(head)
    branch_colors = assign_branch_colors(heads)

    # Second pass: lanes
    lane_track: list[str | None] = []
    lanes: list[int] = []
    max_active_lanes: list[int] = []

    for commit in commits:
        lane = _find_lane(lane_track, commit.id)
        if lane == -1:
            lane = _claim_free_lane(lane_track)

        # Hand the lane on to the first parent (main line of history)
        if commit.parent_ids:
            first_parent = commit.parent_ids[0]
            waiting = _find_lane(lane_track, first_parent)
            if waiting == -1 or waiting == lane:
                lane_track[lane] = first_parent
            elif waiting < lane:
                # A lower lane already waits for this parent; converge into it
                lane_track[lane] = None
            else:
                # Pull the parent down into this lane so it is tracked only once
                lane_track[waiting] = None
                lane_track[lane] = first_parent
        else:
            lane_track[lane] = None

        # Merge parents get their own lanes unless one is already waiting
        for parent_id in commit.parent_ids[1:]:
            if _find_lane(lane_track, parent_id) == -1:
                parent_lane = _claim_free_lane(lane_track)
                lane_track[parent_lane] = parent_id

        max_active_lane = lane
        for i in range(len(lane_track) - 1, lane, -1):
            if lane_track[i] is not None:
                max_active_lane = i
                break

        lanes.append(lane)
        max_active_lanes.append(max_active_lane)

    # Third pass: connections and labels
    nodes: list[GraphNode] = []
    offscreen = 0
    for row, commit in enumerate(commits):
        lane = lanes[row]
        connections: list[ParentConnection] = []
        for index, parent_id in enumerate(commit.parent_ids):
            parent_row = commit_rows.get(parent_id)
            if parent_row is None:
                # Parent is outside the loaded window, draw line going down
                offscreen += 1
                connections.append(
                    ParentConnection(
                        parent_id=parent_id,
                        parent_lane=lane,
                        parent_row=row + 1,
                        kind=ConnectionKind.STRAIGHT,
                        is_offscreen=True,
                    )
                )
                continue

            parent_lane = lanes[parent_row]
            connections.append(
                ParentConnection(
                    parent_id=parent_id,
                    parent_lane=parent_lane,
                    parent_row=parent_row,
                    kind=_connection_kind(lane, parent_lane, index == 0),
                )
            )

        labels = tuple(
            BranchLabel(
                name=head.name,
                is_head=head.is_head,
                color=get_branch_color(head.name, branch_colors),
            )
            for head in heads_by_commit.get(commit.id, [])
        )

        nodes.append(
            GraphNode(
                commit=commit,
                lane=lane,
                row=row,
                max_active_lane=max_active_lanes[row],
                parent_connections=tuple(connections),
                branch_labels=labels,
            )
        )

    max_lane = len(lane_track) - 1
    logger.debug(
        "Laid out %d commits in %d lanes (%d off-screen parents)",
        len(nodes),
        max_lane + 1,
        offscreen,
    )
    return GraphLayout(nodes=tuple(nodes), max_lane=max_lane)
