"""Tests for graph colors, geometry and text formatting."""

from datetime import datetime, timedelta, timezone

from commitgraph.graph.colors import (
    BRANCH_COLORS,
    LANE_COLORS,
    assign_branch_colors,
    get_branch_color,
    get_lane_color,
)
from commitgraph.graph.formatting import elide, format_date
from commitgraph.graph.geometry import (
    connection_path,
    graph_width,
    node_center,
    row_graph_width,
)
from commitgraph.graph.layout import calculate_graph_layout
from commitgraph.graph.types import BranchHead, Commit, ConnectionKind


class TestLaneColors:
    def test_lane_color_wraps(self):
        assert get_lane_color(0) == LANE_COLORS[0]
        assert get_lane_color(3) == LANE_COLORS[3]
        assert get_lane_color(len(LANE_COLORS)) == LANE_COLORS[0]
        assert get_lane_color(len(LANE_COLORS) + 2) == LANE_COLORS[2]


class TestBranchColors:
    def test_first_seen_order(self):
        heads = [BranchHead("main", "a"), BranchHead("dev", "b"), BranchHead("main", "c")]
        colors = assign_branch_colors(heads)
        assert colors == {"main": BRANCH_COLORS[0], "dev": BRANCH_COLORS[1]}

    def test_palette_wraps(self):
        heads = [BranchHead(f"b{i}", "x") for i in range(len(BRANCH_COLORS) + 1)]
        colors = assign_branch_colors(heads)
        assert colors[f"b{len(BRANCH_COLORS)}"] == colors["b0"]

    def test_unknown_branch_falls_back(self):
        assert get_branch_color("nope", {}) == BRANCH_COLORS[0]


class TestGeometry:
    """Pixel positions and connection shapes"""

    def _merge_layout(self):
        date = datetime(2024, 1, 1)
        commits = [
            Commit("M", ("A", "B"), "merge", "x", date),
            Commit("A", (), "a", "x", date),
            Commit("B", (), "b", "x", date),
        ]
        return calculate_graph_layout(commits, [])

    def test_node_center(self):
        layout = self._merge_layout()
        center = node_center(layout.nodes[2], row_height=26)
        assert center.x == 8 + 1 * 12
        assert center.y == 2 * 26 + 13

    def test_straight_connection_is_line(self):
        layout = self._merge_layout()
        merge = layout.nodes[0]
        path = connection_path(merge, merge.parent_connections[0], row_height=26)

        assert not path.is_curve
        assert (path.start.x, path.start.y) == (8, 13)
        assert (path.end.x, path.end.y) == (8, 39)

    def test_lane_change_is_curve(self):
        layout = self._merge_layout()
        merge = layout.nodes[0]
        path = connection_path(merge, merge.parent_connections[1], row_height=26)

        assert path.is_curve
        mid_y = (13 + 65) / 2
        assert path.control1.x == path.start.x
        assert path.control2.x == path.end.x
        assert path.control1.y == mid_y
        assert path.control2.y == mid_y
        assert (path.end.x, path.end.y) == (20, 65)

    def test_offscreen_connection_is_straight(self):
        date = datetime(2024, 1, 1)
        layout = calculate_graph_layout([Commit("M", ("A", "gone"), "merge", "x", date)], [])
        merge = layout.nodes[0]

        for connection in merge.parent_connections:
            assert connection.is_offscreen
            assert not connection.kind.changes_lane
            assert not connection_path(merge, connection, row_height=26).is_curve

    def test_changes_lane(self):
        assert not ConnectionKind.STRAIGHT.changes_lane
        assert all(
            kind.changes_lane for kind in ConnectionKind if kind is not ConnectionKind.STRAIGHT
        )

    def test_row_graph_width(self):
        assert row_graph_width(0) == 40
        assert row_graph_width(3) == 8 + 4 * 12 + 16

    def test_graph_width(self):
        assert graph_width(0) == 40
        assert graph_width(5) == 6 * 12 + 16


class TestFormatDate:
    """Relative commit dates"""

    NOW = datetime(2024, 3, 15, 18, 30, tzinfo=timezone.utc)

    def test_same_day_shows_time(self):
        date = self.NOW - timedelta(hours=3)
        assert format_date(date, self.NOW) == "15:30"

    def test_yesterday(self):
        assert format_date(self.NOW - timedelta(days=1, hours=1), self.NOW) == "Yesterday"

    def test_days_ago(self):
        assert format_date(self.NOW - timedelta(days=4), self.NOW) == "4 days ago"

    def test_older_dates_are_absolute(self):
        assert format_date(datetime(2024, 3, 5, tzinfo=timezone.utc), self.NOW) == "Mar 5, 2024"

    def test_naive_and_aware_mix(self):
        naive = datetime(2024, 3, 14, 12, 0)
        assert format_date(naive, self.NOW) == "Yesterday"

    def test_mixed_dates_use_each_wall_clock(self):
        # 23:30 in UTC+9 against a naive 00:30 is one hour apart, not ten
        date = datetime(2024, 3, 14, 23, 30, tzinfo=timezone(timedelta(hours=9)))
        assert format_date(date, datetime(2024, 3, 15, 0, 30)) == "23:30"


class TestElide:
    def test_short_text_unchanged(self):
        assert elide("main", 10) == "main"

    def test_long_text_cut(self):
        assert elide("feature/very-long-name", 8) == "feature…"
        assert len(elide("feature/very-long-name", 8)) == 8
