"""Tests for the virtualized viewport."""

from datetime import datetime

import pytest

from commitgraph.graph.layout import calculate_graph_layout
from commitgraph.graph.types import Commit, GraphLayout, GraphNode
from commitgraph.graph.viewport import Viewport, ViewportConfig, nodes_with_lines_in


def make_viewport(scroll_offset=0.0, viewport_height=400.0, row_height=26, buffer_rows=15):
    return Viewport(
        ViewportConfig(row_height=row_height, buffer_rows=buffer_rows),
        viewport_height=viewport_height,
        scroll_offset=scroll_offset,
    )


def make_layout(count: int) -> GraphLayout:
    nodes = tuple(
        GraphNode(
            commit=Commit(
                id=f"c{i}", parent_ids=(), message="", author="", date=datetime(2024, 1, 1)
            ),
            lane=0,
            row=i,
            max_active_lane=0,
        )
        for i in range(count)
    )
    return GraphLayout(nodes=nodes, max_lane=0)


class TestVisibleRange:
    """visible_range() windowing"""

    def test_reference_values(self):
        viewport = make_viewport(scroll_offset=520, viewport_height=400)
        assert viewport.visible_range(1000) == (5, 51)

    def test_top_is_clamped_to_zero(self):
        viewport = make_viewport(scroll_offset=0, viewport_height=400)
        assert viewport.visible_range(1000) == (0, 16 + 15)

    def test_end_is_clamped_to_total(self):
        viewport = make_viewport(scroll_offset=520, viewport_height=400)
        assert viewport.visible_range(30) == (5, 30)

    def test_empty_history(self):
        viewport = make_viewport(scroll_offset=0)
        assert viewport.visible_range(0) == (0, 0)

    def test_scrolled_past_short_history(self):
        viewport = make_viewport(scroll_offset=10_000, buffer_rows=0)
        start, end = viewport.visible_range(10)
        assert start == end

    def test_no_buffer(self):
        viewport = make_viewport(scroll_offset=26, viewport_height=52, buffer_rows=0)
        assert viewport.visible_range(100) == (1, 3)

    def test_depends_only_on_numbers(self):
        a = make_viewport(scroll_offset=300)
        b = make_viewport(scroll_offset=300)
        assert a.visible_range(500) == b.visible_range(500)


class TestScrollToCommit:
    """Scroll requests and supersession"""

    def test_reference_target(self):
        viewport = make_viewport(viewport_height=400)
        request = viewport.scroll_to_row(50)
        assert request.target == 1113

    def test_target_never_negative(self):
        viewport = make_viewport(viewport_height=400)
        assert viewport.scroll_to_row(0).target == 0

    def test_completion_applies_target(self):
        viewport = make_viewport(viewport_height=400)
        request = viewport.scroll_to_row(50)
        assert viewport.complete_scroll(request)
        assert viewport.scroll_offset == 1113
        assert viewport.pending_scroll is None

    def test_later_request_supersedes_earlier(self):
        viewport = make_viewport(viewport_height=400)
        first = viewport.scroll_to_row(50)
        second = viewport.scroll_to_row(100)

        assert viewport.pending_scroll == second
        assert not viewport.complete_scroll(first)
        assert viewport.scroll_offset == 0
        assert viewport.complete_scroll(second)
        assert viewport.scroll_offset == pytest.approx(100 * 26 - 200 + 13)

    def test_scroll_to_known_commit(self):
        viewport = make_viewport(viewport_height=400)
        request = viewport.scroll_to_commit("c50", make_layout(100))
        assert request is not None
        assert request.target == 1113

    def test_scroll_to_unknown_commit_is_noop(self):
        viewport = make_viewport(viewport_height=400)
        assert viewport.scroll_to_commit("missing", make_layout(10)) is None
        assert viewport.pending_scroll is None


class TestResizeAndScroll:
    """Renderer-driven state updates"""

    def test_resize_keeps_scroll_offset(self):
        viewport = make_viewport(scroll_offset=520, viewport_height=400)
        viewport.on_resize(800)
        assert viewport.viewport_height == 800
        assert viewport.scroll_offset == 520
        assert viewport.visible_range(1000) == (5, 66)

    def test_set_scroll_offset_clamps_negative(self):
        viewport = make_viewport()
        viewport.set_scroll_offset(-30)
        assert viewport.scroll_offset == 0

    def test_row_at(self):
        viewport = make_viewport(scroll_offset=52)
        assert viewport.row_at(0) == 2
        assert viewport.row_at(25) == 2
        assert viewport.row_at(26) == 3

    def test_content_height(self):
        assert make_viewport().content_height(100) == 2600

    def test_default_config(self):
        viewport = Viewport()
        assert viewport.row_height == 26
        assert viewport.buffer_rows == 15


class TestLinesInRange:
    """Connections crossing the rendered window"""

    def test_long_line_from_above_is_included(self):
        # c0 merges "side", which sits at the very bottom on its own lane
        date = datetime(2024, 1, 1)
        commits = [Commit("c0", ("c1", "side"), "", "", date)]
        commits += [Commit(f"c{i}", (f"c{i + 1}",), "", "", date) for i in range(1, 40)]
        commits += [Commit("c40", (), "", "", date), Commit("side", (), "", "", date)]
        layout = calculate_graph_layout(commits, [])

        nodes = nodes_with_lines_in(layout, 20, 30)
        ids = [node.commit.id for node in nodes]
        # c19 reaches row 20; c1..c18 end above the range
        assert ids[:2] == ["c0", "c19"]
        assert ids[2:] == [f"c{i}" for i in range(20, 30)]

    def test_unconnected_nodes_above_are_skipped(self):
        layout = make_layout(50)
        nodes = nodes_with_lines_in(layout, 10, 20)
        assert [node.row for node in nodes] == list(range(10, 20))
