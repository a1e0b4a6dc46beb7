"""Commit graph view widget - virtualized, scrollable commit graph."""

import logging
from collections.abc import Sequence
from datetime import datetime

from PySide6.QtCore import QEasingCurve, QPropertyAnimation, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QAbstractScrollArea, QWidget

from commitgraph.constants import DEFAULT_SCROLL_DURATION
from commitgraph.graph.colors import get_lane_color
from commitgraph.graph.geometry import connection_path
from commitgraph.graph.interaction import (
    GraphEvent,
    GraphEventKind,
    GraphInteraction,
    is_highlighted,
)
from commitgraph.graph.layout import calculate_graph_layout
from commitgraph.graph.types import BranchHead, Commit, GraphLayout
from commitgraph.graph.viewport import (
    ScrollRequest,
    Viewport,
    ViewportConfig,
    nodes_with_lines_in,
)
from commitgraph.ui.commit_graph.edges import draw_connection
from commitgraph.ui.commit_graph.rows import RowPainter

logger = logging.getLogger(__name__)


class CommitGraphView(QAbstractScrollArea):
    """
    Scrollable commit graph that only paints the rows in view.

    The layout is recomputed from scratch whenever set_data() is called.
    Clicks are reported through signals; the selected commit is owned by
    the caller and handed back in with set_selected_commit().
    """

    commit_activated = Signal(str)  # commit id, single click
    commit_opened = Signal(str)  # commit id, double click

    BACKGROUND = QColor("#FAFAFA")

    def __init__(
        self,
        config: ViewportConfig | None = None,
        scroll_duration: int = DEFAULT_SCROLL_DURATION,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.graph_viewport = Viewport(config)
        self._interaction = GraphInteraction(self.graph_viewport, self._on_graph_event)
        self._row_painter = RowPainter(self.graph_viewport.row_height)
        self._layout = GraphLayout()
        self._selected_commit_id: str | None = None

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.verticalScrollBar().valueChanged.connect(self._on_scrolled)

        # Smooth scroll-to-commit; a new request stops the running one
        self._scroll_duration = scroll_duration
        self._scroll_request: ScrollRequest | None = None
        self._scroll_anim = QPropertyAnimation(self.verticalScrollBar(), b"value", self)
        self._scroll_anim.setEasingCurve(QEasingCurve.Type.InOutQuad)
        self._scroll_anim.finished.connect(self._on_scroll_finished)

    @property
    def graph_layout(self) -> GraphLayout:
        return self._layout

    def set_data(self, commits: Sequence[Commit], heads: Sequence[BranchHead]) -> None:
        """Replace the displayed history and recompute the layout."""
        self._layout = calculate_graph_layout(commits, heads)
        self._update_scrollbar()
        self.viewport().update()

    def set_selected_commit(self, commit_id: str | None) -> None:
        """Highlight a commit. Selection itself is owned by the caller."""
        if commit_id == self._selected_commit_id:
            return
        self._selected_commit_id = commit_id
        self.viewport().update()

    def scroll_to_commit(self, commit_id: str) -> bool:
        """Smoothly scroll so the commit is centered. Returns False if it is not loaded."""
        request = self.graph_viewport.scroll_to_commit(commit_id, self._layout)
        if request is None:
            logger.debug("Commit %s is not loaded, not scrolling", commit_id)
            return False

        self._scroll_anim.stop()
        self._scroll_request = request
        scrollbar = self.verticalScrollBar()
        target = min(int(request.target), scrollbar.maximum())

        if self._scroll_duration <= 0:
            scrollbar.setValue(target)
            self._on_scroll_finished()
            return True

        self._scroll_anim.setDuration(self._scroll_duration)
        self._scroll_anim.setStartValue(scrollbar.value())
        self._scroll_anim.setEndValue(target)
        self._scroll_anim.start()
        return True

    def _on_scroll_finished(self) -> None:
        if self._scroll_request is None:
            return
        self.graph_viewport.complete_scroll(self._scroll_request)
        self._scroll_request = None
        # The scrollbar may have clamped the target
        self.graph_viewport.set_scroll_offset(self.verticalScrollBar().value())

    def _on_scrolled(self, value: int) -> None:
        self.graph_viewport.set_scroll_offset(value)
        self.viewport().update()

    def _update_scrollbar(self) -> None:
        """Size the scrollbar to the full history height."""
        height = self.viewport().height()
        content = self.graph_viewport.content_height(len(self._layout))
        scrollbar = self.verticalScrollBar()
        scrollbar.setRange(0, max(0, content - height))
        scrollbar.setPageStep(max(1, height))
        scrollbar.setSingleStep(self.graph_viewport.row_height)

    def _on_graph_event(self, event: GraphEvent) -> None:
        if event.kind is GraphEventKind.ACTIVATE:
            self.commit_activated.emit(event.commit_id)
        elif event.kind is GraphEventKind.OPEN:
            self.commit_opened.emit(event.commit_id)

    def resizeEvent(self, event: QResizeEvent) -> None:  # noqa: N802
        """Track the visible height; layout is not recomputed."""
        super().resizeEvent(event)
        self.graph_viewport.on_resize(self.viewport().height())
        self._update_scrollbar()

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if event.button() == Qt.MouseButton.LeftButton:
            self._interaction.press(event.position().y(), self._layout)
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseDoubleClickEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if event.button() == Qt.MouseButton.LeftButton:
            self._interaction.double_press(event.position().y(), self._layout)
            event.accept()
            return
        super().mouseDoubleClickEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802
        """Paint only the visible rows (plus buffer)."""
        painter = QPainter(self.viewport())
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.viewport().rect(), self.BACKGROUND)

        width = float(self.viewport().width())
        if not self._layout.nodes:
            painter.setPen(QColor("#999999"))
            painter.drawText(
                QRectF(0, 0, width, self.viewport().height()),
                Qt.AlignmentFlag.AlignCenter,
                "No commits",
            )
            painter.end()
            return

        start, end = self.graph_viewport.visible_range(len(self._layout))
        visible = self._layout.nodes[start:end]
        row_height = self.graph_viewport.row_height
        now = datetime.now().astimezone()

        # Content coordinates from here on
        painter.translate(0, -self.graph_viewport.scroll_offset)

        for node in visible:
            self._row_painter.paint_background(
                painter, node, width, is_highlighted(node, self._selected_commit_id)
            )

        # Lines behind nodes, including ones from rows scrolled out above
        for node in nodes_with_lines_in(self._layout, start, end):
            color = get_lane_color(node.lane)
            for connection in node.parent_connections:
                draw_connection(
                    painter,
                    connection_path(node, connection, row_height),
                    color,
                    connection.is_offscreen,
                )

        for node in visible:
            selected = is_highlighted(node, self._selected_commit_id)
            self._row_painter.paint_node(painter, node, selected)
            self._row_painter.paint_text(painter, node, width, now)

        painter.end()
