"""Row painting - node circle, branch labels and commit text for one row."""

from datetime import datetime

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFont, QFontMetrics, QPainter, QPen

from commitgraph.constants import (
    AUTHOR_COLUMN_WIDTH,
    DATE_COLUMN_WIDTH,
    LABEL_SPACING,
    NODE_RADIUS,
    SHA_COLUMN_WIDTH,
)
from commitgraph.graph.colors import get_lane_color
from commitgraph.graph.formatting import elide, format_date
from commitgraph.graph.geometry import node_center, row_graph_width
from commitgraph.graph.types import GraphNode

SELECTED_BACKGROUND = QColor("#E3F2FD")
TEXT_COLOR = QColor("#333333")
MUTED_TEXT_COLOR = QColor("#666666")
SELECTED_RING_COLOR = QColor("#1a1a1a")

MAX_LABEL_CHARS = 24


class RowPainter:
    """
    Paints commit rows for CommitGraphView.

    Lines between commits are drawn separately (see edges.py) before any
    row, so node circles always sit on top of them.
    """

    def __init__(self, row_height: int) -> None:
        self.row_height = row_height
        self.text_font = QFont("sans-serif", 9)
        self.label_font = QFont("sans-serif", 8)
        self.label_font.setBold(True)
        self.sha_font = QFont("monospace", 9)
        self._text_metrics = QFontMetrics(self.text_font)
        self._label_metrics = QFontMetrics(self.label_font)

    def paint_background(
        self, painter: QPainter, node: GraphNode, width: float, selected: bool
    ) -> None:
        if not selected:
            return
        top = node.row * self.row_height
        painter.fillRect(QRectF(0, top, width, self.row_height), SELECTED_BACKGROUND)

    def paint_node(self, painter: QPainter, node: GraphNode, selected: bool) -> None:
        """Draw the commit circle in its lane."""
        center = node_center(node, self.row_height)
        color = QColor(get_lane_color(node.lane))
        radius = NODE_RADIUS + 1 if selected else NODE_RADIUS

        painter.setBrush(color)
        if selected:
            painter.setPen(QPen(SELECTED_RING_COLOR, 2))
        else:
            painter.setPen(Qt.PenStyle.NoPen)
        painter.drawEllipse(QPointF(center.x, center.y), radius, radius)

    def paint_text(
        self, painter: QPainter, node: GraphNode, width: float, now: datetime | None = None
    ) -> None:
        """Draw branch labels, message, author, date and short hash."""
        top = node.row * self.row_height
        x = float(row_graph_width(node.max_active_lane))

        # Fixed columns on the right, message takes what is left
        sha_x = width - SHA_COLUMN_WIDTH
        date_x = sha_x - DATE_COLUMN_WIDTH
        author_x = date_x - AUTHOR_COLUMN_WIDTH

        x = self._paint_labels(painter, node, x, top)

        message_width = max(0.0, author_x - x - 8)
        message = self._text_metrics.elidedText(
            node.commit.summary, Qt.TextElideMode.ElideRight, int(message_width)
        )
        painter.setFont(self.text_font)
        painter.setPen(TEXT_COLOR)
        align = Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter
        painter.drawText(QRectF(x, top, message_width, self.row_height), align, message)

        painter.setPen(MUTED_TEXT_COLOR)
        author = self._text_metrics.elidedText(
            node.commit.author, Qt.TextElideMode.ElideRight, AUTHOR_COLUMN_WIDTH - 8
        )
        painter.drawText(QRectF(author_x, top, AUTHOR_COLUMN_WIDTH, self.row_height), align, author)
        painter.drawText(
            QRectF(date_x, top, DATE_COLUMN_WIDTH, self.row_height),
            align,
            format_date(node.commit.date, now),
        )

        painter.setFont(self.sha_font)
        painter.drawText(
            QRectF(sha_x, top, SHA_COLUMN_WIDTH, self.row_height), align, node.commit.short_id
        )

    def _paint_labels(self, painter: QPainter, node: GraphNode, x: float, top: float) -> float:
        """Draw branch label pills starting at x. Returns the x after the last one."""
        if not node.branch_labels:
            return x

        painter.setFont(self.label_font)
        label_height = self.row_height - 8
        label_top = top + 4
        for label in node.branch_labels:
            text = elide(label.name, MAX_LABEL_CHARS)
            label_width = self._label_metrics.horizontalAdvance(text) + 10
            rect = QRectF(x, label_top, label_width, label_height)

            color = QColor(label.color)
            painter.setBrush(color)
            if label.is_head:
                painter.setPen(QPen(color.darker(150), 2))
            else:
                painter.setPen(Qt.PenStyle.NoPen)
            painter.drawRoundedRect(rect, 3, 3)

            painter.setPen(QColor("#FFFFFF"))
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, text)

            x += label_width + LABEL_SPACING

        return x + LABEL_SPACING
