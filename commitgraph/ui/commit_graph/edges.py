"""Edge rendering for the commit graph - lines and curves between commits."""

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QPainter, QPainterPath, QPen

from commitgraph.graph.geometry import ConnectionPath, Point


def _qpoint(point: Point) -> QPointF:
    return QPointF(point.x, point.y)


def build_painter_path(connection: ConnectionPath) -> QPainterPath:
    """Convert a connection into a QPainterPath.

    COORDINATE SYSTEM NOTE:
    Newer commits (children) are at the TOP (lower y), parents below, so
    every path is drawn DOWN from child to parent.
    """
    path = QPainterPath()
    path.moveTo(_qpoint(connection.start))
    if connection.control1 is not None and connection.control2 is not None:
        path.cubicTo(
            _qpoint(connection.control1),
            _qpoint(connection.control2),
            _qpoint(connection.end),
        )
    else:
        path.lineTo(_qpoint(connection.end))
    return path


def edge_pen(color: str, offscreen: bool = False) -> QPen:
    pen = QPen(QColor(color), 2)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    if offscreen:
        # History continues past the loaded window
        pen.setStyle(Qt.PenStyle.DashLine)
    return pen


def draw_connection(
    painter: QPainter, connection: ConnectionPath, color: str, offscreen: bool = False
) -> None:
    painter.setPen(edge_pen(color, offscreen))
    painter.setBrush(Qt.BrushStyle.NoBrush)
    painter.drawPath(build_painter_path(connection))
