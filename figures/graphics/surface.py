"""
Rendering Surfaces for Figures

Shapes draw through a RenderSurface so the core never touches Qt directly.
PainterSurface adapts a QPainter for the on-screen canvas.
"""

from abc import ABC, abstractmethod
from typing import List

from PyQt6.QtCore import Qt, QPoint
from PyQt6.QtGui import QPainter, QBrush, QColor, QPolygon

from ..core.shapes import Point, Color


class RenderSurface(ABC):
    """Fill primitives a shape can paint with."""

    @abstractmethod
    def fill_polygon(self, points: List[Point], color: Color) -> None:
        pass

    @abstractmethod
    def fill_rect(self, x: int, y: int, width: int, height: int,
                  color: Color) -> None:
        pass

    @abstractmethod
    def fill_ellipse(self, x: int, y: int, width: int, height: int,
                     color: Color) -> None:
        """Fill the ellipse inscribed in the given rectangle."""
        pass


def to_qcolor(color: Color) -> QColor:
    """Convert a core Color to a QColor."""
    return QColor(color.r, color.g, color.b)


class PainterSurface(RenderSurface):
    """RenderSurface backed by an active QPainter."""

    def __init__(self, painter: QPainter):
        self.painter = painter

    def _use_color(self, color: Color):
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(QBrush(to_qcolor(color)))

    def fill_polygon(self, points: List[Point], color: Color) -> None:
        self._use_color(color)
        self.painter.drawPolygon(QPolygon([QPoint(p.x, p.y) for p in points]))

    def fill_rect(self, x: int, y: int, width: int, height: int,
                  color: Color) -> None:
        self._use_color(color)
        self.painter.drawRect(x, y, width, height)

    def fill_ellipse(self, x: int, y: int, width: int, height: int,
                     color: Color) -> None:
        self._use_color(color)
        self.painter.drawEllipse(x, y, width, height)
