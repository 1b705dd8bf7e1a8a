"""
Figures Canvas - Drawing surface that displays and drags the scene's shapes.
"""

from typing import Optional

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QPalette, QMouseEvent

from ..core.scene import Scene
from ..core.settings import CanvasSettings
from ..graphics import PainterSurface, SelectionManager, to_qcolor


class FigureCanvas(QWidget):
    """
    Canvas for displaying and dragging shapes.

    Features:
    - Background fill
    - Shape rendering in z-order
    - Left-button drag to move a shape and raise it on release
    """

    # Signals
    selection_changed = pyqtSignal(object)  # Selected Shape, or None
    cursor_position = pyqtSignal(int, int)  # Mouse position in px

    def __init__(self, scene: Scene, settings: Optional[CanvasSettings] = None,
                 parent=None):
        super().__init__(parent)

        self.scene = scene
        self.settings = settings or CanvasSettings()

        self._selection_manager = SelectionManager(scene)
        self._selection_manager.repaint_requested.connect(self.update)
        self._selection_manager.selection_changed.connect(self.selection_changed)

        palette = self.palette()
        palette.setColor(QPalette.ColorRole.WindowText,
                         to_qcolor(self.settings.foreground))
        self.setPalette(palette)
        self.setFixedSize(self.settings.width, self.settings.height)
        self.setMouseTracking(True)

    @property
    def selection_manager(self) -> SelectionManager:
        return self._selection_manager

    def paintEvent(self, event):
        """Paint the background and every shape."""
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.fillRect(self.rect(), to_qcolor(self.settings.background))
            self.scene.render(PainterSurface(painter))
        finally:
            painter.end()

    @staticmethod
    def _event_pos(event: QMouseEvent):
        pos = event.position()
        return round(pos.x()), round(pos.y())

    def mousePressEvent(self, event: QMouseEvent):
        """Handle mouse press."""
        if event.button() == Qt.MouseButton.LeftButton:
            x, y = self._event_pos(event)
            self._selection_manager.press(x, y)
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        """Handle mouse move."""
        x, y = self._event_pos(event)
        self.cursor_position.emit(x, y)

        if event.buttons() & Qt.MouseButton.LeftButton:
            self._selection_manager.drag(x, y)
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        """Handle mouse release."""
        if event.button() == Qt.MouseButton.LeftButton:
            x, y = self._event_pos(event)
            self._selection_manager.release(x, y)
            event.accept()
        else:
            super().mouseReleaseEvent(event)
