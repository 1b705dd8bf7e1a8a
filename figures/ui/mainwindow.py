"""
Figures Main Window

Hosts the drawing canvas and a status bar.
"""

from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QStatusBar, QLabel

from ..core.scene import Scene
from ..core.settings import CanvasSettings
from ..core.shapes import Shape
from .canvas import FigureCanvas


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, scene: Scene, settings: Optional[CanvasSettings] = None):
        super().__init__()

        self.scene = scene
        self.settings = settings or CanvasSettings()

        self.setWindowTitle(self.settings.title)

        # Setup UI components
        self._create_central_widget()
        self._create_status_bar()
        self._connect_signals()

        self.adjustSize()
        self.setFixedSize(self.sizeHint())

    def _create_central_widget(self):
        """Create the central canvas widget."""
        self.canvas = FigureCanvas(self.scene, self.settings)
        self.setCentralWidget(self.canvas)

    def _create_status_bar(self):
        """Create status bar."""
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready")

        self.position_label = QLabel("")
        self.status_bar.addPermanentWidget(self.position_label)

    def _connect_signals(self):
        self.canvas.selection_changed.connect(self._on_selection_changed)
        self.canvas.cursor_position.connect(self._on_cursor_position)

    def _on_selection_changed(self, shape: Optional[Shape]):
        if shape is None:
            self.status_bar.showMessage("Ready")
        else:
            self.status_bar.showMessage(f"Dragging {shape.name}")

    def _on_cursor_position(self, x: int, y: int):
        self.position_label.setText(f"X: {x}  Y: {y}")
