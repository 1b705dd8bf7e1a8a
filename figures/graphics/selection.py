"""
Selection Handling for Figures

Translates pointer press/drag/release into Scene drag operations and tells
the view when to repaint.
"""

from typing import Optional
import logging

from PyQt6.QtCore import QObject, pyqtSignal

from ..core.scene import Scene
from ..core.shapes import Shape

logger = logging.getLogger(__name__)


class SelectionManager(QObject):
    """
    Manages the single-shape selection and drag cycle.

    Features:
    - Press selects the front-most shape under the pointer
    - Drag moves it, keeping the grab point under the pointer
    - Release raises it to the front of the z-order
    """

    # Signals
    selection_changed = pyqtSignal(object)  # Selected Shape, or None
    repaint_requested = pyqtSignal()

    def __init__(self, scene: Scene):
        """
        Initialize selection manager.

        Args:
            scene: Scene whose shapes are selected and dragged
        """
        super().__init__()
        self.scene = scene

    @property
    def selected_shape(self) -> Optional[Shape]:
        return self.scene.selected_shape

    def press(self, x: int, y: int) -> Optional[Shape]:
        """
        Handle pointer press.

        Args:
            x: Pointer x in canvas coordinates
            y: Pointer y in canvas coordinates

        Returns:
            The shape picked up, or None
        """
        was_dragging = self.scene.is_dragging
        shape = self.scene.begin_drag(x, y)

        if shape is not None:
            logger.debug(f"Selected {shape.name} at ({x}, {y})")
            self.selection_changed.emit(shape)
            self.repaint_requested.emit()
        elif was_dragging:
            # The pending drag was committed by begin_drag
            self.selection_changed.emit(None)
            self.repaint_requested.emit()
        return shape

    def drag(self, x: int, y: int) -> bool:
        """Handle pointer motion with the button held."""
        if not self.scene.update_drag(x, y):
            return False
        self.repaint_requested.emit()
        return True

    def release(self, x: int, y: int) -> Optional[Shape]:
        """
        Handle pointer release.

        The release position is not used; the shape stays where the last
        drag left it.
        """
        shape = self.scene.end_drag()
        if shape is None:
            return None

        logger.debug(f"Released {shape.name} at ({x}, {y})")
        self.selection_changed.emit(None)
        self.repaint_requested.emit()
        return shape
