"""
Figures Scene Model

The Scene is the ordered container for all shapes on the canvas. It owns
the z-order, dispatches hit-tests front to back and tracks the one shape
being dragged.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, TYPE_CHECKING
import logging

from .shapes import Shape, Point, Color, Triangle, Square, Circle

if TYPE_CHECKING:
    from ..graphics.surface import RenderSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapeHit:
    """Result of a hit-test: the shape and its index in the z-order."""
    index: int
    shape: Shape


@dataclass
class DragState:
    """The shape being dragged and where the pointer grabbed it."""
    shape: Shape
    index: int
    offset: Point  # pointer minus bounding-box origin at press time


class Scene:
    """
    Ordered collection of shapes.

    Index 0 is the back-most shape, the last index is the front-most.
    The front-most shape is drawn last and wins hit-tests. The set of
    shapes is fixed after construction; only their order and positions
    change.
    """

    def __init__(self, shapes: Iterable[Shape]):
        self._shapes: List[Shape] = list(shapes)
        self._selected: Optional[DragState] = None

        seen = set()
        for shape in self._shapes:
            if shape.id in seen:
                raise ValueError(f"Shape added to scene twice: {shape!r}")
            seen.add(shape.id)

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(tuple(self._shapes))

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        """Snapshot of the shapes in z-order, back to front."""
        return tuple(self._shapes)

    @property
    def selected(self) -> Optional[DragState]:
        return self._selected

    @property
    def selected_shape(self) -> Optional[Shape]:
        return self._selected.shape if self._selected else None

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected.index if self._selected else None

    @property
    def is_dragging(self) -> bool:
        return self._selected is not None

    def index_of(self, shape: Shape) -> int:
        """Return the z-order index of a shape (ValueError if absent)."""
        for i, candidate in enumerate(self._shapes):
            if candidate is shape:
                return i
        raise ValueError(f"Shape not in scene: {shape!r}")

    def hit_test(self, x: int, y: int) -> Optional[ShapeHit]:
        """
        Find the front-most shape containing (x, y).

        Scans from the last index down to 0 so that, where shapes
        overlap, the one drawn on top is picked.

        Returns:
            ShapeHit with the shape and its index, or None if no shape
            contains the point
        """
        for i in range(len(self._shapes) - 1, -1, -1):
            if self._shapes[i].contains(x, y):
                return ShapeHit(i, self._shapes[i])
        return None

    def bring_to_front(self, index: int) -> Shape:
        """Move the shape at index to the end of the z-order."""
        shape = self._shapes.pop(index)
        self._shapes.append(shape)
        return shape

    def begin_drag(self, x: int, y: int) -> Optional[Shape]:
        """
        Select the front-most shape under the pointer and start dragging it.

        A press while a drag is already active first commits the pending
        drag as if the pointer had been released.

        Returns:
            The selected shape, or None if nothing is under the pointer
        """
        if self._selected is not None:
            logger.debug(f"Press during drag of {self._selected.shape.name}; "
                         f"committing it first")
            self.end_drag()

        hit = self.hit_test(x, y)
        if hit is None:
            return None

        box = hit.shape.get_bounding_box()
        self._selected = DragState(
            shape=hit.shape,
            index=hit.index,
            offset=Point(x, y) - box.origin
        )
        logger.debug(f"Begin drag: {hit.shape.name} at index {hit.index}")
        return hit.shape

    def update_drag(self, x: int, y: int) -> bool:
        """
        Move the selected shape so the grab offset stays under the pointer.

        The delta is computed against the shape's current bounding box,
        so each step is relative to where the previous step left it.

        Returns:
            True if a shape is being dragged, False otherwise
        """
        if self._selected is None:
            return False

        shape = self._selected.shape
        offset = self._selected.offset
        box = shape.get_bounding_box()
        shape.move(x - offset.x - box.x, y - offset.y - box.y)
        return True

    def end_drag(self) -> Optional[Shape]:
        """
        Release the selected shape, raising it to the front of the z-order.

        Returns:
            The released shape, or None if nothing was selected
        """
        if self._selected is None:
            return None

        shape = self.bring_to_front(self._selected.index)
        self._selected = None
        logger.debug(f"End drag: {shape.name} now at index {len(self._shapes) - 1}")
        return shape

    def render(self, surface: 'RenderSurface') -> None:
        """Draw all shapes back to front, the selected shape last."""
        selected = self.selected_shape
        for shape in self._shapes:
            if shape is selected:
                continue
            shape.draw(surface)
        if selected is not None:
            selected.draw(surface)


def create_default_scene() -> Scene:
    """Create the scene shown at startup: a triangle, a square and two circles."""
    return Scene([
        Triangle(150, 50, 80, Color.GREEN),
        Square(300, 50, 80, Color.YELLOW),
        Circle(450, 90, 40, Color.RED),
        Circle(500, 90, 40, Color.BLUE),
    ])
