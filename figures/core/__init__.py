"""
Figures Core Module

Contains the core data structures:
- Shapes: Triangle, Square, Circle
- Scene: Z-order, hit-testing and drag state
- CanvasSettings: Window defaults
"""

# Import order matters - shapes first, then scene
from .shapes import (
    Point, BoundingBox, Color, Shape,
    Triangle, Square, Circle,
    point_in_polygon, point_on_segment
)
from .scene import Scene, ShapeHit, DragState, create_default_scene
from .settings import CanvasSettings

__all__ = [
    'Point', 'BoundingBox', 'Color', 'Shape',
    'Triangle', 'Square', 'Circle',
    'point_in_polygon', 'point_on_segment',
    'Scene', 'ShapeHit', 'DragState', 'create_default_scene',
    'CanvasSettings'
]
