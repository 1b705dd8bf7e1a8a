"""
Figures Graphics Module

Contains the rendering and interaction components:
- Surface: RenderSurface interface and its QPainter adapter
- Selection: Pointer-driven selection and dragging
"""

from .surface import RenderSurface, PainterSurface, to_qcolor
from .selection import SelectionManager

__all__ = [
    # Surface
    'RenderSurface',
    'PainterSurface',
    'to_qcolor',
    # Selection
    'SelectionManager',
]
