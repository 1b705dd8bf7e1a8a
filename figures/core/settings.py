"""
Figures Canvas Settings

Window and canvas defaults.
"""

from dataclasses import dataclass, field

from .shapes import Color


@dataclass
class CanvasSettings:
    """Size, title and colors of the drawing window."""
    width: int = 800              # px
    height: int = 600             # px
    title: str = "Figures"
    background: Color = field(default_factory=lambda: Color.GRAY)
    foreground: Color = field(default_factory=lambda: Color.WHITE)
