"""
Figures - drag-and-drop shape canvas.
"""

__version__ = "0.1.0"
