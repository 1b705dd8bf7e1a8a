"""
Figures UI Module

User interface components:
- MainWindow: Primary application window
- FigureCanvas: Drawing canvas hosting the scene
"""
