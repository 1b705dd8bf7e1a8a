#!/usr/bin/env python3
"""
Figures - Main Entry Point

This is the main entry point for the Figures application.
Run with: python -m figures.main
"""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import Qt

logger = logging.getLogger(__name__)


def setup_logging():
    """Configure the root logger; FIGURES_DEBUG enables debug output."""
    level = logging.DEBUG if os.environ.get("FIGURES_DEBUG") else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def main():
    """Main entry point for Figures application."""
    setup_logging()
    try:
        # Enable high DPI scaling
        QApplication.setHighDpiScaleFactorRoundingPolicy(
            Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
        )

        # Create application
        app = QApplication(sys.argv)
        app.setApplicationName("Figures")
        app.setApplicationVersion("0.1.0")

        # Import here to avoid circular imports and speed up startup check
        from .core import CanvasSettings, create_default_scene
        from .ui.mainwindow import MainWindow

        settings = CanvasSettings()
        scene = create_default_scene()
        logger.info(f"Starting with {len(scene)} shapes on a "
                    f"{settings.width}x{settings.height} canvas")

        # Create and show main window
        window = MainWindow(scene, settings)
        window.show()

        # Run event loop
        return app.exec()
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
