#!/usr/bin/env python3
"""
Figures Launcher Script

Simple launcher for the Figures application.
"""

import sys
import os

# Add project root to path if needed
if os.path.dirname(os.path.abspath(__file__)) not in sys.path:
    sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


if __name__ == "__main__":
    # On macOS, try to use the native platform plugin
    if sys.platform == 'darwin':
        if 'QT_QPA_PLATFORM' not in os.environ:
            os.environ['QT_QPA_PLATFORM'] = 'cocoa'

    try:
        # Test PyQt6 import before proceeding
        try:
            from PyQt6 import QtWidgets, QtCore
        except ImportError as qt_error:
            print("PyQt6 Import Error:")
            print("=" * 60)
            print(f"Error: {qt_error}")
            print("\nPyQt6 appears to be missing or incomplete.")
            print("\nTry reinstalling it:")
            print("   pip uninstall PyQt6 PyQt6-Qt6 PyQt6-sip")
            print("   pip install PyQt6")
            print(f"\nCurrent Python: {sys.version}")
            print("=" * 60)
            sys.exit(1)

        from figures.main import main
        sys.exit(main())
    except ImportError as e:
        print(f"Error: Failed to import Figures modules: {e}")
        print("\nPlease ensure all dependencies are installed:")
        print("  pip install -r requirements.txt")
        sys.exit(1)
