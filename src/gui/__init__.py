"""
gui — PyQt6 front-end for planetas.

Public API
──────────
MainWindow            — top-level application window
viewmodels            — pure-Python observable state containers
pages                 — list, detail and form pages
"""

from src.gui.main_window import MainWindow
from src.gui import viewmodels

__all__ = ["MainWindow", "viewmodels"]
