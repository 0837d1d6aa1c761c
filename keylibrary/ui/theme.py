from __future__ import annotations

from .. import config
from ..qt_compat import QtGui, QtWidgets

FONT_FAMILY = "'Segoe UI', 'Inter', sans-serif"


def build_palette() -> QtGui.QPalette:
    """Return the dark palette shared by KeyLibrary windows."""
    palette = QtGui.QPalette()
    colors = config.KEYLIBRARY_COLORS

    palette.setColor(QtGui.QPalette.Window, QtGui.QColor(colors["bg_main"]))
    palette.setColor(QtGui.QPalette.WindowText, QtGui.QColor(colors["text_main"]))
    palette.setColor(QtGui.QPalette.Base, QtGui.QColor(colors["bg_card"]))
    palette.setColor(QtGui.QPalette.AlternateBase, QtGui.QColor(colors["bg_main"]))
    palette.setColor(QtGui.QPalette.Text, QtGui.QColor(colors["text_main"]))
    palette.setColor(QtGui.QPalette.Button, QtGui.QColor(colors["btn_bg"]))
    palette.setColor(QtGui.QPalette.ButtonText, QtGui.QColor(colors["text_main"]))
    palette.setColor(QtGui.QPalette.Highlight, QtGui.QColor(colors["bg_hover"]))
    palette.setColor(QtGui.QPalette.HighlightedText, QtGui.QColor(colors["text_main"]))
    return palette


def build_stylesheet(object_name: str) -> str:
    """Compose the stylesheet for a top-level window named ``object_name``."""
    c = config.KEYLIBRARY_COLORS
    return f"""
    #{object_name} {{
        background-color: {c['bg_main']};
        color: {c['text_main']};
        font-family: {FONT_FAMILY};
    }}
    #{object_name} QLabel {{
        color: {c['text_main']};
    }}
    #{object_name} QLineEdit {{
        background: {c['bg_card']};
        color: {c['text_main']};
        border: 1px solid {c['border']};
        border-radius: 6px;
        padding: 6px 8px;
    }}
    #{object_name} QLineEdit:focus {{
        border: 1px solid {c['bg_hover']};
    }}
    #{object_name} QPushButton {{
        background: {c['btn_bg']};
        color: {c['text_main']};
        border: 1px solid {c['border']};
        border-radius: 4px;
        padding: 6px 12px;
    }}
    #{object_name} QPushButton:hover {{
        background: {c['bg_hover']};
        border-color: {c['text_sub']};
    }}
    #{object_name} QListView {{
        background: {c['bg_card']};
        color: {c['text_main']};
        border: 1px solid {c['border']};
    }}
    """


def apply_theme(widget: QtWidgets.QWidget) -> None:
    """Apply palette and stylesheet to a widget tree."""
    widget.setPalette(build_palette())
    widget.setAutoFillBackground(True)
    widget.setStyleSheet(build_stylesheet(widget.objectName()))
