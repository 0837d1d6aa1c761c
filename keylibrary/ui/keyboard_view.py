"""
On-screen keyboard.

Shows which keys are occupied. With an asset directory the keyboard image is
drawn and each occupied key's overlay image is painted on top of it (overlays
are full-size transparent images lined up with the keyboard). Without assets
the keyboard is drawn from keycap rectangles.
"""

import os
from typing import Dict, List, Optional, Tuple

from .. import config
from ..key_codes import KeyCode
from ..key_library import KeyLibrary
from ..keylibrary_logger import system_warning
from ..layout import keycap_rects, layout_size
from ..paths import keyboard_image_path
from ..qt_compat import (
    QtCore,
    QtWidgets,
    QColor,
    QFont,
    QPainter,
    QPen,
    QPixmap,
    QRectF,
    AlignCenter,
    Antialiasing,
    SmoothTransformation,
)


class KeyboardView(QtWidgets.QWidget):
    """Paints the keyboard and highlights occupied keys."""

    def __init__(self, library: KeyLibrary, assets: Optional[Dict[KeyCode, str]] = None,
                 asset_dir: Optional[str] = None, parent=None):
        super().__init__(parent)
        self.library = library
        self.current_key: Optional[KeyCode] = None

        self._keyboard_pixmap: Optional[QPixmap] = None
        self._key_pixmaps: Dict[KeyCode, QPixmap] = {}
        self._keycaps: List[Tuple[KeyCode, Tuple[float, float, float, float]]] = []

        if asset_dir:
            self._load_images(asset_dir, assets or {})
        if self._keyboard_pixmap is None:
            self._keycaps = keycap_rects(config.KEYCAP_UNIT, config.KEYCAP_SPACING)

        self.setFixedSize(self.sizeHint())

    def _load_images(self, asset_dir: str, assets: Dict[KeyCode, str]) -> None:
        path = keyboard_image_path(asset_dir)
        if not os.path.isfile(path):
            system_warning(f"Keyboard image not found at {path}; drawing keyboard instead")
            return
        self._keyboard_pixmap = self._scaled(QPixmap(path))
        for key, asset_path in assets.items():
            pixmap = QPixmap(asset_path)
            if pixmap.isNull():
                system_warning(f"Could not load image for key {key.display_name}: {asset_path}")
                continue
            self._key_pixmaps[key] = self._scaled(pixmap)

    @staticmethod
    def _scaled(pixmap: QPixmap) -> QPixmap:
        return pixmap.scaledToWidth(config.KEYBOARD_WIDTH, SmoothTransformation)

    def sizeHint(self) -> QtCore.QSize:
        if self._keyboard_pixmap is not None:
            return self._keyboard_pixmap.size()
        width, height = layout_size(config.KEYCAP_UNIT, config.KEYCAP_SPACING)
        return QtCore.QSize(int(width) + 1, int(height) + 1)

    def set_current_key(self, key: Optional[KeyCode]) -> None:
        self.current_key = key
        self.update()

    def refresh(self) -> None:
        """Repaint after the library changed."""
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            if self._keyboard_pixmap is not None:
                self._paint_images(painter)
            else:
                self._paint_keycaps(painter)
        finally:
            painter.end()

    def _paint_images(self, painter: QPainter) -> None:
        painter.drawPixmap(0, 0, self._keyboard_pixmap)
        for key in self.library.occupied_keys():
            pixmap = self._key_pixmaps.get(key)
            if pixmap is not None:
                painter.drawPixmap(0, 0, pixmap)

    def _paint_keycaps(self, painter: QPainter) -> None:
        colors = config.KEYLIBRARY_COLORS
        painter.setRenderHint(Antialiasing)
        font = QFont(self.font())
        font.setPointSize(8)
        painter.setFont(font)

        for key, (x, y, w, h) in self._keycaps:
            rect = QRectF(x, y, w, h)
            occupied = self.library.is_occupied(key)
            enabled = key in self.library

            fill = colors["occupied"] if occupied else colors["keycap"]
            border = colors["current"] if key == self.current_key else colors["border"]

            painter.setPen(QPen(QColor(border), 2 if key == self.current_key else 1))
            painter.setBrush(QColor(fill))
            painter.drawRoundedRect(rect, config.KEYCAP_RADIUS, config.KEYCAP_RADIUS)

            if occupied:
                text_color = colors["occupied_text"]
            elif enabled:
                text_color = colors["text_main"]
            else:
                text_color = colors["text_sub"]
            painter.setPen(QColor(text_color))
            painter.drawText(rect, AlignCenter, key.display_name)
