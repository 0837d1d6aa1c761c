"""
Demo window: check out and return labels by hand.
"""

from .. import config
from ..key_library import KeyLibrary
from ..keylibrary_logger import system_info
from ..qt_compat import QtWidgets, QFont, AlignCenter
from .key_library_window import KeyLibraryWindow
from .theme import apply_theme


class DemoWindow(QtWidgets.QWidget):
    """Two text fields driving checkout and bulk return on a KeyLibrary."""

    def __init__(self, library: KeyLibrary, library_window: KeyLibraryWindow, parent=None):
        super().__init__(parent)
        self.library = library
        self.library_window = library_window

        self.setObjectName("KeyLibraryDemo")
        self.setWindowTitle(config.DEMO_TITLE)
        self.resize(config.DEMO_WINDOW_WIDTH, config.DEMO_WINDOW_HEIGHT)

        layout = QtWidgets.QGridLayout(self)
        layout.setVerticalSpacing(config.DEMO_GRID_GAP)
        layout.setHorizontalSpacing(config.DEMO_GRID_GAP)
        layout.setAlignment(AlignCenter)

        header = QtWidgets.QLabel(config.DEMO_HEADER_TEXT)
        font = QFont(header.font())
        font.setPointSize(config.DEMO_HEADER_FONT_SIZE)
        header.setFont(font)

        self.checkout_field = QtWidgets.QLineEdit()
        self.checkout_field.setPlaceholderText(config.DEMO_CHECKOUT_PROMPT)
        self.return_field = QtWidgets.QLineEdit()
        self.return_field.setPlaceholderText(config.DEMO_RETURN_PROMPT)

        checkout_button = QtWidgets.QPushButton("Checkout")
        checkout_button.clicked.connect(self.checkout_key)
        return_button = QtWidgets.QPushButton("Return")
        return_button.clicked.connect(self.return_key)
        show_button = QtWidgets.QPushButton("Show KeyLibrary")
        show_button.clicked.connect(self.library_window.show_library)

        self.status_label = QtWidgets.QLabel("")

        layout.addWidget(header, 0, 0, 1, 2)
        layout.addWidget(self.checkout_field, 1, 0)
        layout.addWidget(checkout_button, 1, 1)
        layout.addWidget(self.return_field, 2, 0)
        layout.addWidget(return_button, 2, 1)
        layout.addWidget(show_button, 3, 0, 1, 2)
        layout.addWidget(self.status_label, 4, 0, 1, 2)

        apply_theme(self)

    def checkout_key(self):
        label = self.checkout_field.text()
        if not label:
            return

        held_before = len(self.library.keys_for(label))
        key = self.library.checkout_key_interactive(label, self.library_window.select_key)
        self.library_window.refresh()

        if key is None:
            self._set_status(f"Checkout of '{label}' cancelled")
        elif len(self.library.keys_for(label)) > held_before or self.library.multi:
            self._set_status(f"'{label}' checked out to {key.display_name}")
        else:
            self._set_status(f"{key.display_name} is already taken")

    def return_key(self):
        label = self.return_field.text()
        if not label:
            return

        if self.library.return_key(label):
            self._set_status(f"Returned all keys for '{label}'")
        else:
            self._set_status(f"No keys checked out to '{label}'")
        self.library_window.refresh()

    def _set_status(self, message: str):
        self.status_label.setText(message)
        system_info(message)
