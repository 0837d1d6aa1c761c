"""
Key Library Window

Shows the on-screen keyboard next to an info pane listing the labels checked
out to the last key pressed. The same window doubles as the key picker for
interactive checkouts (selection mode), where a "Go" button confirms the
highlighted key.
"""

from typing import Dict, Optional

from .. import config
from ..key_codes import KeyCode
from ..key_library import KeyLibrary
from ..keylibrary_logger import system_debug
from ..qt_compat import (
    QtWidgets,
    QFont,
    AlignTop,
    NoFocus,
    NoSelection,
    SetFixedSize,
    StrongFocus,
    WindowCloseButtonHint,
    WindowContextHelpButtonHint,
    WindowStaysOnTopHint,
    exec_dialog,
)
from ..selection import SelectionRequest
from .keyboard_view import KeyboardView
from .qt_keys import key_from_event
from .theme import apply_theme


class KeyLibraryWindow(QtWidgets.QDialog):
    """Displays key assignments and lets the user pick a key."""

    def __init__(self, library: KeyLibrary, assets: Optional[Dict[KeyCode, str]] = None,
                 asset_dir: Optional[str] = None, parent=None):
        super().__init__(parent)
        self.library = library
        self.current_key: Optional[KeyCode] = None
        self._request: Optional[SelectionRequest] = None

        self.setObjectName("KeyLibraryWindow")
        self.setWindowFlag(WindowContextHelpButtonHint, False)
        self.setWindowFlag(WindowCloseButtonHint, True)
        self.setWindowFlag(WindowStaysOnTopHint, True)
        self.setFocusPolicy(StrongFocus)

        self._create_ui(assets, asset_dir)
        apply_theme(self)
        self.reset()

    def _create_ui(self, assets, asset_dir):
        """Create the UI layout."""
        layout = QtWidgets.QHBoxLayout(self)
        layout.setSpacing(config.UI_PANE_GAP)
        # Window is not resizable
        layout.setSizeConstraint(SetFixedSize)

        self.keyboard_view = KeyboardView(self.library, assets, asset_dir, self)
        layout.addWidget(self.keyboard_view, 0, AlignTop)

        info_pane = QtWidgets.QWidget()
        info_pane.setFixedWidth(config.INFO_PANE_WIDTH)
        info_layout = QtWidgets.QVBoxLayout(info_pane)
        info_layout.setContentsMargins(0, 0, 0, 0)

        self.current_key_label = QtWidgets.QLabel(config.DEFAULT_KEY_TEXT)
        font = QFont(self.current_key_label.font())
        font.setPointSize(config.CURRENT_KEY_FONT_SIZE)
        self.current_key_label.setFont(font)
        self.current_key_label.setWordWrap(True)
        info_layout.addWidget(self.current_key_label)

        self.label_list = QtWidgets.QListWidget()
        self.label_list.setFocusPolicy(NoFocus)
        self.label_list.setSelectionMode(NoSelection)
        info_layout.addWidget(self.label_list, 1)

        self.go_button = QtWidgets.QPushButton(config.GO_BUTTON_TEXT)
        self.go_button.setFocusPolicy(NoFocus)
        self.go_button.setAutoDefault(False)
        self.go_button.clicked.connect(self._on_go)
        self.go_button.hide()
        info_layout.addWidget(self.go_button)

        layout.addWidget(info_pane)

    @property
    def selecting(self) -> bool:
        return self._request is not None and self._request.is_pending

    def reset(self):
        """Return the info pane to its idle state."""
        self.current_key = None
        self.current_key_label.setText(config.DEFAULT_KEY_TEXT)
        self.label_list.clear()
        self.go_button.hide()
        self.keyboard_view.set_current_key(None)

    def refresh(self):
        """Re-read the library after a checkout or return."""
        self._show_labels(self.current_key)
        self.keyboard_view.refresh()

    def show_library(self):
        """Show the current key assignments (non-modal)."""
        self.reset()
        self.setWindowTitle(config.WINDOW_TITLE)
        self.show()
        self.raise_()
        self.activateWindow()

    def select_key(self, label: str) -> Optional[KeyCode]:
        """
        Block until the user picks a key for ``label`` or closes the window.

        Returns:
            The confirmed key, or None if the selection was cancelled.
        """
        if self.isVisible():
            self.hide()
        self.reset()
        self.setWindowTitle(config.SELECTION_TITLE_PREFIX + label)

        request = SelectionRequest(label)
        self._request = request
        try:
            exec_dialog(self)
        finally:
            if request.is_pending:
                request.cancel()
            self._request = None

        system_debug(f"Selection for {label!r} {request.state.value}")
        return request.selected_key

    def keyPressEvent(self, event):
        key = key_from_event(event)
        if key is None or key not in self.library:
            # Escape on an untracked keyboard closes the dialog as usual
            super().keyPressEvent(event)
            return
        self._select(key)
        event.accept()

    def _select(self, key: KeyCode):
        self.current_key = key
        self.current_key_label.setText(key.display_name)
        self._show_labels(key)
        self.keyboard_view.set_current_key(key)
        if self.selecting:
            self._request.highlight(key)
            self.go_button.show()

    def _show_labels(self, key: Optional[KeyCode]):
        self.label_list.clear()
        if key is not None:
            self.label_list.addItems(list(self.library.labels_for(key)))

    def _on_go(self):
        if not self.selecting or self._request.candidate is None:
            return
        self._request.confirm()
        self.accept()
