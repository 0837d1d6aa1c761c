"""
Key selection requests.

A ``SelectionRequest`` stands for one pending "pick a key for this label"
question put to the user. The window highlights candidate keys as they are
pressed and finishes the request with ``confirm`` or ``cancel``.
"""

from enum import Enum
from typing import Callable, List, Optional

from .errors import SelectionError
from .key_codes import KeyCode


class SelectionState(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class SelectionRequest:
    """Pending key selection for a single label."""

    def __init__(self, label: str):
        self.label = label
        self.state = SelectionState.PENDING
        self.candidate: Optional[KeyCode] = None
        self.selected_key: Optional[KeyCode] = None
        self._callbacks: List[Callable[["SelectionRequest"], None]] = []

    @property
    def is_pending(self) -> bool:
        return self.state is SelectionState.PENDING

    def highlight(self, key: KeyCode) -> None:
        """Record the key the user last pressed. Ignored once finished."""
        if self.is_pending:
            self.candidate = key

    def confirm(self) -> KeyCode:
        """Accept the highlighted key as the selection."""
        self._ensure_pending()
        if self.candidate is None:
            raise SelectionError(f"No key highlighted for {self.label!r}")
        self.selected_key = self.candidate
        self._finish(SelectionState.CONFIRMED)
        return self.selected_key

    def cancel(self) -> None:
        """Finish without a selection."""
        self._ensure_pending()
        self._finish(SelectionState.CANCELLED)

    def on_complete(self, callback: Callable[["SelectionRequest"], None]) -> None:
        """Run ``callback`` when the request finishes (immediately if it has)."""
        if self.is_pending:
            self._callbacks.append(callback)
        else:
            callback(self)

    def _ensure_pending(self) -> None:
        if not self.is_pending:
            raise SelectionError(f"Selection for {self.label!r} already {self.state.value}")

    def _finish(self, state: SelectionState) -> None:
        self.state = state
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback(self)
