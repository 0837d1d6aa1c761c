"""
Key Library

Tracks which labels are checked out to which keys. The library only knows
about keys and labels; windows and dialogs query it after every call to
refresh what they display.
"""

from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .key_codes import KeyCode
from .keylibrary_logger import system_debug, system_warning

# Presentation-layer key picker: blocks until the user picks a key for the
# given label, returns None when the user cancels.
KeySelector = Callable[[str], Optional[KeyCode]]


class KeyLibrary:
    """
    Registry mapping each valid key to the labels checked out to it.

    Args:
        valid_keys: Keys that may be checked out. Fixed for the lifetime of
            the library.
        multi: Whether more than one label may be checked out to a key.
    """

    def __init__(self, valid_keys: Iterable[KeyCode], multi: bool = False):
        self._multi = bool(multi)
        self._library: Dict[KeyCode, List[str]] = {}

        for key in valid_keys:
            if not isinstance(key, KeyCode):
                system_warning(f"Skipping unknown key identifier: {key!r}")
                continue
            self._library.setdefault(key, [])

        system_debug(
            f"Key library ready with {len(self._library)} key"
            f"{'s' if len(self._library) != 1 else ''} (multi={self._multi})"
        )

    @property
    def multi(self) -> bool:
        return self._multi

    @property
    def valid_keys(self) -> Tuple[KeyCode, ...]:
        """Valid keys in the order they were configured."""
        return tuple(self._library)

    def __contains__(self, key) -> bool:
        return key in self._library

    def __len__(self) -> int:
        return len(self._library)

    def checkout_key(self, label: str, key: KeyCode) -> bool:
        """
        Check out a key to a label. Can be used when setting up default controls.

        Args:
            label: Label to assign the key to.
            key: Key to check out.

        Returns:
            True if the checkout succeeded, False if the key is not valid or
            is already taken and multi mode is off.
        """
        labels = self._library.get(key)
        if labels is None:
            return False
        if not self._multi and labels:
            return False
        labels.append(label)
        return True

    def checkout_key_interactive(self, label: str, selector: KeySelector) -> Optional[KeyCode]:
        """
        Let the user pick a key for a label and check it out.

        Args:
            label: Label to assign the key to.
            selector: Blocking key picker supplied by the presentation layer.

        Returns:
            The key the user picked, or None if they cancelled. The picked key
            is returned even when the checkout itself was refused.
        """
        selected = selector(label)
        if selected is None:
            return None
        if not self.checkout_key(label, selected):
            system_debug(f"Checkout of {label!r} to {_key_name(selected)} was refused")
        return selected

    def return_key(self, label: str, key: Optional[KeyCode] = None) -> bool:
        """
        Return a key assignment that is no longer used.

        With ``key``, removes the first occurrence of ``label`` from that key.
        Without it, removes ``label`` from every key it is checked out to.

        Returns:
            True if at least one assignment was removed, False otherwise.
        """
        if key is not None:
            return self._remove(label, self._library.get(key))

        removed = False
        for labels in self._library.values():
            if self._remove(label, labels):
                removed = True
        return removed

    @staticmethod
    def _remove(label: str, labels: Optional[List[str]]) -> bool:
        if not labels or label not in labels:
            return False
        labels.remove(label)
        return True

    def labels_for(self, key: KeyCode) -> Tuple[str, ...]:
        """Labels checked out to ``key``, oldest first (empty for unknown keys)."""
        return tuple(self._library.get(key, ()))

    def is_occupied(self, key: KeyCode) -> bool:
        return bool(self._library.get(key))

    def occupied_keys(self) -> List[KeyCode]:
        return [key for key, labels in self._library.items() if labels]

    def keys_for(self, label: str) -> List[KeyCode]:
        """Keys that ``label`` is currently checked out to."""
        return [key for key, labels in self._library.items() if label in labels]


def _key_name(key) -> str:
    return key.display_name if isinstance(key, KeyCode) else repr(key)
