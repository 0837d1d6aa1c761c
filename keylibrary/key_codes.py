"""
Key identifiers.

``KeyCode`` names one physical key. Member values are the display names used
in the initialization file and shown in the info pane ("A", "1", "Space",
"Enter", "F1", ...).
"""

from enum import Enum
from typing import Dict, Optional


class KeyCode(Enum):
    """A physical keyboard key."""

    # Letters
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"

    # Number row
    DIGIT0 = "0"
    DIGIT1 = "1"
    DIGIT2 = "2"
    DIGIT3 = "3"
    DIGIT4 = "4"
    DIGIT5 = "5"
    DIGIT6 = "6"
    DIGIT7 = "7"
    DIGIT8 = "8"
    DIGIT9 = "9"
    BACK_QUOTE = "Back Quote"
    MINUS = "Minus"
    EQUALS = "Equals"
    BACK_SPACE = "Backspace"

    # Function row
    ESCAPE = "Esc"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"

    # Punctuation and whitespace
    TAB = "Tab"
    OPEN_BRACKET = "Open Bracket"
    CLOSE_BRACKET = "Close Bracket"
    BACK_SLASH = "Back Slash"
    CAPS = "Caps Lock"
    SEMICOLON = "Semicolon"
    QUOTE = "Quote"
    ENTER = "Enter"
    COMMA = "Comma"
    PERIOD = "Period"
    SLASH = "Slash"
    SPACE = "Space"

    # Modifiers
    SHIFT = "Shift"
    CONTROL = "Ctrl"
    ALT = "Alt"
    META = "Meta"

    # Navigation
    INSERT = "Insert"
    DELETE = "Delete"
    HOME = "Home"
    END = "End"
    PAGE_UP = "Page Up"
    PAGE_DOWN = "Page Down"
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Optional["KeyCode"]:
        """
        Resolve a key name to a KeyCode.

        Accepts display names ("Page Up"), member names ("PAGE_UP") and a few
        common aliases ("Escape", "Return", "Control"), case-insensitively.

        Returns:
            The matching KeyCode, or None when the name is unknown.
        """
        if not name:
            return None
        return _LOOKUP.get(_normalize(name))


# Alternate spellings seen in key lists
_ALIASES = {
    "escape": KeyCode.ESCAPE,
    "return": KeyCode.ENTER,
    "control": KeyCode.CONTROL,
    "capslock": KeyCode.CAPS,
    "backquote": KeyCode.BACK_QUOTE,
    "backslash": KeyCode.BACK_SLASH,
    "pageup": KeyCode.PAGE_UP,
    "pagedown": KeyCode.PAGE_DOWN,
    "del": KeyCode.DELETE,
    "win": KeyCode.META,
}


def _normalize(name: str) -> str:
    return name.strip().lower().replace("_", " ")


def _build_lookup() -> Dict[str, KeyCode]:
    lookup: Dict[str, KeyCode] = {}
    for code in KeyCode:
        lookup[_normalize(code.value)] = code
        lookup[_normalize(code.name)] = code
        lookup[_normalize(code.value).replace(" ", "")] = code
    for alias, code in _ALIASES.items():
        lookup.setdefault(alias, code)
    return lookup


_LOOKUP = _build_lookup()
