"""
Translation from Qt key events to KeyCode.
"""

import string
from typing import Dict, Optional

from ..key_codes import KeyCode
from ..qt_compat import qt_key, enum_value

# Qt key name -> KeyCode for everything that isn't a letter, digit or F-key
_NAMED_KEYS = {
    "Key_Escape": KeyCode.ESCAPE,
    "Key_QuoteLeft": KeyCode.BACK_QUOTE,
    "Key_Minus": KeyCode.MINUS,
    "Key_Equal": KeyCode.EQUALS,
    "Key_Backspace": KeyCode.BACK_SPACE,
    "Key_Tab": KeyCode.TAB,
    "Key_Backtab": KeyCode.TAB,
    "Key_BracketLeft": KeyCode.OPEN_BRACKET,
    "Key_BracketRight": KeyCode.CLOSE_BRACKET,
    "Key_Backslash": KeyCode.BACK_SLASH,
    "Key_CapsLock": KeyCode.CAPS,
    "Key_Semicolon": KeyCode.SEMICOLON,
    "Key_Apostrophe": KeyCode.QUOTE,
    "Key_Return": KeyCode.ENTER,
    "Key_Enter": KeyCode.ENTER,
    "Key_Comma": KeyCode.COMMA,
    "Key_Period": KeyCode.PERIOD,
    "Key_Slash": KeyCode.SLASH,
    "Key_Space": KeyCode.SPACE,
    "Key_Shift": KeyCode.SHIFT,
    "Key_Control": KeyCode.CONTROL,
    "Key_Alt": KeyCode.ALT,
    "Key_Meta": KeyCode.META,
    "Key_Insert": KeyCode.INSERT,
    "Key_Delete": KeyCode.DELETE,
    "Key_Home": KeyCode.HOME,
    "Key_End": KeyCode.END,
    "Key_PageUp": KeyCode.PAGE_UP,
    "Key_PageDown": KeyCode.PAGE_DOWN,
    "Key_Up": KeyCode.UP,
    "Key_Down": KeyCode.DOWN,
    "Key_Left": KeyCode.LEFT,
    "Key_Right": KeyCode.RIGHT,
}

# With Shift held Qt reports the shifted symbol (e.g. # for 3); map it back
# to the physical key
_SHIFTED_KEYS = {
    "Key_Exclam": KeyCode.DIGIT1,
    "Key_At": KeyCode.DIGIT2,
    "Key_NumberSign": KeyCode.DIGIT3,
    "Key_Dollar": KeyCode.DIGIT4,
    "Key_Percent": KeyCode.DIGIT5,
    "Key_AsciiCircum": KeyCode.DIGIT6,
    "Key_Ampersand": KeyCode.DIGIT7,
    "Key_Asterisk": KeyCode.DIGIT8,
    "Key_ParenLeft": KeyCode.DIGIT9,
    "Key_ParenRight": KeyCode.DIGIT0,
    "Key_AsciiTilde": KeyCode.BACK_QUOTE,
    "Key_Underscore": KeyCode.MINUS,
    "Key_Plus": KeyCode.EQUALS,
    "Key_BraceLeft": KeyCode.OPEN_BRACKET,
    "Key_BraceRight": KeyCode.CLOSE_BRACKET,
    "Key_Bar": KeyCode.BACK_SLASH,
    "Key_Colon": KeyCode.SEMICOLON,
    "Key_QuoteDbl": KeyCode.QUOTE,
    "Key_Less": KeyCode.COMMA,
    "Key_Greater": KeyCode.PERIOD,
    "Key_Question": KeyCode.SLASH,
}


def _build_key_map() -> Dict[int, KeyCode]:
    key_map: Dict[int, KeyCode] = {}
    for letter in string.ascii_uppercase:
        key_map[qt_key(f"Key_{letter}")] = KeyCode[letter]
    for digit in string.digits:
        key_map[qt_key(f"Key_{digit}")] = KeyCode[f"DIGIT{digit}"]
    for number in range(1, 13):
        key_map[qt_key(f"Key_F{number}")] = KeyCode[f"F{number}"]
    for name, code in list(_NAMED_KEYS.items()) + list(_SHIFTED_KEYS.items()):
        key_map[qt_key(name)] = code
    return key_map


_QT_KEY_MAP = _build_key_map()


def key_from_event(event) -> Optional[KeyCode]:
    """Return the KeyCode for a QKeyEvent, or None for keys we don't track."""
    return _QT_KEY_MAP.get(enum_value(event.key()))
