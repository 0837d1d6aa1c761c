"""
Geometry of the drawn on-screen keyboard.

Each row is a list of ``(key, width)`` pairs, widths in keycap units. A key
of ``None`` is an empty gap. Keys may appear more than once (both Shift keys
map to the same KeyCode).
"""

from typing import List, Optional, Sequence, Tuple

from .key_codes import KeyCode as K

Row = Sequence[Tuple[Optional[K], float]]
Rect = Tuple[float, float, float, float]


def _keys(*codes: K) -> List[Tuple[Optional[K], float]]:
    return [(code, 1.0) for code in codes]


KEYBOARD_ROWS: List[Row] = [
    _keys(K.ESCAPE) + [(None, 1.0)] + _keys(K.F1, K.F2, K.F3, K.F4) + [(None, 0.5)]
    + _keys(K.F5, K.F6, K.F7, K.F8) + [(None, 0.5)] + _keys(K.F9, K.F10, K.F11, K.F12),
    _keys(K.BACK_QUOTE, K.DIGIT1, K.DIGIT2, K.DIGIT3, K.DIGIT4, K.DIGIT5, K.DIGIT6,
          K.DIGIT7, K.DIGIT8, K.DIGIT9, K.DIGIT0, K.MINUS, K.EQUALS) + [(K.BACK_SPACE, 2.0)],
    [(K.TAB, 1.5)] + _keys(K.Q, K.W, K.E, K.R, K.T, K.Y, K.U, K.I, K.O, K.P,
                           K.OPEN_BRACKET, K.CLOSE_BRACKET) + [(K.BACK_SLASH, 1.5)],
    [(K.CAPS, 1.75)] + _keys(K.A, K.S, K.D, K.F, K.G, K.H, K.J, K.K, K.L,
                             K.SEMICOLON, K.QUOTE) + [(K.ENTER, 2.25)],
    [(K.SHIFT, 2.25)] + _keys(K.Z, K.X, K.C, K.V, K.B, K.N, K.M,
                              K.COMMA, K.PERIOD, K.SLASH) + [(K.SHIFT, 2.75)],
    [(K.CONTROL, 1.5), (K.META, 1.25), (K.ALT, 1.25), (K.SPACE, 7.0),
     (K.ALT, 1.25), (K.META, 1.25), (K.CONTROL, 1.5)],
]

# Navigation cluster to the right of the main block
NAVIGATION_ROWS: List[Row] = [
    [],
    _keys(K.INSERT, K.HOME, K.PAGE_UP),
    _keys(K.DELETE, K.END, K.PAGE_DOWN),
    [],
    [(None, 1.0)] + _keys(K.UP),
    _keys(K.LEFT, K.DOWN, K.RIGHT),
]

NAVIGATION_GAP = 0.5  # Units between main block and navigation cluster


def _row_width(row: Row) -> float:
    return sum(width for _, width in row)


def keycap_rects(unit: float, spacing: float) -> List[Tuple[K, Rect]]:
    """
    Compute the pixel rectangle of every keycap.

    Args:
        unit: Size of a 1u keycap in pixels.
        spacing: Gap between keycaps in pixels.

    Returns:
        ``(key, (x, y, width, height))`` for each drawn keycap, in row order.
    """
    rects: List[Tuple[K, Rect]] = []
    main_width = max(_row_width(row) for row in KEYBOARD_ROWS)
    nav_offset = main_width + NAVIGATION_GAP

    for row_index, (main_row, nav_row) in enumerate(zip(KEYBOARD_ROWS, NAVIGATION_ROWS)):
        y = row_index * (unit + spacing)
        for offset, row in ((0.0, main_row), (nav_offset, nav_row)):
            x_units = offset
            for key, width in row:
                if key is not None:
                    x = x_units * (unit + spacing)
                    w = width * unit + (width - 1) * spacing
                    rects.append((key, (x, y, w, unit)))
                x_units += width
    return rects


def layout_size(unit: float, spacing: float) -> Tuple[float, float]:
    """Total pixel size of the drawn keyboard."""
    rects = keycap_rects(unit, spacing)
    width = max(x + w for _, (x, _, w, _) in rects)
    height = max(y + h for _, (_, y, _, h) in rects)
    return width, height
