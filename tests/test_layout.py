from keylibrary.key_codes import KeyCode
from keylibrary.layout import KEYBOARD_ROWS, keycap_rects, layout_size


def test_main_rows_have_equal_width():
    widths = {sum(width for _, width in row) for row in KEYBOARD_ROWS}
    assert widths == {15.0}


def test_every_bundled_key_has_a_keycap():
    drawn = {key for key, _ in keycap_rects(40, 4)}
    missing = set(KeyCode) - drawn
    assert missing == set()


def test_keycaps_do_not_overlap_within_a_row():
    rects = [rect for _, rect in keycap_rects(40, 4)]
    rows = {}
    for x, y, w, h in rects:
        rows.setdefault(y, []).append((x, x + w))
    for spans in rows.values():
        spans.sort()
        for (_, end), (start, _) in zip(spans, spans[1:]):
            assert end <= start


def test_layout_size_covers_all_keycaps():
    width, height = layout_size(40, 4)
    for _, (x, y, w, h) in keycap_rects(40, 4):
        assert x + w <= width
        assert y + h <= height
    assert height == 6 * 40 + 5 * 4
