import pytest

from keylibrary.key_codes import KeyCode


@pytest.mark.parametrize(
    "name, expected",
    [
        ("A", KeyCode.A),
        ("a", KeyCode.A),
        ("1", KeyCode.DIGIT1),
        ("DIGIT1", KeyCode.DIGIT1),
        ("Space", KeyCode.SPACE),
        ("Page Up", KeyCode.PAGE_UP),
        ("PAGE_UP", KeyCode.PAGE_UP),
        ("pageup", KeyCode.PAGE_UP),
        ("Escape", KeyCode.ESCAPE),
        ("Esc", KeyCode.ESCAPE),
        ("Return", KeyCode.ENTER),
        ("  F12  ", KeyCode.F12),
    ],
)
def test_from_name_resolves(name, expected):
    assert KeyCode.from_name(name) is expected


@pytest.mark.parametrize("name", ["", "F13", "Hyper", "digit"])
def test_from_name_unknown(name):
    assert KeyCode.from_name(name) is None


def test_every_display_name_round_trips():
    for code in KeyCode:
        assert KeyCode.from_name(code.display_name) is code
