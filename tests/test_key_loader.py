import pytest

from keylibrary import key_loader
from keylibrary.key_codes import KeyCode
from keylibrary.key_loader import KeyEntry, load_key_entries, parse_key_lines


@pytest.fixture
def warnings(monkeypatch):
    messages = []
    monkeypatch.setattr(key_loader, "system_warning", messages.append)
    monkeypatch.setattr(key_loader, "system_error", messages.append)
    return messages


def test_parse_skips_blank_lines_and_comments(warnings):
    entries = parse_key_lines(["# header\n", "\n", "A\n", "  Space  \n"])

    assert entries == [KeyEntry(KeyCode.A), KeyEntry(KeyCode.SPACE)]
    assert warnings == []


def test_unknown_names_are_logged_and_dropped(warnings):
    entries = parse_key_lines(["A", "Hyper", "B"], source="keys.txt")

    assert [entry.key for entry in entries] == [KeyCode.A, KeyCode.B]
    assert len(warnings) == 1
    assert "keys.txt:2" in warnings[0]
    assert "Hyper" in warnings[0]


def test_duplicate_keys_keep_first(warnings):
    entries = parse_key_lines(["Enter", "Return", "enter"])

    assert entries == [KeyEntry(KeyCode.ENTER)]
    assert warnings == []


def test_asset_dir_requires_an_image_per_key(tmp_path, warnings):
    (tmp_path / "A.png").write_bytes(b"")

    entries = parse_key_lines(["A", "B"], asset_dir=str(tmp_path))

    assert entries == [KeyEntry(KeyCode.A, str(tmp_path / "A.png"))]
    assert len(warnings) == 1
    assert "missing image" in warnings[0]


def test_load_reads_file_in_order(tmp_path, warnings):
    keys_file = tmp_path / "keys.txt"
    keys_file.write_text("W\nA\nS\nD\n", encoding="utf-8")

    entries = load_key_entries(str(keys_file))

    assert [entry.key for entry in entries] == [KeyCode.W, KeyCode.A, KeyCode.S, KeyCode.D]
    assert all(entry.asset_path is None for entry in entries)


def test_missing_file_yields_no_keys(tmp_path, warnings):
    assert load_key_entries(str(tmp_path / "nope.txt")) == []
    assert len(warnings) == 1
    assert "Could not read key list" in warnings[0]


def test_bundled_key_list_loads_cleanly(warnings):
    from keylibrary.paths import resolve_keys_file

    entries = load_key_entries(resolve_keys_file())

    assert warnings == []
    keys = [entry.key for entry in entries]
    assert KeyCode.ESCAPE in keys
    assert KeyCode.SPACE in keys
    assert len(keys) == len(set(keys))
