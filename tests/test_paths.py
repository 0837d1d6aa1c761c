import os

from keylibrary import config, paths


def test_keys_file_defaults_to_bundled_list(monkeypatch):
    monkeypatch.delenv(config.KEYS_FILE_ENV, raising=False)

    path = paths.resolve_keys_file()

    assert path == os.path.join(paths.RESOURCE_DIR, "keys.txt")
    assert os.path.isfile(path)


def test_keys_file_env_override(monkeypatch, tmp_path):
    target = tmp_path / "custom.txt"
    monkeypatch.setenv(config.KEYS_FILE_ENV, str(target))

    assert paths.resolve_keys_file() == str(target)
    assert paths.resolve_keys_file("other.txt") == os.path.abspath("other.txt")


def test_asset_dir_is_optional(monkeypatch, tmp_path):
    monkeypatch.delenv(config.ASSET_DIR_ENV, raising=False)
    assert paths.resolve_asset_dir() is None

    monkeypatch.setenv(config.ASSET_DIR_ENV, str(tmp_path))
    assert paths.resolve_asset_dir() == str(tmp_path)


def test_image_paths(tmp_path):
    assert paths.key_image_path(str(tmp_path), "A") == str(tmp_path / "A.png")
    assert paths.keyboard_image_path(str(tmp_path)) == str(tmp_path / "keyboard.png")
