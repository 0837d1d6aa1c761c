from keylibrary.key_codes import KeyCode
from keylibrary.main import build_library, build_parser


def test_build_library_from_key_file(tmp_path, monkeypatch):
    monkeypatch.delenv("KEYLIBRARY_ASSET_DIR", raising=False)
    keys_file = tmp_path / "keys.txt"
    keys_file.write_text("A\nB\n", encoding="utf-8")

    library, assets = build_library(str(keys_file), multi=True)

    assert library.valid_keys == (KeyCode.A, KeyCode.B)
    assert library.multi is True
    assert assets == {}


def test_build_library_collects_assets(tmp_path):
    keys_file = tmp_path / "keys.txt"
    keys_file.write_text("A\nB\n", encoding="utf-8")
    asset_dir = tmp_path / "assets"
    asset_dir.mkdir()
    (asset_dir / "A.png").write_bytes(b"")

    library, assets = build_library(str(keys_file), str(asset_dir))

    assert library.valid_keys == (KeyCode.A,)
    assert assets == {KeyCode.A: str(asset_dir / "A.png")}


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.multi is False
    assert args.keys is None
    assert args.no_demo is False

    args = build_parser().parse_args(["--multi", "--debug", "--no-demo", "--keys", "k.txt"])
    assert args.multi and args.debug and args.no_demo
    assert args.keys == "k.txt"
