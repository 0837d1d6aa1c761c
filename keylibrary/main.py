import argparse
import sys

from . import config
from .key_library import KeyLibrary
from .key_loader import load_key_entries
from .keylibrary_logger import system_debug, system_info
from .paths import resolve_asset_dir, resolve_keys_file


def build_library(keys_file=None, asset_dir=None, multi=False):
    """
    Load the key list and create the library.

    Returns:
        (KeyLibrary, {KeyCode: image path}) - the mapping is empty when no
        asset directory is configured.
    """
    keys_path = resolve_keys_file(keys_file)
    assets_root = resolve_asset_dir(asset_dir)
    system_debug(f"Using key list: {keys_path}")
    if assets_root:
        system_debug(f"Using asset directory: {assets_root}")

    entries = load_key_entries(keys_path, asset_dir=assets_root)
    library = KeyLibrary([entry.key for entry in entries], multi=multi)
    assets = {entry.key: entry.asset_path for entry in entries if entry.asset_path}
    return library, assets


def launch(multi=False, keys_file=None, asset_dir=None, debug=False, demo=True):
    """
    Launch KeyLibrary.

    Args:
        multi (bool): Allow several labels per key
        keys_file (str, optional): Override the key list path
        asset_dir (str, optional): Directory with keyboard.png and per-key images
        debug (bool): Enable debug mode for verbose output
        demo (bool): Open the demo window; otherwise show the library directly

    Returns:
        int: Qt application exit code
    """
    config.DEBUG_MODE = config.DEBUG_MODE or bool(debug)

    from .keylibrary_logger import qt_message_handler
    from .qt_compat import QtCore, QtWidgets, exec_application
    from .ui import DemoWindow, KeyLibraryWindow

    QtCore.qInstallMessageHandler(qt_message_handler)
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)

    library, assets = build_library(keys_file, asset_dir, multi)
    library_window = KeyLibraryWindow(library, assets, resolve_asset_dir(asset_dir))

    if demo:
        window = DemoWindow(library, library_window)
        window.show()
    else:
        library_window.show_library()

    system_info(f"KeyLibrary started with {len(library)} keys")
    return exec_application(app)


def build_parser():
    parser = argparse.ArgumentParser(description="KeyLibrary - visual key assignment tool")
    parser.add_argument("--multi", action="store_true", default=config.DEFAULT_MULTI,
                        help="Allow more than one label per key")
    parser.add_argument("--keys", help="Override the key list file")
    parser.add_argument("--assets", help="Directory holding keyboard.png and key images")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode for verbose output")
    parser.add_argument("--no-demo", action="store_true", help="Show the key library instead of the demo window")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    return launch(
        multi=args.multi,
        keys_file=args.keys,
        asset_dir=args.assets,
        debug=args.debug,
        demo=not args.no_demo,
    )


if __name__ == "__main__":
    sys.exit(main())
