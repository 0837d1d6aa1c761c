import os
from typing import Optional

from . import config

RESOURCE_DIR = os.path.join(os.path.dirname(__file__), "resources")


def resolve_keys_file(override: Optional[str] = None) -> str:
    """
    Locate the key list.

    Priority order: explicit override → KEYLIBRARY_KEYS_FILE → bundled keys.txt
    """
    if override:
        return os.path.abspath(override)
    env_path = os.environ.get(config.KEYS_FILE_ENV)
    if env_path:
        return os.path.abspath(env_path)
    return os.path.join(RESOURCE_DIR, config.KEYS_FILE_NAME)


def resolve_asset_dir(override: Optional[str] = None) -> Optional[str]:
    """
    Locate the directory holding keyboard and key images.

    Returns None when no asset directory is configured, in which case the
    keyboard is drawn instead of loaded from images.
    """
    candidate = override or os.environ.get(config.ASSET_DIR_ENV)
    if not candidate:
        return None
    return os.path.abspath(candidate)


def key_image_path(asset_dir: str, key_name: str) -> str:
    return os.path.join(asset_dir, key_name + config.KEY_IMAGE_EXTENSION)


def keyboard_image_path(asset_dir: str) -> str:
    return os.path.join(asset_dir, config.KEYBOARD_IMAGE_NAME)
