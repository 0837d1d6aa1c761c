"""
Key list loading.

Reads the initialization file (one key name per line) and resolves each
name to a KeyCode. Bad entries are logged and skipped so a broken line
never stops startup.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

from .key_codes import KeyCode
from .keylibrary_logger import system_debug, system_error, system_warning
from .paths import key_image_path


@dataclass(frozen=True)
class KeyEntry:
    """A configured key and the image shown when it is occupied."""

    key: KeyCode
    asset_path: Optional[str] = None


def parse_key_lines(lines, asset_dir: Optional[str] = None, source: str = "<keys>") -> List[KeyEntry]:
    """
    Turn raw key-list lines into KeyEntry records.

    Args:
        lines: Iterable of text lines.
        asset_dir: When set, every key must have ``<asset_dir>/<name>.png``.
        source: Name used in log messages.
    """
    entries: List[KeyEntry] = []
    seen = set()

    for line_number, raw in enumerate(lines, start=1):
        name = raw.strip()
        if not name or name.startswith("#"):
            continue

        key = KeyCode.from_name(name)
        if key is None:
            system_warning(f"{source}:{line_number}: unknown key '{name}', skipping")
            continue

        if key in seen:
            system_debug(f"{source}:{line_number}: duplicate key '{name}' ignored")
            continue

        asset_path = None
        if asset_dir:
            asset_path = key_image_path(asset_dir, name)
            if not os.path.isfile(asset_path):
                system_warning(f"{source}:{line_number}: missing image for key '{name}' ({asset_path}), skipping")
                continue

        seen.add(key)
        entries.append(KeyEntry(key=key, asset_path=asset_path))

    return entries


def load_key_entries(path: str, asset_dir: Optional[str] = None) -> List[KeyEntry]:
    """
    Load the key list from ``path``.

    Returns:
        The accepted entries in file order. An unreadable file is logged
        and yields an empty list.
    """
    try:
        with open(path, "r", encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError as exc:
        system_error(f"Could not read key list {path}: {exc}")
        return []

    entries = parse_key_lines(lines, asset_dir=asset_dir, source=os.path.basename(path))
    system_debug(f"Loaded {len(entries)} key{'s' if len(entries) != 1 else ''} from {path}")
    return entries
