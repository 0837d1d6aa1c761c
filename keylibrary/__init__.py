"""
KeyLibrary: a utility for assigning keys to labels and keeping track of
which keys are being used.
"""

from .errors import KeyLibraryError, SelectionError
from .key_codes import KeyCode
from .key_library import KeyLibrary
from .key_loader import KeyEntry, load_key_entries
from .selection import SelectionRequest, SelectionState

__all__ = [
    'KeyCode',
    'KeyEntry',
    'KeyLibrary',
    'KeyLibraryError',
    'SelectionError',
    'SelectionRequest',
    'SelectionState',
    'load_key_entries',
]
