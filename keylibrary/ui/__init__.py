"""
Qt presentation layer for KeyLibrary.

Windows here read the library after every call they make; the library never
calls back into them.
"""

from .demo_window import DemoWindow
from .key_library_window import KeyLibraryWindow
from .keyboard_view import KeyboardView

__all__ = [
    'DemoWindow',
    'KeyLibraryWindow',
    'KeyboardView',
]
