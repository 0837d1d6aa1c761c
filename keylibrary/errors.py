"""Exception types raised by KeyLibrary."""


class KeyLibraryError(Exception):
    """Base class for KeyLibrary errors."""


class SelectionError(KeyLibraryError):
    """Raised when a key selection request is completed incorrectly."""
