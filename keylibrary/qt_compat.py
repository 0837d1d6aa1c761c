"""
Qt compatibility module for PySide2/PySide6 support.

Provides a unified interface for Qt imports, preferring PySide6 and falling
back to PySide2 when that is the only binding installed.
"""


def _try_import_by_availability():
    """Try PySide6 first, fall back to PySide2."""
    try:
        import PySide6
        return 6
    except ImportError:
        try:
            import PySide2
            return 2
        except ImportError:
            raise ImportError("Neither PySide6 nor PySide2 is available. Please install one of them.")


# Determine which version to use
PYSIDE_VERSION = _try_import_by_availability()
USE_PYSIDE6 = (PYSIDE_VERSION == 6)

if USE_PYSIDE6:
    from PySide6 import QtCore, QtGui, QtWidgets
    from PySide6.QtCore import Qt, QRectF
    from PySide6.QtGui import QColor, QFont, QPainter, QPen, QPixmap
else:
    from PySide2 import QtCore, QtGui, QtWidgets
    from PySide2.QtCore import Qt, QRectF
    from PySide2.QtGui import QColor, QFont, QPainter, QPen, QPixmap

# Handle API differences between PySide2 and PySide6
if PYSIDE_VERSION == 6:
    # PySide6 moved many Qt enums to sub-namespaces
    AlignCenter = Qt.AlignmentFlag.AlignCenter
    AlignTop = Qt.AlignmentFlag.AlignTop

    SmoothTransformation = Qt.TransformationMode.SmoothTransformation

    NoFocus = Qt.FocusPolicy.NoFocus
    StrongFocus = Qt.FocusPolicy.StrongFocus

    WindowStaysOnTopHint = Qt.WindowType.WindowStaysOnTopHint
    WindowContextHelpButtonHint = Qt.WindowType.WindowContextHelpButtonHint
    WindowCloseButtonHint = Qt.WindowType.WindowCloseButtonHint

    NoSelection = QtWidgets.QAbstractItemView.SelectionMode.NoSelection
    SetFixedSize = QtWidgets.QLayout.SizeConstraint.SetFixedSize

    Antialiasing = QPainter.RenderHint.Antialiasing

    _KEY_NAMESPACE = Qt.Key
else:
    # PySide2 - enums are directly on Qt namespace
    AlignCenter = Qt.AlignCenter
    AlignTop = Qt.AlignTop

    SmoothTransformation = Qt.SmoothTransformation

    NoFocus = Qt.NoFocus
    StrongFocus = Qt.StrongFocus

    WindowStaysOnTopHint = Qt.WindowStaysOnTopHint
    WindowContextHelpButtonHint = Qt.WindowContextHelpButtonHint
    WindowCloseButtonHint = Qt.WindowCloseButtonHint

    NoSelection = QtWidgets.QAbstractItemView.NoSelection
    SetFixedSize = QtWidgets.QLayout.SetFixedSize

    Antialiasing = QPainter.Antialiasing

    _KEY_NAMESPACE = Qt


def enum_value(value) -> int:
    """Return the integer behind a Qt enum (PySide6) or int (PySide2)."""
    if hasattr(value, 'value'):
        return int(value.value)
    return int(value)


def qt_key(name: str) -> int:
    """Look up a Qt key code by its enum name, e.g. ``qt_key("Key_A")``."""
    return enum_value(getattr(_KEY_NAMESPACE, name))


def exec_with_fallback(target, *args, **kwargs):
    """Call exec/exec_ on the given Qt object regardless of binding version."""
    execute = getattr(target, "exec", None)
    if callable(execute):
        return execute(*args, **kwargs)
    execute = getattr(target, "exec_", None)
    if callable(execute):
        return execute(*args, **kwargs)
    raise AttributeError(f"{target} has no exec/exec_ method")


def exec_dialog(dialog, *args, **kwargs):
    return exec_with_fallback(dialog, *args, **kwargs)


def exec_application(app, *args, **kwargs):
    return exec_with_fallback(app, *args, **kwargs)
