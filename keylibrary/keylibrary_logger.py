"""
KeyLibrary Logging System

All operational messages (configuration problems, checkout results, Qt
warnings) go through a single logger that writes to stderr.
"""

import logging
import sys
from typing import Optional

from . import config

_system_logger: Optional[logging.Logger] = None


def _get_system_logger() -> logging.Logger:
    """Get or create the system logger instance."""
    global _system_logger

    if _system_logger is None:
        _system_logger = logging.getLogger('keylibrary.system')
        _system_logger.setLevel(logging.DEBUG)

        # Remove any existing handlers
        _system_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter('[KEYLIBRARY] %(levelname)s: %(message)s')
        console_handler.setFormatter(formatter)

        _system_logger.addHandler(console_handler)

        # Prevent propagation to root logger
        _system_logger.propagate = False

    return _system_logger


def system_info(message: str) -> None:
    """Log an informational system message (normal operation)."""
    _get_system_logger().info(message)


def system_debug(message: str) -> None:
    """Log a debug system message (only shown when DEBUG_MODE is True)."""
    if getattr(config, "DEBUG_MODE", False):
        _get_system_logger().debug(message)


def system_warning(message: str) -> None:
    """Log a warning system message."""
    _get_system_logger().warning(message)


def system_error(message: str) -> None:
    """Log an error system message."""
    _get_system_logger().error(message)


def system_critical(message: str) -> None:
    """Log a critical system message."""
    _get_system_logger().critical(message)


def qt_message_handler(msg_type, msg_context, msg_string):
    """Custom Qt message handler that routes through our logging system."""
    from .qt_compat import QtCore

    if msg_type == QtCore.QtMsgType.QtDebugMsg:
        system_debug(f"Qt Debug: {msg_string}")
    elif msg_type == QtCore.QtMsgType.QtWarningMsg:
        system_warning(f"Qt Warning: {msg_string}")
    elif msg_type == QtCore.QtMsgType.QtCriticalMsg:
        system_error(f"Qt Critical: {msg_string}")
    elif msg_type == QtCore.QtMsgType.QtFatalMsg:
        system_critical(f"Qt Fatal: {msg_string}")
    elif msg_type == QtCore.QtMsgType.QtInfoMsg:
        system_info(f"Qt Info: {msg_string}")
