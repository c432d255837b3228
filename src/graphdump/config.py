"""
Configuration and error handling utilities for graphdump.

Copyright (c) 2026 graphdump contributors

MIT License
"""

from enum import Enum
from typing import Type, Optional
from graphdump.logger import get_logger

logger = get_logger(__name__)


class ErrorMode(Enum):
    """
    Error handling mode for invalid printer arguments.

    STRICT: Bad arguments raise exceptions (default, fail-fast)
    LENIENT: Bad arguments become warnings and a safe value is used instead
    """
    STRICT = "strict"
    LENIENT = "lenient"


# Module-level defaults
DEFAULT_ERROR_MODE: ErrorMode = ErrorMode.STRICT
DEFAULT_INDENT_UNIT: str = "  "
DEFAULT_GUARD_CONTAINERS: bool = False

_indent_unit: str = DEFAULT_INDENT_UNIT
_guard_containers: bool = DEFAULT_GUARD_CONTAINERS


def set_error_mode(mode: ErrorMode) -> None:
    """
    Set the default error mode for all graphdump operations.

    Args:
        mode: The error mode to use
    """
    global DEFAULT_ERROR_MODE
    DEFAULT_ERROR_MODE = mode


def get_error_mode() -> ErrorMode:
    """
    Get the current default error mode.

    Returns:
        The current error mode
    """
    return DEFAULT_ERROR_MODE


def set_indent_unit(unit: str) -> None:
    """
    Set the string repeated once per depth level in front of each line.

    Args:
        unit: A non-empty string, typically spaces

    Raises:
        TypeError: If unit is not a string
        ValueError: If unit is empty
    """
    global _indent_unit
    if not isinstance(unit, str):
        raise TypeError(f"indent unit must be a str, got {type(unit).__name__}")
    if not unit:
        raise ValueError("indent unit must not be empty")
    _indent_unit = unit


def get_indent_unit() -> str:
    """Return the current default indent unit."""
    return _indent_unit


def set_guard_containers(flag: bool) -> None:
    """
    Enable or disable cycle detection on arrays, collections and maps.

    By default only composite objects are checked against the visited set,
    so a list that contains itself recurses until RecursionError. With the
    guard enabled, container values are tracked by identity as well and a
    repeated container prints the cyclic reference marker.
    """
    global _guard_containers
    _guard_containers = bool(flag)


def get_guard_containers() -> bool:
    """Return True if containers take part in cycle detection by default."""
    return _guard_containers


def reset_defaults() -> None:
    """Restore error mode, indent unit and container guard to their defaults."""
    global DEFAULT_ERROR_MODE, _indent_unit, _guard_containers
    DEFAULT_ERROR_MODE = ErrorMode.STRICT
    _indent_unit = DEFAULT_INDENT_UNIT
    _guard_containers = DEFAULT_GUARD_CONTAINERS


def handle_error(
    message: str,
    fatal: bool = False,
    error_mode: Optional[ErrorMode] = None,
    exception_class: Type[Exception] = RuntimeError,
) -> bool:
    """
    Handle an error based on the error mode.

    In STRICT mode (or if fatal=True), raises an exception.
    In LENIENT mode (and fatal=False), logs a warning and returns True.

    Args:
        message: Error description
        fatal: If True, always raise regardless of mode
        error_mode: Override the default error mode (optional)
        exception_class: Exception type to raise (default: RuntimeError)

    Returns:
        True if operation should continue (warning was issued)

    Raises:
        exception_class: If in STRICT mode or fatal=True

    Example:
        # In strict mode, raises ValueError
        # In lenient mode, logs warning and the caller clamps the depth
        if start_depth < 0:
            if handle_error("start_depth must be >= 0", exception_class=ValueError):
                start_depth = 0
    """
    mode = error_mode if error_mode is not None else DEFAULT_ERROR_MODE

    if fatal or mode == ErrorMode.STRICT:
        raise exception_class(message)
    else:
        logger.warning(message)
        return True
