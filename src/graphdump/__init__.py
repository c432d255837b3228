"""
graphdump - Reflective, cycle-safe text dumps of Python object graphs.

Copyright (c) 2026 graphdump contributors

MIT License
"""

from graphdump.config import (
    ErrorMode,
    set_error_mode,
    get_error_mode,
    handle_error,
    set_indent_unit,
    get_indent_unit,
    set_guard_containers,
    get_guard_containers,
    reset_defaults,
)
from graphdump.exceptions import GraphDumpError, MemberAccessError
from graphdump.shape import Shape, classify, is_scalar, is_container, type_name
from graphdump.visited import VisitedSet
from graphdump.members import Member, iter_members, read_member
from graphdump.printer import (
    ObjectPrinter,
    PrintableMixin,
    format_object,
    print_object,
    NULL_TEXT,
    CYCLE_MARKER,
    ACCESS_ERROR_TEXT,
    RENDER_ERROR_TEXT,
)
from graphdump.logger import set_global_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "ErrorMode",
    "set_error_mode",
    "get_error_mode",
    "handle_error",
    "set_indent_unit",
    "get_indent_unit",
    "set_guard_containers",
    "get_guard_containers",
    "reset_defaults",
    # Exceptions
    "GraphDumpError",
    "MemberAccessError",
    # Shape classification
    "Shape",
    "classify",
    "is_scalar",
    "is_container",
    "type_name",
    # Traversal state
    "VisitedSet",
    "Member",
    "iter_members",
    "read_member",
    # Printing
    "ObjectPrinter",
    "PrintableMixin",
    "format_object",
    "print_object",
    "NULL_TEXT",
    "CYCLE_MARKER",
    "ACCESS_ERROR_TEXT",
    "RENDER_ERROR_TEXT",
    # Logging utilities
    "set_global_logging",
    "get_logger",
    # Version
    "__version__",
]
