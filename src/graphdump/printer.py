"""
Recursive, indented text rendering of arbitrary object graphs.

Copyright (c) 2026 graphdump contributors

MIT License
"""

from __future__ import annotations
import io
import sys
from typing import Any, Optional, TextIO

import numpy as np

from graphdump.config import get_guard_containers, get_indent_unit, handle_error
from graphdump.exceptions import MemberAccessError
from graphdump.logger import get_logger
from graphdump.members import iter_members, read_member
from graphdump.shape import Shape, classify, is_container, type_name
from graphdump.visited import VisitedSet

logger = get_logger(__name__)

NULL_TEXT = "null"
CYCLE_MARKER = "(Cyclic reference detected)"
ACCESS_ERROR_TEXT = "Error: Unable to access field"
RENDER_ERROR_TEXT = "Error: Unable to render value"


def _scalar_text(value: Any) -> str:
    # Classes print by name rather than as a namespace
    if isinstance(value, type):
        return value.__qualname__
    return str(value)


class ObjectPrinter:
    """
    Writes the indented rendering of values to a text file.

    One ObjectPrinter is one traversal context: it owns the output file,
    the indent unit and the VisitedSet shared by every recursive call.
    Reusing a printer for a second value keeps the visited entries from
    the first, so objects already printed show up as cyclic references.

    Layout (indent(d) is the indent unit repeated d times):
        Example {
          number: 42
          nested: Nested {
            value: 3.14
          }
          items: Collection[2]:
            one
            two
          table: Map[1]:
            Key: a
            Value: 1
        }

    print_object() assumes the cursor is already where the value belongs
    (at the start of a line, or after a "name: " prefix written by a
    parent), which lets a larger printer embed a sub-traversal.

    Example:
        >>> buf = io.StringIO()
        >>> ObjectPrinter(file=buf).print_object([1, 2])
        >>> print(buf.getvalue(), end="")
        Collection[2]:
          1
          2
    """

    def __init__(
        self,
        file: Optional[TextIO] = None,
        indent_unit: Optional[str] = None,
        visited: Optional[VisitedSet] = None,
        guard_containers: Optional[bool] = None,
    ):
        """
        Create an ObjectPrinter.

        Args:
            file: Text stream to write to (default: sys.stdout at write time)
            indent_unit: String repeated per depth level (default: config)
            visited: VisitedSet to continue from (default: a new, empty set)
            guard_containers: Also cycle-check arrays, collections and maps
                (default: config)

        Raises:
            TypeError, ValueError: For an invalid indent_unit or visited
                (in STRICT mode)
        """
        if indent_unit is None:
            indent_unit = get_indent_unit()
        elif not isinstance(indent_unit, str) or not indent_unit:
            if handle_error(
                f"indent_unit must be a non-empty str, got {indent_unit!r}",
                exception_class=ValueError,
            ):
                indent_unit = get_indent_unit()

        if visited is None:
            visited = VisitedSet()
        elif not isinstance(visited, VisitedSet):
            if handle_error(
                f"visited must be a VisitedSet, got {type_name(visited)}",
                exception_class=TypeError,
            ):
                visited = VisitedSet()

        if guard_containers is None:
            guard_containers = get_guard_containers()

        self._file = file
        self._indent_unit = indent_unit
        self._visited = visited
        self._guard_containers = guard_containers

    @property
    def visited(self) -> VisitedSet:
        """The VisitedSet shared by this printer's traversals."""
        return self._visited

    @property
    def indent_unit(self) -> str:
        return self._indent_unit

    @property
    def guard_containers(self) -> bool:
        return self._guard_containers

    def indent(self, depth: int) -> str:
        """Line prefix for the given depth."""
        return self._indent_unit * depth

    def print_object(self, value: Any, depth: int = 0) -> None:
        """
        Write the rendering of value at the given depth.

        Args:
            value: Any object
            depth: Nesting level of value (>= 0)

        Raises:
            ValueError: If depth is negative (in STRICT mode)
        """
        if depth < 0:
            if handle_error(
                f"depth must be >= 0, got {depth}", exception_class=ValueError
            ):
                depth = 0
        self._print(value, depth)

    def _write(self, text: str) -> None:
        file = self._file if self._file is not None else sys.stdout
        file.write(text)

    def _print(self, value: Any, depth: int) -> None:
        shape = classify(value)

        if shape is Shape.NULL:
            self._write(NULL_TEXT + "\n")
            return
        if shape is Shape.SCALAR:
            try:
                text = _scalar_text(value)
            except Exception as exc:
                self._render_failed(value, exc)
                return
            self._write(text + "\n")
            return

        guarded = shape is Shape.COMPOSITE or (
            self._guard_containers and is_container(shape)
        )
        if guarded:
            if self._visited.contains(value):
                self._write(CYCLE_MARKER + "\n")
                return
            self._visited.add(value)

        if shape is Shape.ARRAY:
            # Subclasses such as numpy.matrix never index down to 1-D rows
            if isinstance(value, np.ndarray):
                value = np.asarray(value)
            self._print_elements("Array", value, depth)
        elif shape is Shape.SEQUENCE:
            self._print_elements("Collection", value, depth)
        elif shape is Shape.MAPPING:
            self._print_mapping(value, depth)
        else:
            self._print_composite(value, depth)

    def _render_failed(self, value: Any, exc: Exception) -> None:
        logger.warning(f"Unable to render {type_name(value)}: {exc!r}")
        self._write(RENDER_ERROR_TEXT + "\n")

    def _print_elements(self, label: str, container: Any, depth: int) -> None:
        try:
            size = len(container)
            elements = list(container)
        except Exception as exc:
            self._render_failed(container, exc)
            return
        self._write(f"{label}[{size}]:\n")
        prefix = self.indent(depth + 1)
        for element in elements:
            self._write(prefix)
            self._print(element, depth + 1)

    def _print_mapping(self, mapping: Any, depth: int) -> None:
        try:
            size = len(mapping)
            entries = list(mapping.items())
        except Exception as exc:
            self._render_failed(mapping, exc)
            return
        self._write(f"Map[{size}]:\n")
        prefix = self.indent(depth + 1)
        for key, item in entries:
            self._write(prefix + "Key: ")
            self._print(key, depth + 1)
            self._write(prefix + "Value: ")
            self._print(item, depth + 1)

    def _print_composite(self, value: Any, depth: int) -> None:
        self._write(f"{type_name(value)} {{\n")
        prefix = self.indent(depth + 1)
        for member in iter_members(value):
            try:
                member_value = read_member(value, member)
            except MemberAccessError as exc:
                logger.warning(f"{exc}: {exc.__cause__!r}")
                self._write(prefix + ACCESS_ERROR_TEXT + "\n")
                continue
            self._write(f"{prefix}{member.name}: ")
            self._print(member_value, depth + 1)
        self._write(self.indent(depth) + "}\n")


def format_object(
    value: Any,
    start_depth: int = 0,
    visited: Optional[VisitedSet] = None,
) -> str:
    """
    Return the rendering of value as text, without printing it.

    The first line is prefixed with the indent for start_depth.

    Args:
        value: Any object
        start_depth: Depth of the root value (default 0)
        visited: VisitedSet to continue from; a new one if None

    Returns:
        The full multi-line text, each line terminated by a newline
    """
    buf = io.StringIO()
    printer = ObjectPrinter(file=buf, visited=visited)
    if start_depth < 0:
        if handle_error(
            f"start_depth must be >= 0, got {start_depth}",
            exception_class=ValueError,
        ):
            start_depth = 0
    logger.debug(f"Printing {type_name(value)} at depth {start_depth}")
    buf.write(printer.indent(start_depth))
    printer.print_object(value, start_depth)
    logger.debug(f"Printed {type_name(value)}, {len(printer.visited)} visited")
    return buf.getvalue()


def print_object(
    value: Any,
    start_depth: int = 0,
    visited: Optional[VisitedSet] = None,
    file: Optional[TextIO] = None,
) -> str:
    """
    Print the rendering of value and return the printed text.

    Args:
        value: Any object
        start_depth: Depth of the root value (default 0)
        visited: VisitedSet to continue from, e.g. one owned by a parent
            ObjectPrinter; a new one if None
        file: Text stream to write to (default: sys.stdout)

    Returns:
        The text that was written

    Example:
        >>> print_object({"a": 1})
        Map[1]:
          Key: a
          Value: 1
    """
    text = format_object(value, start_depth, visited)
    if file is None:
        file = sys.stdout
    file.write(text)
    return text


class PrintableMixin:
    """
    Mixin giving a class a print_current_object() method.

    Example:
        class Config(PrintableMixin):
            def __init__(self):
                self.name = "demo"

        Config().print_current_object()
    """

    def print_current_object(self, file: Optional[TextIO] = None) -> str:
        """Print this object from depth 0 with a fresh VisitedSet."""
        return print_object(self, 0, VisitedSet(), file=file)
