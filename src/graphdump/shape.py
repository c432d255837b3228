"""
Shape classification for values being printed.

Every value is assigned exactly one Shape before it is rendered. The
checks run in a fixed priority order and the first match wins.

Copyright (c) 2026 graphdump contributors

MIT License
"""

from __future__ import annotations
import array
import numbers
from collections.abc import Collection, Mapping
from enum import Enum
from typing import Any

import numpy as np


class Shape(Enum):
    """Traversal category of a value."""
    NULL = "null"             # None
    SCALAR = "scalar"         # Printed inline with str()
    ARRAY = "array"           # numpy.ndarray / array.array
    SEQUENCE = "sequence"     # Any other sized, iterable collection
    MAPPING = "mapping"       # Key -> value containers
    COMPOSITE = "composite"   # Records with named members


# Text and raw-byte types are leaves even though they are collections.
_TEXT_TYPES = (str, bytes, bytearray)

_ARRAY_TYPES = (np.ndarray, array.array)

_CONTAINER_SHAPES = frozenset({Shape.ARRAY, Shape.SEQUENCE, Shape.MAPPING})


def is_scalar(value: Any) -> bool:
    """
    Returns True if value has no internal structure worth traversing.

    Covers bool, every numbers.Number (int, float, complex, Decimal,
    Fraction), text and byte strings, numpy scalars (including numpy.bool_,
    which is not a numbers.Number), zero-dimensional arrays, Enum members
    and classes (printed by name, never walked as a namespace).
    """
    if isinstance(value, (bool, numbers.Number, np.generic, Enum, type)):
        return True
    if isinstance(value, _TEXT_TYPES):
        return True
    return isinstance(value, np.ndarray) and value.ndim == 0


def classify(value: Any) -> Shape:
    """
    Return the Shape of value.

    Priority order: NULL, SCALAR, ARRAY, SEQUENCE, MAPPING, COMPOSITE.
    Mappings are collections too, so SEQUENCE explicitly excludes them.

    Args:
        value: Any object, including None

    Returns:
        The matching Shape
    """
    if value is None:
        return Shape.NULL
    if is_scalar(value):
        return Shape.SCALAR
    if isinstance(value, _ARRAY_TYPES):
        return Shape.ARRAY
    if isinstance(value, Collection) and not isinstance(value, Mapping):
        return Shape.SEQUENCE
    if isinstance(value, Mapping):
        return Shape.MAPPING
    return Shape.COMPOSITE


def is_container(shape: Shape) -> bool:
    """True for ARRAY, SEQUENCE and MAPPING."""
    return shape in _CONTAINER_SHAPES


def type_name(value: Any) -> str:
    """Simple (unqualified) class name of value."""
    return type(value).__name__
