"""
Identity-keyed set of values already entered during a traversal.

Copyright (c) 2026 graphdump contributors

MIT License
"""

from typing import Any, Dict


class VisitedSet:
    """
    Tracks values by object identity (id()), never by equality.

    Two equal but distinct instances are separate members; two references
    to the same instance are one member. Unhashable values work since only
    id() is used as the key.

    The set holds a reference to every value it contains, so an id() cannot
    be reused by another object while the set is alive.

    Example:
        >>> visited = VisitedSet()
        >>> a, b = [1], [1]
        >>> visited.add(a)
        >>> visited.contains(a), visited.contains(b)
        (True, False)
    """

    def __init__(self):
        self._entries: Dict[int, Any] = {}

    def contains(self, value: Any) -> bool:
        """Returns True if this exact instance has been added."""
        return id(value) in self._entries

    def add(self, value: Any) -> None:
        """Add value by identity. Adding the same instance twice is a no-op."""
        self._entries[id(value)] = value

    def clear(self) -> None:
        """Forget every entry."""
        self._entries.clear()

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"VisitedSet(size={len(self._entries)})"
