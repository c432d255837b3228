"""
Tests for VisitedSet.

Copyright (c) 2026 graphdump contributors

MIT License
"""

from graphdump import VisitedSet


class Box:
    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Box) and other.value == self.value

    def __hash__(self):
        return hash(self.value)


class TestVisitedSet:
    """Test identity-based membership."""

    def test_empty(self):
        visited = VisitedSet()
        assert len(visited) == 0
        assert visited.contains(Box(1)) is False

    def test_add_and_contains(self):
        visited = VisitedSet()
        box = Box(1)
        visited.add(box)
        assert visited.contains(box) is True
        assert box in visited

    def test_equal_instances_are_distinct(self):
        """Equal but separate instances must not collide."""
        visited = VisitedSet()
        first, second = Box(1), Box(1)
        assert first == second
        visited.add(first)
        assert second not in visited

    def test_same_instance_added_twice(self):
        visited = VisitedSet()
        box = Box(1)
        visited.add(box)
        visited.add(box)
        assert len(visited) == 1

    def test_unhashable_values(self):
        visited = VisitedSet()
        items = [1, 2]
        visited.add(items)
        assert items in visited
        assert [1, 2] not in visited

    def test_clear(self):
        visited = VisitedSet()
        box = Box(1)
        visited.add(box)
        visited.clear()
        assert box not in visited
        assert len(visited) == 0

    def test_repr(self):
        visited = VisitedSet()
        visited.add(Box(1))
        assert "size=1" in repr(visited)
