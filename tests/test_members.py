"""
Tests for composite member enumeration and reading.

Copyright (c) 2026 graphdump contributors

MIT License
"""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest
from graphdump import Member, MemberAccessError, iter_members, read_member


class Plain:
    LIMIT = 10

    def __init__(self):
        self.first = 1
        self.second = 2

    @property
    def computed(self):
        return self.first + self.second

    def method(self):
        return None


@dataclass
class Settings:
    counter: ClassVar[int] = 0
    name: str = "x"
    size: int = 3
    tags: list = field(default_factory=list)


@dataclass(slots=True)
class SlottedSettings:
    name: str = "x"
    size: int = 3


class Base:
    __slots__ = ("a",)


class Child(Base):
    __slots__ = ("b",)

    def __init__(self):
        self.a = 1
        self.b = 2


class Secret:
    __slots__ = ("__token",)

    def __init__(self):
        self.__token = "abc"


class Mixed:
    __slots__ = ("slot", "__dict__")

    def __init__(self):
        self.slot = 1
        self.extra = 2


class Guarded:
    def __init__(self):
        self.open = 1
        self.secret = 2

    def __getattribute__(self, name):
        if name == "secret":
            raise PermissionError("denied")
        return object.__getattribute__(self, name)


class Private:
    def __init__(self):
        self.__secret = 1
        self.visible = 2


def names(value):
    return [member.name for member in iter_members(value)]


class TestIterMembers:
    """Test which members are listed, and in which order."""

    def test_instance_attributes_in_insertion_order(self):
        assert names(Plain()) == ["first", "second"]

    def test_class_attributes_excluded(self):
        members = names(Plain())
        assert "LIMIT" not in members
        assert "computed" not in members
        assert "method" not in members

    def test_dataclass_field_order_without_classvar(self):
        assert names(Settings()) == ["name", "size", "tags"]

    def test_slotted_dataclass(self):
        assert names(SlottedSettings()) == ["name", "size"]

    def test_slots_base_class_first(self):
        assert names(Child()) == ["a", "b"]

    def test_private_slot_is_mangled_for_reading(self):
        members = list(iter_members(Secret()))
        assert members == [Member("__token", "_Secret__token")]

    def test_private_dict_attribute_is_demangled(self):
        members = list(iter_members(Private()))
        assert members == [
            Member("__secret", "_Private__secret"),
            Member("visible", "visible"),
        ]
        assert read_member(Private(), members[0]) == 1

    def test_special_dict_keys_skipped(self):
        plain = Plain()
        vars(plain)["__weakref__"] = "stale"
        vars(plain)["__dict__"] = "stale"
        assert names(plain) == ["first", "second"]

    def test_slots_and_dict_combined(self):
        assert names(Mixed()) == ["slot", "extra"]

    def test_unset_slot_still_listed(self):
        assert names(Base()) == ["a"]

    def test_object_without_members(self):
        assert names(object()) == []


class TestReadMember:
    """Test reading member values."""

    def test_read_attribute(self):
        assert read_member(Plain(), Member("first", "first")) == 1

    def test_read_mangled_slot(self):
        assert read_member(Secret(), Member("__token", "_Secret__token")) == "abc"

    def test_unset_slot_raises(self):
        with pytest.raises(MemberAccessError) as info:
            read_member(Base(), Member("a", "a"))
        assert isinstance(info.value.__cause__, AttributeError)
        assert info.value.owner == "Base"
        assert info.value.name == "a"

    def test_raising_getattribute(self):
        with pytest.raises(MemberAccessError, match="secret") as info:
            read_member(Guarded(), Member("secret", "secret"))
        assert isinstance(info.value.__cause__, PermissionError)

    def test_access_error_is_attribute_error(self):
        with pytest.raises(AttributeError):
            read_member(Base(), Member("a", "a"))
