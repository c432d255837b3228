"""
Member enumeration and reading for composite values.

Only instance-level members are listed: dataclass fields, __slots__
entries and the instance __dict__. Class attributes, methods and
properties are never included.

Copyright (c) 2026 graphdump contributors

MIT License
"""

from __future__ import annotations
import dataclasses
from typing import Any, Iterator, NamedTuple

from graphdump.exceptions import MemberAccessError
from graphdump.shape import type_name

# Slot names that never hold member values.
_SPECIAL_SLOTS = frozenset({"__dict__", "__weakref__"})


class Member(NamedTuple):
    """A member as printed (name) and as read from the object (attr)."""
    name: str
    attr: str


def _mangle(cls: type, name: str) -> str:
    # Private slots are stored under the mangled name, e.g. _Point__x
    if name.startswith("__") and not name.endswith("__"):
        return f"_{cls.__name__.lstrip('_')}{name}"
    return name


def _demangle(cls: type, attr: str) -> str:
    # _Point__x -> __x when some class in the MRO owns the private name
    for klass in cls.__mro__:
        owner = klass.__name__.lstrip("_")
        if not owner:
            continue
        prefix = f"_{owner}__"
        if attr.startswith(prefix) and not attr.endswith("__"):
            return "__" + attr[len(prefix):]
    return attr


def _slot_members(cls: type) -> Iterator[Member]:
    # Base classes first so members appear in declaration order
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in _SPECIAL_SLOTS:
                continue
            yield Member(slot, _mangle(klass, slot))


def _instance_dict(value: Any) -> dict:
    try:
        instance_dict = object.__getattribute__(value, "__dict__")
    except (AttributeError, TypeError):
        return {}
    return instance_dict if instance_dict is not None else {}


def iter_members(value: Any) -> Iterator[Member]:
    """
    Yield the instance members of value in declaration order.

    Dataclass fields come first (in field order), then __slots__ entries
    (base classes first), then remaining keys of the instance __dict__ in
    insertion order. Each attribute is yielded at most once; private
    names are shown unmangled (__token, not _Owner__token).

    Args:
        value: A composite value

    Yields:
        Member tuples
    """
    seen = set()

    def fresh(member: Member) -> bool:
        if member.attr in seen:
            return False
        seen.add(member.attr)
        return True

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        for field in dataclasses.fields(value):
            member = Member(field.name, field.name)
            if fresh(member):
                yield member

    for member in _slot_members(type(value)):
        if fresh(member):
            yield member

    for key in list(_instance_dict(value)):
        attr = str(key)
        if attr in _SPECIAL_SLOTS:
            continue
        member = Member(_demangle(type(value), attr), attr)
        if fresh(member):
            yield member


def read_member(value: Any, member: Member) -> Any:
    """
    Read the current value of a member.

    Args:
        value: The composite owning the member
        member: A Member produced by iter_members()

    Returns:
        The member's value

    Raises:
        MemberAccessError: If reading fails for any reason (unset slot,
            a raising __getattribute__, ...). The original exception is
            chained as __cause__.
    """
    try:
        return getattr(value, member.attr)
    except Exception as exc:
        raise MemberAccessError(type_name(value), member.name) from exc
