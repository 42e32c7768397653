"""Operator overloads shared by bitset types and their base enumerations."""

from __future__ import annotations

import enum
from typing import Any, ClassVar

__all__ = ["BitsetOperators", "install_base_ops"]


class BitsetOperators:
    """Mixin giving a bitset type its set operators.

    A class using it provides the class attributes ``BASE`` (the enumeration),
    ``VARIANTS`` (its members in declaration order) and ``MASK`` (one bit per
    variant), and stores its bits in the instance attribute ``_items``.

    ``+`` and ``|`` add a set or a single variant, ``-`` removes a set or a
    variant, ``&`` and ``^`` combine two sets and ``~`` gives the complement.
    In-place forms modify the set itself.
    """

    __slots__ = ()

    BASE: ClassVar[type[enum.Enum]]
    VARIANTS: ClassVar[tuple[enum.Enum, ...]]
    MASK: ClassVar[int]
    _items: int

    @classmethod
    def _new(cls, items: int) -> Any:
        """Build an instance holding ``items`` without any validation."""
        instance = object.__new__(cls)
        instance._items = items
        return instance

    @classmethod
    def _bit_of(cls, item: Any) -> int:
        """Return the bit of a base variant; raise TypeError for anything else."""
        if not isinstance(item, cls.BASE):
            raise TypeError(
                f"expected a {cls.BASE.__name__} variant, not {type(item).__name__}"
            )
        table = cls.__dict__.get("_BIT_TABLE")
        if table is None:
            table = {variant: 1 << index for index, variant in enumerate(cls.VARIANTS)}
            cls._BIT_TABLE = table
        return table[item]

    def _operand(self, other: Any, allow_variant: bool) -> int | None:
        if isinstance(other, type(self)):
            return other._items
        if allow_variant and isinstance(other, type(self).BASE):
            return type(self)._bit_of(other)
        return None

    def __add__(self, other: Any) -> Any:
        bits = self._operand(other, allow_variant=True)
        if bits is None:
            return NotImplemented
        return self._new(self._items | bits)

    def __iadd__(self, other: Any) -> Any:
        bits = self._operand(other, allow_variant=True)
        if bits is None:
            return NotImplemented
        self._items |= bits
        return self

    def __sub__(self, other: Any) -> Any:
        bits = self._operand(other, allow_variant=True)
        if bits is None:
            return NotImplemented
        return self._new(self._items & ~bits)

    def __isub__(self, other: Any) -> Any:
        bits = self._operand(other, allow_variant=True)
        if bits is None:
            return NotImplemented
        self._items &= ~bits
        return self

    def __and__(self, other: Any) -> Any:
        bits = self._operand(other, allow_variant=False)
        if bits is None:
            return NotImplemented
        return self._new(self._items & bits)

    def __iand__(self, other: Any) -> Any:
        bits = self._operand(other, allow_variant=False)
        if bits is None:
            return NotImplemented
        self._items &= bits
        return self

    def __or__(self, other: Any) -> Any:
        bits = self._operand(other, allow_variant=True)
        if bits is None:
            return NotImplemented
        return self._new(self._items | bits)

    def __ior__(self, other: Any) -> Any:
        bits = self._operand(other, allow_variant=True)
        if bits is None:
            return NotImplemented
        self._items |= bits
        return self

    def __xor__(self, other: Any) -> Any:
        bits = self._operand(other, allow_variant=False)
        if bits is None:
            return NotImplemented
        return self._new(self._items ^ bits)

    def __ixor__(self, other: Any) -> Any:
        bits = self._operand(other, allow_variant=False)
        if bits is None:
            return NotImplemented
        self._items ^= bits
        return self

    def __invert__(self) -> Any:
        return self._new(~self._items & type(self).MASK)


def install_base_ops(enum_cls: type[enum.Enum], set_cls: type[BitsetOperators]) -> None:
    """Make ``variant + variant`` and ``variant | variant`` build a ``set_cls``."""
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, enum.Enum)):
        raise TypeError("base operators can only be installed on an enumeration")
    if not (isinstance(set_cls, type) and issubclass(set_cls, BitsetOperators)):
        raise TypeError("the set type must provide the bitset operators")
    if set_cls.BASE is not enum_cls:
        raise TypeError(
            f"{set_cls.__name__} is a set of {set_cls.BASE.__name__}, "
            f"not of {enum_cls.__name__}"
        )

    def combine(left: enum.Enum, right: Any) -> Any:
        if not isinstance(right, enum_cls):
            return NotImplemented
        return set_cls._new(set_cls._bit_of(left) | set_cls._bit_of(right))

    enum_cls.__add__ = combine
    enum_cls.__or__ = combine