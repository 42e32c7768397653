"""The base class of bitset types built over an enumeration."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from typing import Any, ClassVar, TypeVar

from enumbitset.config import BitsetConfig, BitsetConfigError, SerdeMode, build_config
from enumbitset.iteration import BitsetIterator
from enumbitset.ops import BitsetOperators, install_base_ops

__all__ = ["EnumBitset"]

R = TypeVar("R")

_OPTION_NAMES = ("debug", "base_ops", "serde")


class EnumBitset(BitsetOperators):
    """A set of variants of an enumeration, stored as the bits of one integer.

    Subclass it with the enumeration as the ``base`` keyword::

        class WeekdaySet(EnumBitset, base=Weekday):
            pass

    The N-th variant of the enumeration is the N-th least significant bit.
    ``repr`` picks the integer width (``"u8"`` ... ``"u128"``); by default the
    smallest one that holds every variant is used. The keywords ``debug``,
    ``base_ops`` and ``serde`` are passed on to the configuration.
    """

    __slots__ = ("_items",)

    CONFIG: ClassVar[BitsetConfig]
    WIDTH: ClassVar[int]
    SERDE: ClassVar[SerdeMode]

    def __init_subclass__(cls, base: Any = None, repr: Any = None, **kwargs: Any) -> None:
        options = {key: kwargs.pop(key) for key in _OPTION_NAMES if key in kwargs}
        super().__init_subclass__(**kwargs)
        if base is None:
            if repr is not None or options:
                raise BitsetConfigError("bitset options require a base enumeration")
            return

        config = build_config(base, name=cls.__name__, repr=repr, **options)
        cls.CONFIG = config
        cls.BASE = config.base
        cls.VARIANTS = config.variants
        cls.MASK = config.mask
        cls.WIDTH = config.width
        cls.SERDE = config.serde
        cls._BIT_TABLE = {variant: 1 << index for index, variant in enumerate(config.variants)}
        if config.base_ops:
            install_base_ops(config.base, cls)

    def __init__(self, items: Any = ()) -> None:
        """Build a set from one variant or an iterable of variants; duplicates are ignored."""
        cls = type(self)
        cls._require_config()
        if isinstance(items, cls.BASE):
            self._items = cls._bit_of(items)
            return
        bits = 0
        for item in items:
            bits |= cls._bit_of(item)
        self._items = bits

    # -- construction -----------------------------------------------------

    @classmethod
    def _require_config(cls) -> None:
        if "BASE" not in dir(cls):
            raise TypeError(f"{cls.__name__} is not bound to an enumeration")

    @classmethod
    def _check_repr(cls, value: Any) -> int:
        cls._require_config()
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"representation must be an int, not {type(value).__name__}")
        if value < 0 or value.bit_length() > cls.WIDTH:
            raise OverflowError(f"{value} does not fit in an unsigned {cls.WIDTH}-bit integer")
        return value

    @classmethod
    def empty(cls) -> Any:
        """Return a set with no variants."""
        cls._require_config()
        return cls._new(0)

    @classmethod
    def all(cls) -> Any:
        """Return a set holding every variant of the enumeration."""
        cls._require_config()
        return cls._new(cls.MASK)

    @classmethod
    def from_repr(cls, value: int) -> Any:
        """Build a set from its integer form; raise ValueError if a bit maps to no variant."""
        value = cls._check_repr(value)
        if value & cls.MASK != value:
            raise ValueError(
                f"{value:#x} is not a valid representation of {cls.__name__}"
            )
        return cls._new(value)

    @classmethod
    def is_valid_repr(cls, value: int) -> bool:
        """Return True if every set bit of ``value`` maps to a variant."""
        value = cls._check_repr(value)
        return value & cls.MASK == value

    @classmethod
    def from_repr_unchecked(cls, value: int) -> Any:
        """Build a set from its integer form without checking the unused bits.

        Bits beyond the last variant break the set: counts include them and
        iteration fails on them.
        """
        return cls._new(cls._check_repr(value))

    @classmethod
    def from_repr_masked(cls, value: int) -> Any:
        """Build a set from its integer form, silently dropping bits that map to no variant."""
        return cls._new(cls._check_repr(value) & cls.MASK)

    @classmethod
    def from_repr_discarded(cls, value: int) -> tuple[Any, int]:
        """Build a set from its integer form; also return the bits that were dropped."""
        value = cls._check_repr(value)
        return cls._new(value & cls.MASK), value & ~cls.MASK

    def to_repr(self) -> int:
        """Return the integer form of the set."""
        return self._items

    # -- queries ----------------------------------------------------------

    def is_empty(self) -> bool:
        return self._items == 0

    def is_all(self) -> bool:
        return self._items == type(self).MASK

    def __len__(self) -> int:
        return self._items.bit_count()

    def __contains__(self, item: Any) -> bool:
        cls = type(self)
        if not isinstance(item, cls.BASE):
            return False
        return bool(self._items & cls._bit_of(item))

    def contains(self, item: Any) -> bool:
        """Return True if ``item`` is in the set; raise TypeError for a non-variant."""
        return bool(self._items & type(self)._bit_of(item))

    # -- set algebra ------------------------------------------------------

    def _other_bits(self, other: Any) -> int:
        if not isinstance(other, type(self)):
            raise TypeError(
                f"expected a {type(self).__name__}, not {type(other).__name__}"
            )
        return other._items

    def union(self, other: Any) -> Any:
        return self._new(self._items | self._other_bits(other))

    def intersection(self, other: Any) -> Any:
        return self._new(self._items & self._other_bits(other))

    def difference(self, other: Any) -> Any:
        return self._new(self._items & ~self._other_bits(other))

    def symmetric_difference(self, other: Any) -> Any:
        return self._new(self._items ^ self._other_bits(other))

    def complement(self) -> Any:
        return self._new(type(self).MASK & ~self._items)

    def is_subset_of(self, other: Any) -> bool:
        return self._items & self._other_bits(other) == self._items

    def is_superset_of(self, other: Any) -> bool:
        bits = self._other_bits(other)
        return self._items & bits == bits

    def is_disjoint(self, other: Any) -> bool:
        return self._items & self._other_bits(other) == 0

    def is_complementary(self, other: Any) -> bool:
        """Return True if the two sets share nothing and together hold every variant."""
        bits = self._other_bits(other)
        return self._items & bits == 0 and self._items | bits == type(self).MASK

    # -- mutation ---------------------------------------------------------

    def insert(self, item: Any) -> None:
        self._items |= type(self)._bit_of(item)

    def remove(self, item: Any) -> None:
        """Remove ``item``; removing a variant that is absent does nothing."""
        self._items &= ~type(self)._bit_of(item)

    def extend(self, items: Iterable[Any]) -> None:
        """Add every variant of ``items``; nothing is added if one is not a variant."""
        cls = type(self)
        bits = 0
        for item in items:
            bits |= cls._bit_of(item)
        self._items |= bits

    # -- protocol ---------------------------------------------------------

    def __iter__(self) -> BitsetIterator[enum.Enum]:
        """Iterate over the variants in declaration order."""
        return BitsetIterator(self._items, type(self).VARIANTS)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, type(self)) and not isinstance(self, type(other)):
            return NotImplemented
        if type(self).__dict__.get("BASE", None) is not None or True:
            return type(self).BASE is type(other).BASE and self._items == other._items
        return False

    __hash__ = None  # type: ignore[assignment]

    def collect(self, factory: Callable[[Iterable[enum.Enum]], R] = list) -> R:  # type: ignore[assignment]
        """Pass the variants of the set to ``factory`` (``list`` by default)."""
        return factory(iter(self))

    def __repr__(self) -> str:
        names = ", ".join(
            variant.name
            for index, variant in enumerate(type(self).VARIANTS)
            if self._items >> index & 1
        )
        return f"{type(self).__name__}{{{names}}}"