"""Configuration of a bitset type derived from an enumeration."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

__all__ = [
    "BitsetConfigError",
    "SerdeMode",
    "BitsetConfig",
    "mask",
    "inner_width",
    "parse_repr",
    "build_config",
]

INVALID_SERDE_MSG = (
    'Invalid value for serde. Valid values are: `true`, `false`, "de", "ser", '
    '"both" (same as `true`), and "none" (same as `false`).'
)
ONLY_ENUM_MSG = "EnumBitset can only be derived for enums"
NO_VARIANTS_MSG = "EnumBitset cannot be derived for enums with no variants"
TOO_MANY_VARIANTS_MSG = "Too many variants! At most 128 are supported."
INVALID_REPR_MSG = (
    "Invalid bitset representation: must be a primitive unsigned integer "
    "(u8, u16, u32, u64, u128)."
)
INVALID_NAME_MSG = "Invalid bitset name: must be a valid identifier."

_WIDTHS = (8, 16, 32, 64, 128)


class BitsetConfigError(ValueError):
    """Raised when a bitset type cannot be derived with the given options."""


class SerdeMode(enum.Enum):
    """Which directions of (de)serialization a bitset type supports."""

    BOTH = "both"
    SER = "ser"
    DE = "de"
    NONE = "none"

    @property
    def ser(self) -> bool:
        return self in (SerdeMode.BOTH, SerdeMode.SER)

    @property
    def de(self) -> bool:
        return self in (SerdeMode.BOTH, SerdeMode.DE)

    @classmethod
    def parse(cls, value: Any) -> SerdeMode:
        """Interpret a serde option: a bool, one of the accepted strings, or None (both)."""
        if isinstance(value, cls):
            return value
        if value is None or value is True:
            return cls.BOTH
        if value is False:
            return cls.NONE
        if isinstance(value, str):
            try:
                return _SERDE_NAMES[value]
            except KeyError:
                raise BitsetConfigError(INVALID_SERDE_MSG) from None
        raise BitsetConfigError(INVALID_SERDE_MSG)


_SERDE_NAMES = {
    "de": SerdeMode.DE,
    "deserialize": SerdeMode.DE,
    "ser": SerdeMode.SER,
    "serialize": SerdeMode.SER,
    "both": SerdeMode.BOTH,
    "none": SerdeMode.NONE,
}


def mask(length: int) -> int:
    """Return an integer whose lowest ``length`` bits are all one."""
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise BitsetConfigError(f"Cannot build a mask of {length!r} bits.")
    return (1 << length) - 1


def inner_width(n_variants: int) -> int:
    """Return the smallest unsigned integer width able to hold ``n_variants`` bits."""
    if n_variants < 0:
        raise BitsetConfigError(f"Invalid number of variants: {n_variants}.")
    for width in _WIDTHS:
        if n_variants <= width:
            return width
    raise BitsetConfigError(TOO_MANY_VARIANTS_MSG)


def parse_repr(value: Any, n_variants: int, base_name: str) -> int:
    """Parse a representation such as ``"u16"`` (or ``16``) and return its bit width."""
    if isinstance(value, bool):
        raise BitsetConfigError(INVALID_REPR_MSG)
    if isinstance(value, int):
        width = value
    elif isinstance(value, str):
        if not value.startswith("u"):
            raise BitsetConfigError(INVALID_REPR_MSG)
        digits = value[1:]
        if not digits.isdigit():
            raise BitsetConfigError(INVALID_REPR_MSG)
        width = int(digits)
    else:
        raise BitsetConfigError(INVALID_REPR_MSG)

    if width not in _WIDTHS:
        raise BitsetConfigError(INVALID_REPR_MSG)

    if width < n_variants:
        raise BitsetConfigError(
            f"Invalid bitset representation: {base_name} has {n_variants} variants, "
            f"but the requested bitset representation is only {width} bits wide."
        )
    return width


@dataclass(frozen=True)
class BitsetConfig:
    """Everything needed to build a bitset type over an enumeration."""

    base: type[enum.Enum]
    name: str
    iter_name: str
    width: int
    variants: tuple[enum.Enum, ...]
    debug: bool = True
    base_ops: bool = True
    serde: SerdeMode = SerdeMode.BOTH

    @property
    def length(self) -> int:
        return len(self.variants)

    @property
    def mask(self) -> int:
        return mask(self.length)


def build_config(
    enum_cls: Any,
    name: str | None = None,
    repr: Any = None,
    debug: bool = True,
    base_ops: bool = True,
    serde: Any = True,
) -> BitsetConfig:
    """Validate the options for deriving a bitset from ``enum_cls``."""
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, enum.Enum)):
        raise BitsetConfigError(ONLY_ENUM_MSG)

    variants = tuple(enum_cls)
    if not variants:
        raise BitsetConfigError(NO_VARIANTS_MSG)

    width = inner_width(len(variants))

    if name is None:
        name = f"{enum_cls.__name__}Set"
    elif not isinstance(name, str) or not name.isidentifier():
        raise BitsetConfigError(INVALID_NAME_MSG)

    if repr is not None:
        width = parse_repr(repr, len(variants), enum_cls.__name__)

    return BitsetConfig(
        base=enum_cls,
        name=name,
        iter_name=f"{name}Iter",
        width=width,
        variants=variants,
        debug=bool(debug),
        base_ops=bool(base_ops),
        serde=SerdeMode.parse(serde),
    )