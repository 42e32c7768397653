"""Serialization of bitsets as lists of variant names."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from enumbitset.config import SerdeMode

__all__ = ["DeserializationError", "serialize", "deserialize", "dumps", "loads"]


class DeserializationError(ValueError):
    """Raised when data does not describe a valid bitset."""


def _mode(set_cls: type) -> SerdeMode:
    return getattr(set_cls, "SERDE", SerdeMode.BOTH)


def serialize(bitset: Any) -> list[str]:
    """Return the names of the variants in ``bitset``, in declaration order."""
    set_cls = type(bitset)
    if not _mode(set_cls).ser:
        raise TypeError(f"{set_cls.__name__} does not support serialization")
    return [variant.name for variant in bitset]


def deserialize(set_cls: type, data: Any) -> Any:
    """Build a ``set_cls`` instance from a list of variant names."""
    if not _mode(set_cls).de:
        raise TypeError(f"{set_cls.__name__} does not support deserialization")
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise DeserializationError(
            f"invalid type: {type(data).__name__}, expected a list {set_cls.__name__} of variants"
        )

    by_name = {variant.name: variant for variant in set_cls.VARIANTS}
    items = 0
    for entry in data:
        if not isinstance(entry, str):
            raise DeserializationError(
                f"invalid type: {type(entry).__name__}, expected a variant name"
            )
        try:
            variant = by_name[entry]
        except KeyError:
            expected = ", ".join(f"`{name}`" for name in by_name)
            raise DeserializationError(
                f"unknown variant `{entry}`, expected one of {expected}"
            ) from None
        items |= set_cls._bit_of(variant)
    return set_cls._new(items)


def dumps(bitset: Any) -> str:
    """Serialize ``bitset`` to compact JSON text."""
    return json.dumps(serialize(bitset), separators=(",", ":"))


def loads(set_cls: type, text: str | bytes) -> Any:
    """Build a ``set_cls`` instance from JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as error:
        raise DeserializationError(str(error)) from error
    return deserialize(set_cls, data)