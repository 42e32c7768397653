# enumbitset

Compact set types built from your `enum.Enum` classes.

A bitset built over an enum behaves much like a `set` of that enum's members,
but it stores its contents as a single integer: bit *N* is set when the
*N*-th member (in definition order) is present. Membership tests, inserts,
removals and all set algebra are bit operations on that integer, and the
integer form stays the same as long as the order of the members does not
change.

## Installation

```bash
pip install enumbitset
```

## Quick start

Declare a set type by subclassing `EnumBitset` with the enum as `base`:

```python
import enum

from enumbitset.bitset import EnumBitset


class IpAddrKind(enum.Enum):
    V4 = enum.auto()
    V6 = enum.auto()


class IpAddrKindSet(EnumBitset, base=IpAddrKind):
    """Set of address kinds."""


s = IpAddrKindSet.empty()
assert IpAddrKind.V4 not in s
assert len(s) == 0

s.insert(IpAddrKind.V6)
assert s.contains(IpAddrKind.V6)

both = IpAddrKind.V4 | IpAddrKind.V6     # members combine into a set
assert both.is_all()
assert both == IpAddrKindSet.all()

only_v6 = both - IpAddrKind.V4
assert not only_v6.is_all()
assert list(only_v6) == [IpAddrKind.V6]

assert repr(both) == "IpAddrKindSet{V4, V6}"
```

## What a set offers

* Construction: `IpAddrKindSet()` (empty), `IpAddrKindSet(member)`,
  `IpAddrKindSet(iterable_of_members)` (duplicates are ignored),
  `empty()` and `all()`.
* Queries: `len(s)`, `member in s` (false for anything that is not a member),
  `contains(member)` (raises `TypeError` for a non-member), `is_empty()`,
  `is_all()`.
* Mutation: `insert`, `remove` (removing an absent member does nothing) and
  `extend` (adds nothing if any item is not a member).
* Algebra: `union`, `intersection`, `difference`, `symmetric_difference`,
  `complement`, and the predicates `is_subset_of`, `is_superset_of`,
  `is_disjoint`, `is_complementary`. These take another set of the same type
  and raise `TypeError` otherwise.
* Operators: `+` and `|` (union, with a set or a single member), `-`
  (difference, with a set or a single member), `&` (intersection), `^`
  (symmetric difference) and `~` (complement), plus their in-place forms.
* Iteration always yields members in definition order, regardless of the
  order they were inserted; `collect(factory)` passes them to any callable
  (`list` by default), for example `s.collect(frozenset)`.
* Sets compare equal when they are over the same enum and hold the same
  members. They are mutable and therefore not hashable.

## Integer representation

Every set maps to an integer; the first member is the least-significant bit.

```python
value = both.to_repr()
assert value == 0b11
assert IpAddrKindSet.is_valid_repr(value)
assert IpAddrKindSet.from_repr(value) == both
```

* `from_repr(value)` accepts only integers whose set bits all correspond to
  members, and raises `ValueError` otherwise.
* `from_repr_masked(value)` silently drops bits that do not map to a member.
* `from_repr_discarded(value)` returns the masked set together with the
  dropped bits.
* `from_repr_unchecked(value)` trusts the caller; bits beyond the last member
  leave the set inconsistent (they are counted by `len`, and iteration fails
  on them).

All of these raise `TypeError` for a non-integer and `OverflowError` for a
value that is negative or does not fit the backing width.

The backing width (`IpAddrKindSet.WIDTH`) is by default the smallest of 8,
16, 32, 64 or 128 bits that fits the number of members; the `repr` class
keyword (`"u8"`, `"u16"`, `"u32"`, `"u64"`, `"u128"`, or the bare number)
forces a wider one. Enums with more than 128 members, with no members, or a
width narrower than the number of members are rejected with
`enumbitset.config.BitsetConfigError`.

## Class options

Options are given as keywords next to `base`:

```python
class CodeCommentSet(EnumBitset, base=CodeComment, repr="u32", base_ops=False, serde="ser"):
    pass
```

* `repr` – backing width, as above.
* `base_ops` – by default, `+` and `|` are added to the enum's members so
  that `member | member` builds a set (of the most recently declared set type
  over that enum). With `base_ops=False` the enum is left untouched; the
  operators on the set type itself stay available.
* `serde` – `True`/`"both"`, `False`/`"none"`, `"ser"`/`"serialize"` or
  `"de"`/`"deserialize"`: which directions of serialization the set type
  supports.
* `debug` – recorded in the type's `CONFIG`; it does not change `repr()`.

The validated options are available as `CONFIG`
(an `enumbitset.config.BitsetConfig`), along with `BASE`, `VARIANTS`, `MASK`,
`WIDTH` and `SERDE`.

## Serialization

A set serializes to a list of member names, in definition order:

```python
from enumbitset.serialization import deserialize, dumps, loads, serialize

assert serialize(both) == ["V4", "V6"]
assert dumps(both) == '["V4","V6"]'
assert loads(IpAddrKindSet, '["V6"]') == only_v6
assert deserialize(IpAddrKindSet, []) == IpAddrKindSet.empty()
```

Unknown names, non-string entries, non-list input or malformed JSON raise
`DeserializationError`. Serializing or deserializing a type whose `serde`
option excludes that direction raises `TypeError`.

## What the package does not do

Set types are declared only with a `class` statement as shown above; there is
no function that builds one from an enum in a single call, and no ready-made
example enum ships with the package.

## Running the tests

```bash
pip install -e ".[test]"
pytest
```