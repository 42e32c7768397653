import enum
from functools import reduce

import pytest

from enumbitset.config import mask
from enumbitset.ops import BitsetOperators, install_base_ops


class Month(enum.Enum):
    Jan = enum.auto()
    Feb = enum.auto()
    Mar = enum.auto()
    Apr = enum.auto()
    May = enum.auto()
    Jun = enum.auto()
    Jul = enum.auto()
    Aug = enum.auto()
    Sep = enum.auto()
    Oct = enum.auto()
    Nov = enum.auto()
    Dec = enum.auto()


class MonthSet(BitsetOperators):
    __slots__ = ("_items",)
    BASE = Month
    VARIANTS = tuple(Month)
    MASK = mask(len(Month))

    @classmethod
    def from_array(cls, items):
        return cls._new(reduce(lambda acc, item: acc | cls._bit_of(item), items, 0))

    @classmethod
    def empty(cls):
        return cls._new(0)

    @classmethod
    def all(cls):
        return cls._new(cls.MASK)

    def __eq__(self, other):
        return isinstance(other, MonthSet) and self._items == other._items

    def __len__(self):
        return self._items.bit_count()

    def is_empty(self):
        return self._items == 0

    def is_all(self):
        return self._items == self.MASK


install_base_ops(Month, MonthSet)

SHORT_MONTHS = MonthSet.from_array([Month.Feb, Month.Apr, Month.Jun, Month.Sep, Month.Nov])
LONG_MONTHS = MonthSet.from_array(
    [Month.Jan, Month.Mar, Month.May, Month.Jul, Month.Aug, Month.Oct, Month.Dec]
)
ODD_MONTHS = MonthSet.from_array(
    [Month.Jan, Month.Mar, Month.May, Month.Jul, Month.Sep, Month.Nov]
)
EVEN_MONTHS = MonthSet.from_array(
    [Month.Feb, Month.Apr, Month.Jun, Month.Aug, Month.Oct, Month.Dec]
)


def test_with_add_short():
    assert Month.Feb + Month.Apr + Month.Jun + Month.Sep + Month.Nov == SHORT_MONTHS


def test_with_add_odd():
    odd = Month.Jan + Month.Mar + Month.May + Month.Jul + Month.Sep + Month.Nov
    assert odd == ODD_MONTHS


def test_with_add_even():
    even = Month.Feb + Month.Apr + Month.Jun + Month.Aug + Month.Oct + Month.Dec
    assert even == EVEN_MONTHS


def test_with_add_long():
    long = Month.Jan + Month.Mar + Month.May + Month.Jul + Month.Aug + Month.Oct + Month.Dec
    assert long == LONG_MONTHS


def test_with_or_short():
    assert Month.Feb | Month.Apr | Month.Jun | Month.Sep | Month.Nov == SHORT_MONTHS


def test_with_or_long():
    long = Month.Jan | Month.Mar | Month.May | Month.Jul | Month.Aug | Month.Oct | Month.Dec
    assert long == LONG_MONTHS


def test_with_or_odd():
    odd = Month.Jan | Month.Mar | Month.May | Month.Jul | Month.Sep | Month.Nov
    assert odd == ODD_MONTHS


def test_with_or_even():
    even = Month.Feb | Month.Apr | Month.Jun | Month.Aug | Month.Oct | Month.Dec
    assert even == EVEN_MONTHS


def test_add_to_all():
    assert SHORT_MONTHS + LONG_MONTHS == MonthSet.all()
    assert EVEN_MONTHS + ODD_MONTHS == MonthSet.all()


def test_or_to_all():
    assert (SHORT_MONTHS | LONG_MONTHS) == MonthSet.all()
    assert (EVEN_MONTHS | ODD_MONTHS) == MonthSet.all()


def test_sub_remove_1():
    result = SHORT_MONTHS - Month.Feb
    assert len(result) == 4
    assert result == MonthSet.from_array([Month.Apr, Month.Jun, Month.Sep, Month.Nov])


def test_sub_remove_2():
    result = SHORT_MONTHS - Month.Apr - Month.Sep
    assert len(result) == 3
    assert result == MonthSet.from_array([Month.Feb, Month.Jun, Month.Nov])


def test_sub_unexisting():
    result = SHORT_MONTHS - Month.Aug
    assert len(result) == 5
    assert result == SHORT_MONTHS


def test_add_existing():
    result = SHORT_MONTHS + Month.Feb
    assert len(result) == 5
    assert result == SHORT_MONTHS


def test_add_unexisting():
    result = SHORT_MONTHS + Month.Aug
    assert len(result) == 6
    assert result == MonthSet.from_array(
        [Month.Feb, Month.Apr, Month.Jun, Month.Sep, Month.Nov, Month.Aug]
    )


def test_symmetric_diff():
    assert (SHORT_MONTHS ^ LONG_MONTHS).is_all()


def test_symmetric_diff_empty():
    assert (SHORT_MONTHS ^ SHORT_MONTHS).is_empty()


def test_short_but_not_odd():
    assert SHORT_MONTHS - ODD_MONTHS == MonthSet.from_array([Month.Feb, Month.Apr, Month.Jun])


def test_short_or_odd_not_both():
    assert (SHORT_MONTHS ^ ODD_MONTHS) == MonthSet.from_array(
        [Month.Jan, Month.Feb, Month.Mar, Month.Apr, Month.May, Month.Jun, Month.Jul]
    )


def test_short_and_odd():
    assert (SHORT_MONTHS & ODD_MONTHS) == MonthSet.from_array([Month.Sep, Month.Nov])


def test_and_empty():
    assert (SHORT_MONTHS & LONG_MONTHS).is_empty()


def test_ops_with_empty():
    empty = MonthSet.empty()
    assert (empty | SHORT_MONTHS) == SHORT_MONTHS
    assert (empty & SHORT_MONTHS).is_empty()
    assert (empty + SHORT_MONTHS) == SHORT_MONTHS
    assert (SHORT_MONTHS - empty) == SHORT_MONTHS


def test_ops_with_full():
    full = MonthSet.all()
    assert (full | SHORT_MONTHS).is_all()
    assert (full & SHORT_MONTHS) == SHORT_MONTHS
    assert (full + SHORT_MONTHS).is_all()
    assert (full - SHORT_MONTHS) == LONG_MONTHS


def test_invert_is_complement_within_mask():
    assert ~SHORT_MONTHS == LONG_MONTHS
    assert ~MonthSet.all() == MonthSet.empty()
    assert ~MonthSet.empty() == MonthSet.all()


def test_binary_ops_leave_operands_unchanged():
    left = MonthSet.from_array([Month.Jan])
    right = MonthSet.from_array([Month.Feb])
    _ = left | right
    _ = left ^ right
    _ = left - right
    assert left == MonthSet.from_array([Month.Jan])
    assert right == MonthSet.from_array([Month.Feb])


def test_in_place_ops_modify_the_set():
    months = MonthSet.empty()
    alias = months
    months += Month.Feb
    months |= MonthSet.from_array([Month.Mar])
    assert alias is months
    assert months == MonthSet.from_array([Month.Feb, Month.Mar])
    months -= Month.Feb
    assert months == MonthSet.from_array([Month.Mar])
    months ^= MonthSet.from_array([Month.Mar, Month.Apr])
    assert months == MonthSet.from_array([Month.Apr])
    months &= SHORT_MONTHS
    assert months == MonthSet.from_array([Month.Apr])
    assert alias is months


def test_and_with_variant_is_unsupported():
    assert (SHORT_MONTHS & MonthSet.from_array([Month.Feb])) == MonthSet.from_array([Month.Feb])
    with pytest.raises(TypeError):
        SHORT_MONTHS & Month.Feb
    with pytest.raises(TypeError):
        SHORT_MONTHS ^ Month.Feb


def test_unrelated_operand_is_unsupported():
    assert SHORT_MONTHS + Month.Feb == SHORT_MONTHS
    assert Month.Jan + Month.Feb == MonthSet.from_array([Month.Jan, Month.Feb])
    with pytest.raises(TypeError):
        SHORT_MONTHS + 1
    with pytest.raises(TypeError):
        Month.Jan + 1


class Potato(enum.Enum):
    BURNT = enum.auto()
    RAW = enum.auto()


def test_base_ops_absent_without_installation():
    with pytest.raises(TypeError):
        install_base_ops(Potato, MonthSet)
    with pytest.raises(TypeError):
        Potato.BURNT + Potato.RAW
    assert Month.Jan + Month.Feb == MonthSet.from_array([Month.Jan, Month.Feb])


def test_install_rejects_mismatched_set():
    with pytest.raises(TypeError):
        install_base_ops(Potato, MonthSet)


def test_bit_of_rejects_foreign_variant():
    with pytest.raises(TypeError):
        MonthSet._bit_of(Potato.RAW)