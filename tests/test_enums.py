import pytest

from scenegraph.enums import EnumCallOrder, EnumDirection


def test_call_order_values_are_bit_flags():
    assert EnumCallOrder(1) is EnumCallOrder.PRE_ORDER
    assert EnumCallOrder(2) is EnumCallOrder.POST_ORDER


def test_combined_call_order_contains_both_flags():
    both = EnumCallOrder(3)
    assert EnumCallOrder.PRE_ORDER in both
    assert EnumCallOrder.POST_ORDER in both
    assert both & EnumCallOrder.PRE_ORDER == EnumCallOrder.PRE_ORDER


def test_single_call_order_excludes_other_flag():
    assert EnumCallOrder.POST_ORDER not in EnumCallOrder.PRE_ORDER
    assert EnumCallOrder.PRE_ORDER & EnumCallOrder.POST_ORDER == EnumCallOrder(0)


def test_call_order_from_combined_value():
    assert EnumCallOrder(3) == EnumCallOrder.PRE_ORDER | EnumCallOrder.POST_ORDER


def test_directions_are_distinct():
    rebuilt = [EnumDirection(d.value) for d in EnumDirection]
    assert rebuilt == [EnumDirection.FIRST_TO_LAST, EnumDirection.LAST_TO_FIRST] or rebuilt == [
        EnumDirection.LAST_TO_FIRST,
        EnumDirection.FIRST_TO_LAST,
    ]
    assert len(set(rebuilt)) == 2


def test_unknown_direction_rejected():
    with pytest.raises(ValueError):
        EnumDirection(99)