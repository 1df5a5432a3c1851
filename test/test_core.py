import functools
from fractions import Fraction

import pytest

from joinable.core import JoinType, Ordering, by_key, compare, equality


def test_ordering_of_normalises_sign():
    assert Ordering.of(-42) is Ordering.LESS
    assert Ordering.of(0) is Ordering.EQUAL
    assert Ordering.of(7) is Ordering.GREATER
    assert Ordering.of(Ordering.GREATER) is Ordering.GREATER


def test_ordering_of_accepts_any_number():
    assert Ordering.of(0.5) is Ordering.GREATER
    assert Ordering.of(-0.25) is Ordering.LESS
    assert Ordering.of(0.0) is Ordering.EQUAL
    assert Ordering.of(Fraction(-1, 3)) is Ordering.LESS


def test_ordering_of_rejects_values_not_comparable_to_zero():
    with pytest.raises(TypeError):
        Ordering.of("equal")

    with pytest.raises(TypeError):
        Ordering.of(None)


def test_ordering_reverse():
    assert Ordering.LESS.reverse() is Ordering.GREATER
    assert Ordering.GREATER.reverse() is Ordering.LESS
    assert Ordering.EQUAL.reverse() is Ordering.EQUAL


def test_ordering_predicates():
    assert Ordering.EQUAL.is_eq()
    assert Ordering.LESS.is_lt()
    assert Ordering.GREATER.is_gt()
    assert not Ordering.LESS.is_eq()


def test_compare():
    assert compare(1, 2) is Ordering.LESS
    assert compare(2, 2) is Ordering.EQUAL
    assert compare("b", "a") is Ordering.GREATER
    assert compare((1, "a"), (1, "b")) is Ordering.LESS


def test_compare_works_as_cmp_to_key():
    assert sorted([3, 1, 2], key=functools.cmp_to_key(compare)) == [1, 2, 3]


def test_by_key():
    cmp = by_key(lambda customer: customer["id"], lambda order: order["customer_id"])

    assert cmp({"id": 3}, {"customer_id": 3}) is Ordering.EQUAL
    assert cmp({"id": 1}, {"customer_id": 3}) is Ordering.LESS
    assert cmp({"id": 5}, {"customer_id": 3}) is Ordering.GREATER


def test_by_key_defaults_right_key_to_left_key():
    cmp = by_key(lambda pair: pair[0])

    assert cmp((1, "one"), (1, "un")) is Ordering.EQUAL
    assert cmp((2, "two"), (1, "un")) is Ordering.GREATER


def test_equality():
    cmp = equality(lambda left: left, lambda right: right["tag"])

    assert cmp({"a"}, {"tag": {"a"}}) is Ordering.EQUAL
    assert cmp({"a"}, {"tag": {"b"}}) is Ordering.LESS


def test_join_type_values():
    assert JoinType("inner") is JoinType.INNER
    assert [t.value for t in JoinType] == ["inner", "outer", "semi", "anti"]
