from enum import Enum, IntEnum
from typing import Any, Callable, Optional, TypeVar

L = TypeVar("L")
R = TypeVar("R")

Comparator = Callable[[L, R], int]


class Ordering(IntEnum):
    """
    The result of comparing the key of a left value with the key of a right value.

    Comparators may return plain numbers following the ``functools.cmp_to_key`` convention, negative, zero or
    positive, so ``lambda l, r: l.x - r.x`` works for float keys too. :meth:`Ordering.of` normalises them by sign.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: Any) -> "Ordering":
        if isinstance(value, Ordering):
            return value

        try:
            if value < 0:
                return cls.LESS
            if value > 0:
                return cls.GREATER
        except TypeError:
            raise TypeError(
                f"Comparator must return a number comparable to 0, got {type(value).__name__}: {value!r}"
            ) from None

        return cls.EQUAL

    def reverse(self) -> "Ordering":
        """Returns the ordering seen from the other side, LESS <-> GREATER."""
        return Ordering(-self.value)

    def is_eq(self) -> bool:
        return self is Ordering.EQUAL

    def is_lt(self) -> bool:
        return self is Ordering.LESS

    def is_gt(self) -> bool:
        return self is Ordering.GREATER


class JoinType(Enum):
    INNER = "inner"
    OUTER = "outer"
    SEMI = "semi"
    ANTI = "anti"


def compare(a: Any, b: Any) -> Ordering:
    """Three-way comparison of two mutually comparable keys."""
    if a < b:
        return Ordering.LESS
    if b < a:
        return Ordering.GREATER

    return Ordering.EQUAL


def by_key[A, B, K](left_key: Callable[[A], K], right_key: Optional[Callable[[B], K]] = None) -> Comparator[A, B]:
    """
    Builds a comparator out of key functions.

    Args:
       left_key: extracts the join key from a left value
       right_key: extracts the join key from a right value. Defaults to ``left_key``.
    """
    rk = left_key if right_key is None else right_key

    def cmp(left: A, right: B) -> Ordering:
        return compare(left_key(left), rk(right))

    return cmp


def equality[A, B, K](left_key: Callable[[A], K], right_key: Optional[Callable[[B], K]] = None) -> Comparator[A, B]:
    """
    Builds a comparator for keys with no natural order. Anything that isn't equal compares as LESS.

    Only valid against an unsorted right-hand side, binary search needs a real order.
    """
    rk = left_key if right_key is None else right_key

    def cmp(left: A, right: B) -> Ordering:
        if left_key(left) == rk(right):
            return Ordering.EQUAL

        return Ordering.LESS

    return cmp


def check_comparator(cmp: Any) -> None:
    if not callable(cmp):
        raise TypeError(f"Comparator must be callable, got {type(cmp).__name__}")
