from collections.abc import Collection
from typing import Iterable, Iterator, Optional, Tuple

from joinable.core import Comparator, JoinType
from joinable.joined_grouped import anti_join, semi_join
from joinable.rhs import RHS, prepare_rhs


def _each_inner[L, R](lhs: Iterator[L], rhs: RHS[R], cmp: Comparator[L, R]) -> Iterator[Tuple[L, R]]:
    for left in lhs:
        for right in rhs.iter_matches(left, cmp):
            yield left, right


def _each_outer[L, R](lhs: Iterator[L], rhs: RHS[R], cmp: Comparator[L, R]) -> Iterator[Tuple[L, Optional[R]]]:
    for left in lhs:
        matched = False
        for right in rhs.iter_matches(left, cmp):
            matched = True
            yield left, right

        if not matched:
            yield left, None


def inner_join[L, R](lhs: Iterable[L], rhs: RHS[R] | Collection[R], cmp: Comparator[L, R]) -> Iterator[Tuple[L, R]]:
    """
    Joins LHS and RHS, keeping only records from left that have one or more matches in right.

    One ``(left, right)`` pair is yielded per match, so a left record with several matches is yielded several times.

    Args:
       lhs: left records, consumed once
       rhs: an :class:`~joinable.rhs.RHS`, or any collection which is then searched linearly
       cmp: compares a left record with a right record, returning an :class:`~joinable.core.Ordering`
    """
    right = prepare_rhs(JoinType.INNER, rhs, cmp)

    return _each_inner(iter(lhs), right, cmp)


def outer_join[L, R](
    lhs: Iterable[L], rhs: RHS[R] | Collection[R], cmp: Comparator[L, R]
) -> Iterator[Tuple[L, Optional[R]]]:
    """
    Joins LHS and RHS, keeping _all_ records from left.

    Like :func:`inner_join`, one ``(left, right)`` pair is yielded per match. A left record without matches is
    yielded once, as ``(left, None)``.
    """
    right = prepare_rhs(JoinType.OUTER, rhs, cmp)

    return _each_outer(iter(lhs), right, cmp)


class Joinable[L]:
    """
    Wraps left-hand side records so they can be joined pairwise, yielding one result per match. A left record may
    therefore be yielded more than once. See :class:`~joinable.joined_grouped.JoinableGrouped` for one result per
    left record.
    """

    lhs: Iterable[L]

    def __init__(self, lhs: Iterable[L]) -> None:
        self.lhs = lhs

    def inner_join[R](self, rhs: RHS[R] | Collection[R], cmp: Comparator[L, R]) -> Iterator[Tuple[L, R]]:
        return inner_join(self.lhs, rhs, cmp)

    def outer_join[R](self, rhs: RHS[R] | Collection[R], cmp: Comparator[L, R]) -> Iterator[Tuple[L, Optional[R]]]:
        return outer_join(self.lhs, rhs, cmp)

    def semi_join[R](self, rhs: RHS[R] | Collection[R], cmp: Comparator[L, R]) -> Iterator[L]:
        """Yields the left records that have at least one match in RHS, once each."""
        return semi_join(self.lhs, rhs, cmp)

    def anti_join[R](self, rhs: RHS[R] | Collection[R], cmp: Comparator[L, R]) -> Iterator[L]:
        """Yields the left records that have no match in RHS."""
        return anti_join(self.lhs, rhs, cmp)
