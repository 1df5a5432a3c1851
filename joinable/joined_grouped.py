from collections.abc import Collection
from typing import Callable, Iterable, Iterator, List, Tuple

from joinable.core import Comparator, JoinType
from joinable.rhs import RHS, prepare_rhs


def _probe_each[L, P](lhs: Iterator[L], probe: Callable[[L], P]) -> Iterator[Tuple[L, P]]:
    """Pairs every left record with the result of searching the RHS for it. Left records are consumed one by one."""
    for left in lhs:
        yield left, probe(left)


def _grouped[L, R](lhs: Iterable[L], rhs: RHS[R], cmp: Comparator[L, R]) -> Iterator[Tuple[L, List[R]]]:
    return _probe_each(iter(lhs), lambda left: rhs.find_matches(left, cmp))


def _matched[L, R](lhs: Iterable[L], rhs: RHS[R], cmp: Comparator[L, R]) -> Iterator[Tuple[L, bool]]:
    return _probe_each(iter(lhs), lambda left: rhs.has_match(left, cmp))


def inner_join_grouped[L, R](
    lhs: Iterable[L], rhs: RHS[R] | Collection[R], cmp: Comparator[L, R]
) -> Iterator[Tuple[L, List[R]]]:
    """
    Joins LHS and RHS, keeping only records from left that have one or more matches in right.

    Matching records from RHS are collected, yielding one ``(left, [right, ...])`` per matched left record. If multiple
    records from left match a given record from right, that right record appears in each of their lists.
    """
    right = prepare_rhs(JoinType.INNER, rhs, cmp)

    return ((left, rs) for left, rs in _grouped(lhs, right, cmp) if rs)


def outer_join_grouped[L, R](
    lhs: Iterable[L], rhs: RHS[R] | Collection[R], cmp: Comparator[L, R]
) -> Iterator[Tuple[L, List[R]]]:
    """
    Joins LHS and RHS, keeping _all_ records from left.

    Like :func:`inner_join_grouped`, yields ``(left, [right, ...])``, exactly once per left record. The list is empty
    when nothing in RHS matches.
    """
    right = prepare_rhs(JoinType.OUTER, rhs, cmp)

    return _grouped(lhs, right, cmp)


def semi_join[L, R](lhs: Iterable[L], rhs: RHS[R] | Collection[R], cmp: Comparator[L, R]) -> Iterator[L]:
    """
    Joins LHS and RHS, keeping all records from left that have one or more matches in right.

    Only left records are returned, each once however many matches it has.
    """
    right = prepare_rhs(JoinType.SEMI, rhs, cmp)

    return (left for left, found in _matched(lhs, right, cmp) if found)


def anti_join[L, R](lhs: Iterable[L], rhs: RHS[R] | Collection[R], cmp: Comparator[L, R]) -> Iterator[L]:
    """
    Joins LHS and RHS, keeping all records from left that have _no_ matches in right.

    Like :func:`semi_join`, only left records are returned.
    """
    right = prepare_rhs(JoinType.ANTI, rhs, cmp)

    return (left for left, found in _matched(lhs, right, cmp) if not found)


class JoinableGrouped[L]:
    """
    Wraps left-hand side records so they can be joined yielding at most one result per left record.

    Results for :meth:`inner_join_grouped` and :meth:`outer_join_grouped` are the left record and a list of its
    matches from RHS, which can be empty for outer joins.
    """

    lhs: Iterable[L]

    def __init__(self, lhs: Iterable[L]) -> None:
        self.lhs = lhs

    def inner_join_grouped[R](self, rhs: RHS[R] | Collection[R], cmp: Comparator[L, R]) -> Iterator[Tuple[L, List[R]]]:
        return inner_join_grouped(self.lhs, rhs, cmp)

    def outer_join_grouped[R](self, rhs: RHS[R] | Collection[R], cmp: Comparator[L, R]) -> Iterator[Tuple[L, List[R]]]:
        return outer_join_grouped(self.lhs, rhs, cmp)

    def semi_join[R](self, rhs: RHS[R] | Collection[R], cmp: Comparator[L, R]) -> Iterator[L]:
        return semi_join(self.lhs, rhs, cmp)

    def anti_join[R](self, rhs: RHS[R] | Collection[R], cmp: Comparator[L, R]) -> Iterator[L]:
        return anti_join(self.lhs, rhs, cmp)
