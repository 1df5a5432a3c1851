"""
Joins over in-memory iterables, in the style of SQL joins between tables.

The :class:`~joinable.joined.Joinable` wrapper yields ``(left, right)`` for inner joins and ``(left, right | None)``
for outer joins. :class:`~joinable.joined_grouped.JoinableGrouped` collects the matching right records into a list,
yielding one result per left record, and also offers semi and anti joins.

What counts as a match is decided by a comparator returning an :class:`~joinable.core.Ordering` between a left and a
right record. Wrapping the right-hand side with :meth:`RHS.sorted <joinable.rhs.RHS.sorted>` enables binary search.
"""

import logging
from collections.abc import Collection
from typing import Iterable, Iterator

from joinable.core import Comparator, JoinType, Ordering, by_key, compare, equality
from joinable.joined import Joinable, inner_join, outer_join
from joinable.joined_grouped import JoinableGrouped, anti_join, inner_join_grouped, outer_join_grouped, semi_join
from joinable.rhs import RHS, RHSOrder, as_rhs

logging.getLogger(__name__).addHandler(logging.NullHandler())


def join[L, R](
    lhs: Iterable[L],
    rhs: RHS[R] | Collection[R],
    cmp: Comparator[L, R],
    how: JoinType | str = JoinType.INNER,
    grouped: bool = False,
) -> Iterator:
    """
    Joins LHS and RHS with the join named by ``how``.

    Args:
       how: a :class:`~joinable.core.JoinType` or its value, one of "inner", "outer", "semi" or "anti"
       grouped: collect the matches of each left record into a list. Semi and anti joins always yield one result per
          left record, so it has no effect on them.
    """
    try:
        join_type = JoinType(how)
    except ValueError:
        raise ValueError(f"Unknown join type {how!r}, expected one of {[t.value for t in JoinType]}") from None

    if join_type is JoinType.SEMI:
        return semi_join(lhs, rhs, cmp)
    if join_type is JoinType.ANTI:
        return anti_join(lhs, rhs, cmp)
    if join_type is JoinType.INNER:
        return inner_join_grouped(lhs, rhs, cmp) if grouped else inner_join(lhs, rhs, cmp)

    return outer_join_grouped(lhs, rhs, cmp) if grouped else outer_join(lhs, rhs, cmp)


__all__ = [
    "Comparator",
    "JoinType",
    "Joinable",
    "JoinableGrouped",
    "Ordering",
    "RHS",
    "RHSOrder",
    "anti_join",
    "as_rhs",
    "by_key",
    "compare",
    "equality",
    "inner_join",
    "inner_join_grouped",
    "join",
    "outer_join",
    "outer_join_grouped",
    "semi_join",
]
