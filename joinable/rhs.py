import logging
from bisect import bisect_left
from collections.abc import Collection, Sequence
from enum import Enum
from typing import Iterator, List, Tuple

from joinable.core import Comparator, JoinType, Ordering, check_comparator

logger = logging.getLogger(__name__)


class RHSOrder(Enum):
    UNSORTED = "unsorted"
    SORTED = "sorted"


class RHS[R]:
    """
    A wrapper around the right-hand side of a join.

    An unsorted RHS is searched linearly, O(n) per left value. A sorted RHS is assumed to be in ascending order
    according to the comparator it will be searched with, and is binary searched, O(lg n + k) per left value where k
    is the number of matches.

    Nothing checks that a sorted RHS really is sorted. If it isn't, matches may silently go missing.
    """

    values: Collection[R]
    order: RHSOrder

    def __init__(self, values: Collection[R], order: RHSOrder = RHSOrder.UNSORTED) -> None:
        if not isinstance(values, Collection):
            raise TypeError(f"RHS values must be a re-iterable collection, got {type(values).__name__}")

        if order is RHSOrder.SORTED and not isinstance(values, Sequence):
            raise TypeError(f"A sorted RHS needs a sequence to binary search, got {type(values).__name__}")

        self.values = values
        self.order = order

    @classmethod
    def unsorted(cls, values: Collection[R]) -> "RHS[R]":
        """Creates an RHS whose values will be searched linearly."""
        return cls(values, RHSOrder.UNSORTED)

    @classmethod
    def sorted(cls, values: Sequence[R]) -> "RHS[R]":
        """Creates an RHS whose values are sorted according to how they will be searched."""
        return cls(values, RHSOrder.SORTED)

    @property
    def is_sorted(self) -> bool:
        return self.order is RHSOrder.SORTED

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[R]:
        return iter(self.values)

    def __repr__(self) -> str:
        return f"RHS.{self.order.value}({self.values!r})"

    def _lower_bound[L](self, left: L, cmp: Comparator[L, R]) -> int:
        # First position whose value is not less than the left key. The comparator orders left against right, so
        # it is reversed to order the values against the left key.
        values: Sequence[R] = self.values  # type: ignore

        return bisect_left(values, Ordering.EQUAL, key=lambda right: Ordering.of(cmp(left, right)).reverse())

    def iter_matches[L](self, left: L, cmp: Comparator[L, R]) -> Iterator[R]:
        """Lazily yields every value matching ``left``, in the order they appear in the RHS."""
        if self.order is RHSOrder.UNSORTED:
            for right in self.values:
                if Ordering.of(cmp(left, right)) is Ordering.EQUAL:
                    yield right

            return

        values: Sequence[R] = self.values  # type: ignore
        for pos in range(self._lower_bound(left, cmp), len(values)):
            right = values[pos]
            if Ordering.of(cmp(left, right)) is not Ordering.EQUAL:
                return

            yield right

    def find_matches[L](self, left: L, cmp: Comparator[L, R]) -> List[R]:
        return list(self.iter_matches(left, cmp))

    def has_match[L](self, left: L, cmp: Comparator[L, R]) -> bool:
        """Returns whether any value matches ``left``. Stops at the first match."""
        if self.order is RHSOrder.UNSORTED:
            return any(Ordering.of(cmp(left, right)) is Ordering.EQUAL for right in self.values)

        values: Sequence[R] = self.values  # type: ignore
        pos = self._lower_bound(left, cmp)

        return pos < len(values) and Ordering.of(cmp(left, values[pos])) is Ordering.EQUAL

    def match_range[L](self, left: L, cmp: Comparator[L, R]) -> Tuple[int, int]:
        """
        Returns the half-open range of positions that can hold matches for ``left``.

        For a sorted RHS that is exactly the run of equal values, which is empty when nothing matches. An unsorted
        RHS can hold a match anywhere, so the whole of it is returned.
        """
        if self.order is RHSOrder.UNSORTED:
            return 0, len(self.values)

        values: Sequence[R] = self.values  # type: ignore
        start = self._lower_bound(left, cmp)
        end = start
        while end < len(values) and Ordering.of(cmp(left, values[end])) is Ordering.EQUAL:
            end += 1

        return start, end


def as_rhs[R](rhs: "RHS[R] | Collection[R]") -> RHS[R]:
    """Passes an RHS through, and wraps any other collection as an unsorted RHS."""
    if isinstance(rhs, RHS):
        return rhs

    return RHS.unsorted(rhs)


def prepare_rhs[R](join_type: JoinType, rhs: "RHS[R] | Collection[R]", cmp: Comparator) -> RHS[R]:
    """Checks the arguments of a join and returns the RHS it will search."""
    check_comparator(cmp)
    right = as_rhs(rhs)
    logger.debug("Building %s join against %s RHS of %d values", join_type.value, right.order.value, len(right))

    return right
