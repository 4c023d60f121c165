from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Callable, Optional, TypeVar

T = TypeVar("T")

Less = Callable[[T, T], bool]

logger = logging.getLogger(__name__)


def compare_by_less(less: Less[T]) -> Callable[[T, T], int]:
    # three-way comparison out of a strict weak ordering:
    # 1) a before b -> -1
    # 2) b before a -> 1
    # 3) incomparable -> 0, tie order left to the sort
    def cmp(one: T, other: T) -> int:
        if less(one, other):
            return -1
        if less(other, one):
            return 1
        return 0

    return cmp


def sort(s: Optional[list[T]], less: Less[T]) -> None:
    """
    Sort ``s`` in place so that ``less(a, b)`` means ``a`` comes before ``b``.

    Elements that compare equal may end up in any relative order. A ``less``
    that is not a strict weak ordering does not raise; the order is then
    unspecified.
    """
    if not s:
        return
    logger.debug("sorting %d elements", len(s))
    s.sort(key=cmp_to_key(compare_by_less(less)))
