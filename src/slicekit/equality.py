from __future__ import annotations

from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")


def equal(s1: Optional[Sequence[T]], s2: Optional[Sequence[T]]) -> bool:
    """
    Report whether two sequences have the same length and equal elements.

    Pairs are compared in index order with ``==`` and the scan stops at the
    first unequal pair. NaN is never equal to anything, itself included.
    """
    return equal_func(s1, s2, lambda a, b: a == b)


def equal_func(
    s1: Optional[Sequence[T1]],
    s2: Optional[Sequence[T2]],
    eq: Callable[[T1, T2], bool],
) -> bool:
    n = len(s1) if s1 is not None else 0
    if n != (len(s2) if s2 is not None else 0):
        return False
    for i in range(n):
        if not eq(s1[i], s2[i]):  # type: ignore[index]
            return False
    return True
