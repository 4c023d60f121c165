from __future__ import annotations

from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")

NOT_FOUND = -1


def index_func(s: Optional[Sequence[T]], pred: Callable[[T], bool]) -> int:
    if not s:
        return NOT_FOUND
    for i, x in enumerate(s):
        if pred(x):
            return i
    return NOT_FOUND


def index(s: Optional[Sequence[T]], v: T) -> int:
    return index_func(s, lambda x: v == x)


def contains(s: Optional[Sequence[T]], v: T) -> bool:
    return index(s, v) != NOT_FOUND
