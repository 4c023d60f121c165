from __future__ import annotations

import logging
from typing import Optional, TypeVar

from .errors import ContractViolation

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _is_index(i: object) -> bool:
    return isinstance(i, int) and not isinstance(i, bool)


def _check_range(op: str, i: object, j: object, n: int) -> None:
    if _is_index(i) and _is_index(j) and 0 <= i <= j <= n:  # type: ignore[operator]
        return
    if op == "insert":
        msg = f"insert: index {i!r} out of range [0, {n}]"
    else:
        msg = f"delete: range [{i!r}:{j!r}] out of bounds for length {n}"
    logger.debug("%s", msg)
    raise ContractViolation(msg)


def insert(s: Optional[list[T]], i: int, *values: T) -> Optional[list[T]]:
    """
    Insert ``values`` into ``s`` at index ``i`` and return the result.

    Elements at and after ``i`` move up by ``len(values)``. ``i`` must satisfy
    ``0 <= i <= len(s)``; negative indices are not wrapped. ``s`` is modified
    in place and returned, except for an absent ``s``, where a new list is
    returned if there is anything to insert.
    """
    n = len(s) if s is not None else 0
    _check_range("insert", i, i, n)
    if s is None:
        return list(values) if values else None
    s[i:i] = values
    return s


def delete(s: Optional[list[T]], i: int, j: int) -> Optional[list[T]]:
    """
    Remove ``s[i:j]`` in place and return ``s``.

    Requires ``0 <= i <= j <= len(s)``. The list releases its references to
    the removed elements, so nothing past the new length stays reachable.
    """
    n = len(s) if s is not None else 0
    _check_range("delete", i, j, n)
    if s is None:
        return None
    del s[i:j]
    return s
