from __future__ import annotations

from typing import Optional, TypeVar

T = TypeVar("T")


def clone(s: Optional[list[T]]) -> Optional[list[T]]:
    """Shallow copy of ``s``; an absent list stays absent."""
    if s is None:
        return None
    return list(s)
