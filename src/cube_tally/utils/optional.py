from __future__ import annotations

from typing import Callable, Optional, TypeVar

T = TypeVar("T")


def reduce_optional(
    a: Optional[T], b: Optional[T], combine: Callable[[T, T], T]
) -> Optional[T]:
    """Merge two optional values.

    Both present: ``combine(a, b)``. One present: that one. Neither: ``None``.
    """
    if a is None:
        return b
    if b is None:
        return a
    return combine(a, b)
