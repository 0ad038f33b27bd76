"""Join combinator

No cursor of its own: interleave with an endless separator, then drop
the leading separator."""

from __future__ import annotations

from .._types import Source
from ..multi.zip import zip
from ..source.constant import repeat
from .slice import Drop


def join[T](source: Source[T], sep: T) -> Drop[T]:
    """
    sep between every pair of adjacent elements, nothing at either end.

    Example:
        join([1, 2, 3], 0)  # 1, 0, 2, 0, 3
    """
    return zip(repeat(sep), source).drop(1)


__all__ = ("join",)
