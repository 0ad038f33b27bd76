"""Bounded arithmetic progression."""

from __future__ import annotations

from dataclasses import dataclass

from .._types import Number
from ..core import Cursor, Seq


class _RangeCursor(Cursor[Number]):
    __slots__ = ("_next", "_end", "_step")

    def __init__(self, start: Number, end: Number, step: Number) -> None:
        super().__init__()
        self._next = start
        self._end = end
        self._step = step

    def _advance(self) -> Number:
        value = self._next
        if self._step > 0:
            if value >= self._end:
                raise StopIteration
        elif self._step < 0:
            if value <= self._end:
                raise StopIteration
        else:
            # zero step never reaches end
            raise StopIteration
        self._next = value + self._step
        return value


@dataclass(frozen=True, slots=True)
class Range(Seq[Number]):
    start: Number
    end: Number
    step: Number = 1

    def __iter__(self) -> Cursor[Number]:
        return _RangeCursor(self.start, self.end, self.step)


def range(start: Number, end: Number, step: Number = 1) -> Range:
    """
    start, start + step, ... stopping before end.

    Positive step counts up while < end, negative step counts down while > end.
    A step that makes no progress toward end (including 0) gives an empty Seq.

    Example:
        range(2, 6, 2)   # 2, 4
        range(5, 2, -1)  # 5, 4, 3
        range(2, 2)      # empty
    """
    return Range(start, end, step)


__all__ = ("Range", "range")
