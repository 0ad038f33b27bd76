"""Wrap an existing iterable as a Seq."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .._types import Source
from ..core import Cursor, Seq


class _DelegateCursor[T](Cursor[T]):
    __slots__ = ("_upstream",)

    def __init__(self, upstream: Iterator[T]) -> None:
        super().__init__()
        self._upstream = upstream

    def _advance(self) -> T:
        return next(self._upstream)


@dataclass(frozen=True, slots=True)
class Delegate[T](Seq[T]):
    source: Source[T]

    def __iter__(self) -> Cursor[T]:
        return _DelegateCursor(iter(self.source))


def from_[T](source: Source[T]) -> Delegate[T]:
    """
    Lift any iterable into a Seq. Values and exhaustion mirror source exactly.

    Every cursor re-opens source, so re-iteration is only as repeatable as
    source itself (lists yes, generator objects no).
    """
    return Delegate(source)


__all__ = ("Delegate", "from_")
