"""FlatMap combinator

Each upstream element expands into a sub-sequence that is drained
completely before the next upstream element is pulled."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .._types import Mapper, Source
from ..core import Cursor, Seq


class _FlatMapCursor[T, R](Cursor[R]):
    __slots__ = ("_upstream", "_fn", "_current")

    def __init__(self, upstream: Iterator[T], fn: Mapper[T, Iterable[R]]) -> None:
        super().__init__()
        self._upstream = upstream
        self._fn = fn
        self._current: Iterator[R] | None = None

    def _advance(self) -> R:
        while True:
            if self._current is not None:
                try:
                    return next(self._current)
                except StopIteration:
                    self._current = None
            # upstream exhaustion ends the whole sequence
            self._current = iter(self._fn(next(self._upstream)))


@dataclass(frozen=True, slots=True)
class FlatMap[T, R](Seq[R]):
    inner: Source[T]
    fn: Mapper[T, Iterable[R]]

    def __iter__(self) -> Cursor[R]:
        return _FlatMapCursor(iter(self.inner), self.fn)


__all__ = ("FlatMap",)
