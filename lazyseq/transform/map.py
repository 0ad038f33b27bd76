"""Map combinator

One output per upstream element."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .._types import Mapper, Source
from ..core import Cursor, Seq


class _MapCursor[T, R](Cursor[R]):
    __slots__ = ("_upstream", "_fn")

    def __init__(self, upstream: Iterator[T], fn: Mapper[T, R]) -> None:
        super().__init__()
        self._upstream = upstream
        self._fn = fn

    def _advance(self) -> R:
        return self._fn(next(self._upstream))


@dataclass(frozen=True, slots=True)
class Map[T, R](Seq[R]):
    inner: Source[T]
    fn: Mapper[T, R]

    def __iter__(self) -> Cursor[R]:
        return _MapCursor(iter(self.inner), self.fn)


__all__ = ("Map",)
