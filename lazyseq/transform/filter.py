"""Filter combinator

Keeps elements that pass the predicate, order preserved."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .._types import Predicate, Source
from ..core import Cursor, Seq


class _FilterCursor[T](Cursor[T]):
    __slots__ = ("_upstream", "_predicate")

    def __init__(self, upstream: Iterator[T], predicate: Predicate[T]) -> None:
        super().__init__()
        self._upstream = upstream
        self._predicate = predicate

    def _advance(self) -> T:
        while True:
            value = next(self._upstream)
            if self._predicate(value):
                return value


@dataclass(frozen=True, slots=True)
class Filter[T](Seq[T]):
    inner: Source[T]
    predicate: Predicate[T]

    def __iter__(self) -> Cursor[T]:
        return _FilterCursor(iter(self.inner), self.predicate)


__all__ = ("Filter",)
