"""Side effects combinators

Effects execute for observation only (logging, metrics, debugging)
and don't change the elements passing through. They fire as elements
are pulled, never ahead of demand."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .._types import Effect, Source
from ..core import Cursor, Seq


class _TapCursor[T](Cursor[T]):
    __slots__ = ("_upstream", "_effect")

    def __init__(self, upstream: Iterator[T], effect: Effect[T]) -> None:
        super().__init__()
        self._upstream = upstream
        self._effect = effect

    def _advance(self) -> T:
        value = next(self._upstream)
        self._effect(value)
        return value


@dataclass(frozen=True, slots=True)
class Tap[T](Seq[T]):
    inner: Source[T]
    effect: Effect[T]

    def __iter__(self) -> Cursor[T]:
        return _TapCursor(iter(self.inner), self.effect)


__all__ = ("Tap",)
