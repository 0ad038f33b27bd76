"""Drop / take combinators

Positional slicing counted from cursor start. n is read once, when the
cursor opens."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .._types import Source
from ..core import Cursor, Seq


class _DropCursor[T](Cursor[T]):
    __slots__ = ("_upstream", "_remaining")

    def __init__(self, upstream: Iterator[T], n: int) -> None:
        super().__init__()
        self._upstream = upstream
        self._remaining = n

    def _advance(self) -> T:
        while self._remaining > 0:
            next(self._upstream)
            self._remaining -= 1
        return next(self._upstream)


class _TakeCursor[T](Cursor[T]):
    __slots__ = ("_upstream", "_remaining")

    def __init__(self, upstream: Iterator[T], n: int) -> None:
        super().__init__()
        self._upstream = upstream
        self._remaining = n

    def _advance(self) -> T:
        # NOTE: checked before pulling, so the element after the n-th is never read
        if self._remaining <= 0:
            raise StopIteration
        self._remaining -= 1
        return next(self._upstream)


@dataclass(frozen=True, slots=True)
class Drop[T](Seq[T]):
    """Skip the first n elements; n <= 0 skips nothing."""

    inner: Source[T]
    n: int

    def __iter__(self) -> Cursor[T]:
        return _DropCursor(iter(self.inner), self.n)


@dataclass(frozen=True, slots=True)
class Take[T](Seq[T]):
    """Pass at most n elements; n <= 0 is empty and never pulls upstream."""

    inner: Source[T]
    n: int

    def __iter__(self) -> Cursor[T]:
        return _TakeCursor(iter(self.inner), self.n)


__all__ = ("Drop", "Take")
