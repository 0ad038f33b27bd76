"""Infinite constant and counting producers."""

from __future__ import annotations

from dataclasses import dataclass

from ..core import Cursor, Seq


class _RepeatCursor[T](Cursor[T]):
    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        super().__init__()
        self._value = value

    def _advance(self) -> T:
        return self._value


@dataclass(frozen=True, slots=True)
class Repeat[T](Seq[T]):
    value: T

    def __iter__(self) -> Cursor[T]:
        return _RepeatCursor(self.value)


class _CountCursor(Cursor[int]):
    __slots__ = ("_next",)

    def __init__(self) -> None:
        super().__init__()
        self._next = 0

    def _advance(self) -> int:
        value = self._next
        self._next += 1
        return value


@dataclass(frozen=True, slots=True)
class Generate(Seq[int]):
    def __iter__(self) -> Cursor[int]:
        return _CountCursor()


def repeat[T](value: T) -> Repeat[T]:
    """Yield the very same value object forever."""
    return Repeat(value)


def generate() -> Generate:
    """Yield 0, 1, 2, ... forever."""
    return Generate()


__all__ = ("Generate", "Repeat", "generate", "repeat")
