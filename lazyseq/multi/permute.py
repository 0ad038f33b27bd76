"""
Permute combinator
==================

Cartesian product in odometer order: the last wheel spins fastest, the
first wheel slowest. Wheels are only ever re-opened, never rewound, so
any restartable Seq (generate().take(n), a mapped list, ...) can be a wheel.

Cursor state:
- cursors[i] - live cursor of wheel i
- values[i]  - value currently shown by wheel i (None before the first fill)
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .._helpers import check_arity
from .._types import Source
from ..core import Cursor, Seq

logger = logging.getLogger(__name__)


class _PermuteCursor[R](Cursor[R]):
    __slots__ = ("_fn", "_wheels", "_cursors", "_values")

    def __init__(self, fn: Callable[..., R], wheels: tuple[Source[typing.Any], ...]) -> None:
        super().__init__()
        self._fn = fn
        self._wheels = wheels
        self._cursors: list[Iterator[typing.Any]] = [iter(wheel) for wheel in wheels]
        self._values: list[typing.Any] | None = None

    def _advance(self) -> R:
        if self._values is None:
            self._values = self._fill()
        else:
            self._turn(self._values)
        return self._fn(*self._values)

    def _fill(self) -> list[typing.Any]:
        values: list[typing.Any] = []
        for position, cursor in enumerate(self._cursors):
            try:
                values.append(next(cursor))
            except StopIteration:
                logger.debug("permute: wheel %d is empty, nothing to emit", position)
                raise
        return values

    def _turn(self, values: list[typing.Any]) -> None:
        """Advance the last wheel, carrying rollovers leftwards."""
        position = len(self._wheels) - 1
        while True:
            try:
                values[position] = next(self._cursors[position])
                return
            except StopIteration:
                if position == 0:
                    logger.debug("permute: first wheel rolled over, finished")
                    raise
            # Rollover: re-open this wheel at its first value, then carry left.
            self._cursors[position] = iter(self._wheels[position])
            try:
                values[position] = next(self._cursors[position])
            except StopIteration:
                logger.debug("permute: wheel %d came back empty on reset, finished", position)
                raise
            position -= 1


@dataclass(frozen=True, slots=True)
class Permute[R](Seq[R]):
    fn: Callable[..., R]
    wheels: tuple[Source[typing.Any], ...]

    def __iter__(self) -> Cursor[R]:
        logger.debug("permute: opening cursor over %d wheel(s)", len(self.wheels))
        return _PermuteCursor(self.fn, self.wheels)


def permute[R](fn: Callable[..., R], *wheels: Source[typing.Any]) -> Permute[R]:
    """
    fn applied to every combination of one element per wheel.

    Produces |W1| * ... * |WN| values, nothing if any wheel is empty.
    Raises ValueError without wheels and ArityError if fn can't take
    one positional argument per wheel.

    Example:
        permute(lambda a, b, c: f"{a}{b}{c}", [1, 2], [3], [4, 5])
        # "134", "135", "234", "235"
    """
    if not wheels:
        raise ValueError("permute(): at least one sequence is required")
    check_arity(fn, len(wheels), name="permute")
    return Permute(fn, wheels)


__all__ = ("Permute", "permute")
