"""
Combine combinator
==================

Same rounds as zip, but each complete round is folded into one value
by an n-ary function.
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


class _CombineCursor[R](Cursor[R]):
    __slots__ = ("_fn", "_upstreams")

    def __init__(self, fn: Callable[..., R], upstreams: list[Iterator[typing.Any]]) -> None:
        super().__init__()
        self._fn = fn
        self._upstreams = upstreams

    def _advance(self) -> R:
        if not self._upstreams:
            raise StopIteration
        args: list[typing.Any] = []
        for upstream in self._upstreams:
            args.append(next(upstream))
        return self._fn(*args)


@dataclass(frozen=True, slots=True)
class Combine[R](Seq[R]):
    fn: Callable[..., R]
    sources: tuple[Source[typing.Any], ...]

    def __iter__(self) -> Cursor[R]:
        logger.debug("combine: opening cursor over %d source(s)", len(self.sources))
        return _CombineCursor(self.fn, [iter(source) for source in self.sources])


def combine[R](fn: Callable[..., R], *sources: Source[typing.Any]) -> Combine[R]:
    """
    Apply fn positionally across sources, stopping at the first exhausted one.

    Raises ArityError right away if fn can't take len(sources) positional
    arguments.

    Example:
        combine(lambda k, v: f"{k}: {v}", ["a", "b", "c"], [1, 2])  # "a: 1", "b: 2"
    """
    check_arity(fn, len(sources), name="combine")
    return Combine(fn, sources)


__all__ = ("Combine", "combine")
