"""
Zip combinator
==============

Round-robin flatten: one element from every input per round, emitted in
input order. A round cut short by any exhausted input is discarded.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from .._types import Source
from ..core import Cursor, Seq

logger = logging.getLogger(__name__)


class _ZipCursor[T](Cursor[T]):
    __slots__ = ("_upstreams", "_pending")

    def __init__(self, upstreams: list[Iterator[T]]) -> None:
        super().__init__()
        self._upstreams = upstreams
        self._pending: deque[T] = deque()

    def _advance(self) -> T:
        if not self._pending:
            if not self._upstreams:
                raise StopIteration
            round_values: list[T] = []
            for upstream in self._upstreams:
                round_values.append(next(upstream))
            self._pending.extend(round_values)
        return self._pending.popleft()


@dataclass(frozen=True, slots=True)
class Zip[T](Seq[T]):
    sources: tuple[Source[T], ...]

    def __iter__(self) -> Cursor[T]:
        logger.debug("zip: opening cursor over %d source(s)", len(self.sources))
        return _ZipCursor([iter(source) for source in self.sources])


def zip[T](*sources: Source[T]) -> Zip[T]:
    """
    Interleave sources round by round; shortest input wins.

    Example:
        zip([1, 2, 3], [4, 5], [6, 7, 8, 9])  # 1, 4, 6, 2, 5, 7
        zip()                                 # empty
    """
    return Zip(sources)


__all__ = ("Zip", "zip")
