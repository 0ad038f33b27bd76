"""
Sequence core
=============

Architecture:
- Seq[T]    - immutable combinator node; ``iter(seq)`` opens a fresh Cursor
- Cursor[T] - single-use position inside a Seq, driven by ``next()``

Building a pipeline never pulls anything: every fluent method below just
allocates a new node that references ``self``. Work happens only when a
cursor is advanced.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator

from kungfu import Error, Ok, Result

from ._errors import EmptySequenceError
from ._types import Effect, Mapper, Predicate, Source

if typing.TYPE_CHECKING:
    from .multi.combine import Combine
    from .multi.zip import Zip
    from .source.delegate import Delegate
    from .transform.effects import Tap
    from .transform.flat_map import FlatMap
    from .transform.filter import Filter
    from .transform.map import Map
    from .transform.slice import Drop, Take


# ============================================================================
# Cursor
# ============================================================================


class Cursor[T]:
    """
    Iteration state for one pass over a sequence.

    Subclasses implement ``_advance`` as an explicit state machine and raise
    StopIteration when there is nothing left. Exhaustion is latched here, so
    once a cursor reports it, it keeps reporting it and never touches its
    upstream again.

    NOTE: a user function (map's fn, a permute combiner, ...) that raises
    StopIteration is indistinguishable from exhaustion and ends the cursor,
    same as the builtin map(). Every other exception propagates unchanged.
    """

    __slots__ = ("_exhausted",)

    def __init__(self) -> None:
        self._exhausted = False

    def __iter__(self) -> Cursor[T]:
        return self

    def __next__(self) -> T:
        if self._exhausted:
            raise StopIteration
        try:
            return self._advance()
        except StopIteration:
            self._exhausted = True
            raise

    def _advance(self) -> T:
        raise NotImplementedError


# ============================================================================
# Seq
# ============================================================================


class Seq[T]:
    """
    Lazy, re-iterable, possibly infinite sequence of T.

    Each ``iter()`` call returns an independent cursor. Nodes hold only their
    upstream references and parameters, never iteration state.
    """

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Constructors, also reachable as Seq.from_ / Seq.zip / Seq.combine
    # ------------------------------------------------------------------

    @staticmethod
    def from_[U](source: Source[U]) -> Delegate[U]:
        from .source.delegate import from_
        return from_(source)

    @staticmethod
    def zip[U](*sources: Source[U]) -> Zip[U]:
        from .multi.zip import zip
        return zip(*sources)

    @staticmethod
    def combine[R](fn: Callable[..., R], *sources: Source[typing.Any]) -> Combine[R]:
        from .multi.combine import combine
        return combine(fn, *sources)

    # ------------------------------------------------------------------
    # Materializing conveniences (never terminate on infinite input)
    # ------------------------------------------------------------------

    def to_list(self) -> list[T]:
        """Drain a fresh cursor into a list."""
        return list(self)

    def to_string(self) -> str:
        """Concatenate ``str()`` of every element, in order."""
        return "".join(str(value) for value in self)

    def for_each(self, effect: Effect[T]) -> None:
        """Call effect on every element, for its side effects only."""
        for value in self:
            effect(value)

    def first(self) -> Result[T, EmptySequenceError]:
        """
        Pull at most one element.

        Example:
            generate().drop(3).first()  # Ok(3)
            from_([]).first()           # Error(EmptySequenceError())
        """
        for value in self:
            return Ok(value)
        return Error(EmptySequenceError())

    # ------------------------------------------------------------------
    # Unary transforms
    # ------------------------------------------------------------------

    def map[R](self, fn: Mapper[T, R]) -> Map[T, R]:
        from .transform.map import Map
        return Map(self, fn)

    def flat_map[R](self, fn: Mapper[T, Iterable[R]]) -> FlatMap[T, R]:
        from .transform.flat_map import FlatMap
        return FlatMap(self, fn)

    def filter(self, predicate: Predicate[T]) -> Filter[T]:
        from .transform.filter import Filter
        return Filter(self, predicate)

    def tap(self, effect: Effect[T]) -> Tap[T]:
        from .transform.effects import Tap
        return Tap(self, effect)

    def drop(self, n: int) -> Drop[T]:
        from .transform.slice import Drop
        return Drop(self, n)

    def take(self, n: int) -> Take[T]:
        from .transform.slice import Take
        return Take(self, n)

    def join(self, sep: T) -> Drop[T]:
        """Put sep between every pair of adjacent elements."""
        from .transform.join import join
        return join(self, sep)


__all__ = ("Cursor", "Seq")
