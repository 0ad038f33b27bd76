"""
Core type definitions for lazyseq.

Aliases shared by the combinator modules.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

# ============================================================================
# Type aliases
# ============================================================================

# Mapper = element transform used by map/flat_map
type Mapper[T, R] = Callable[[T], R]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Effect = observation-only callback, result is ignored
type Effect[T] = Callable[[T], None]

# Source = anything that can open a fresh iterator (lists, Seq, ranges, ...)
# NOTE: single-pass iterators are accepted too, but re-opening them yields nothing.
type Source[T] = Iterable[T]

# Number = arithmetic progression element
type Number = int | float

__all__ = (
    "Effect",
    "Mapper",
    "Number",
    "Predicate",
    "Source",
)
