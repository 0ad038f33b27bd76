"""
Sequence comparison helpers for test suites.

Both sides are walked in lockstep from fresh cursors. Exhaustion is
normalized to a boolean flag per position, so "ran out" compares
equal only to "ran out".
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from ._errors import SequenceMismatchError


class _Exhausted:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<exhausted>"


# Reported as the value of a side that ran out first.
EXHAUSTED: typing.Final = _Exhausted()


@dataclass(frozen=True, slots=True)
class ComparePolicy:
    """
    How far compare() walks before calling two sequences equal.

    None (the default) walks until a side is exhausted; set a limit only when
    comparing infinite sequences.
    """

    limit: int | None = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 1:
            raise ValueError("ComparePolicy.limit must be >= 1 or None")


DEFAULT_COMPARE_POLICY: typing.Final = ComparePolicy()


def _step(cursor: Iterator[typing.Any]) -> tuple[bool, typing.Any]:
    try:
        return False, next(cursor)
    except StopIteration:
        return True, EXHAUSTED


def compare(
    left: Iterable[typing.Any],
    right: Iterable[typing.Any],
    *,
    policy: ComparePolicy = DEFAULT_COMPARE_POLICY,
) -> Result[int, SequenceMismatchError]:
    """
    Ok(n) if both sides agree on n positions and then stop together
    (or policy.limit positions matched). Error(mismatch) names the first
    index where values or exhaustion differ.

    Example:
        compare(zip([1, 2], [3, 4]), [1, 3, 2, 4])  # Ok(4)
        compare([1, 2], [1])                        # Error(... at index 1)
    """
    left_cursor = iter(left)
    right_cursor = iter(right)
    index = 0
    while policy.limit is None or index < policy.limit:
        left_done, left_value = _step(left_cursor)
        right_done, right_value = _step(right_cursor)
        if left_done != right_done:
            return Error(SequenceMismatchError(index, left_value, right_value))
        if left_done:
            return Ok(index)
        if left_value != right_value:
            return Error(SequenceMismatchError(index, left_value, right_value))
        index += 1
    return Ok(index)


def assert_sequence_equal(
    left: Iterable[typing.Any],
    right: Iterable[typing.Any],
    *,
    policy: ComparePolicy = DEFAULT_COMPARE_POLICY,
) -> None:
    """Raise SequenceMismatchError at the first differing position."""
    match compare(left, right, policy=policy):
        case Ok(_):
            pass
        case Error(mismatch):
            raise mismatch


__all__ = (
    "EXHAUSTED",
    "ComparePolicy",
    "assert_sequence_equal",
    "compare",
)
