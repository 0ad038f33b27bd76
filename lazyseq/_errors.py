from __future__ import annotations

import typing


class ArityError(TypeError):
    """Function passed to combine()/permute() can't take one argument per sequence."""

    name: str
    expected: int

    def __init__(self, name: str, expected: int) -> None:
        self.name = name
        self.expected = expected
        super().__init__(f"{name}(): function must accept {expected} positional argument(s)")


class EmptySequenceError(Exception):
    """Sequence produced no elements."""

    def __init__(self) -> None:
        super().__init__("Sequence is empty")


class SequenceMismatchError(AssertionError):
    """Two sequences disagree at some position."""

    index: int
    left: typing.Any
    right: typing.Any

    def __init__(self, index: int, left: typing.Any, right: typing.Any) -> None:
        self.index = index
        self.left = left
        self.right = right
        super().__init__(f"Sequences differ: {left!r} != {right!r} (at index {index})")


__all__ = ("ArityError", "EmptySequenceError", "SequenceMismatchError")
