"""Argument checks run when a combinator node is built, before any iteration."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable

from ._errors import ArityError


def check_arity(fn: Callable[..., typing.Any], n: int, *, name: str) -> None:
    """
    Fail fast unless fn can be called with exactly n positional arguments.

    Callables without an introspectable signature (some builtins, C extensions)
    are accepted as-is.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return
    try:
        signature.bind(*([None] * n))
    except TypeError:
        raise ArityError(name, n) from None


__all__ = ("check_arity",)
