from __future__ import annotations

import itertools

import pytest

import lazyseq as S
from lazyseq.testing import assert_sequence_equal
from instrumented import CountingSource, OnceSource, boom


def concat(*parts: object) -> str:
    return "".join(str(part) for part in parts)


def test_permute():
    assert_sequence_equal(S.permute(concat, [1, 2], [3], [4, 5]), ["134", "135", "234", "235"])


def test_permute_single_wheel_is_a_map():
    assert_sequence_equal(S.permute(lambda a: f"{a}", [1, 2, 3]), ["1", "2", "3"])


def test_permute_single_combination():
    assert_sequence_equal(S.permute(concat, [1], [2], [3]), ["123"])


@pytest.mark.parametrize(
    "wheels",
    [
        ([1], [], [3]),
        ([], [1], [3]),
        ([1], [2], []),
    ],
)
def test_permute_with_empty_wheel(wheels):
    assert S.permute(concat, *wheels).to_list() == []


def test_permute_matches_lexicographic_product():
    wheels = (S.range(0, 3), "xy", S.generate().take(4))
    expected = [tuple(combo) for combo in itertools.product(*wheels)]
    got = S.permute(lambda *combo: combo, *wheels).to_list()
    assert got == expected
    assert len(got) == 3 * 2 * 4


def test_permute_reopens_rolled_over_wheels_only():
    outer = CountingSource("abc")
    inner = CountingSource([1, 2])
    assert S.permute(concat, outer, inner).to_list() == ["a1", "a2", "b1", "b2", "c1", "c2"]
    # the slowest wheel is read once, front to back
    assert outer.opened == 1
    assert outer.pulled == 3
    # the fastest wheel: first fill + one reset per rollover
    assert inner.opened == 4


def test_permute_with_infinite_fast_wheel():
    seq = S.permute(lambda row, col: (row, col), ["r0", "r1"], S.generate())
    assert seq.take(3).to_list() == [("r0", 0), ("r0", 1), ("r0", 2)]


def test_permute_with_infinite_slow_wheel():
    seq = S.permute(lambda row, col: (row, col), S.generate(), "ab")
    assert seq.take(5).to_list() == [(0, "a"), (0, "b"), (1, "a"), (1, "b"), (2, "a")]


def test_permute_wheel_empty_on_reset_finishes():
    wheel = OnceSource([3, 4])
    assert S.permute(concat, [1, 2], wheel).to_list() == ["13", "14"]
    assert wheel.opened == 2


def test_permute_cursor_stays_exhausted():
    cursor = iter(S.permute(concat, [1], [2]))
    assert next(cursor) == "12"
    for _ in range(3):
        with pytest.raises(StopIteration):
            next(cursor)


def test_permute_is_restartable():
    seq = S.permute(concat, S.range(0, 2), S.from_("ab"))
    assert seq.to_list() == seq.to_list() == ["0a", "0b", "1a", "1b"]


def test_permute_requires_a_wheel():
    with pytest.raises(ValueError, match="at least one sequence"):
        S.permute(concat)


def test_permute_checks_arity_up_front():
    with pytest.raises(S.ArityError, match="permute"):
        S.permute(lambda a, b: a, [1], [2], [3])


def test_permute_error_propagates():
    with pytest.raises(RuntimeError, match="boom"):
        S.permute(boom, [1, 2], [3]).to_list()
