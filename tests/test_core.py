from __future__ import annotations

import pytest
from kungfu import Error, Ok

import lazyseq as S
from instrumented import CountingSource, Reviving


def test_building_a_pipeline_pulls_nothing():
    counted = CountingSource([1, 2, 3, 4])
    S.from_(counted).map(lambda x: x * 2).filter(bool).drop(1).take(2).join(0)
    S.zip(counted, S.generate())
    S.combine(lambda a, b: a + b, counted, counted)
    S.permute(lambda a, b: (a, b), counted, counted)
    assert counted.opened == 0
    assert counted.pulled == 0


def test_cursors_are_independent():
    seq = S.from_([1, 2, 3]).map(lambda x: x * 10)
    first = iter(seq)
    second = iter(seq)
    assert next(first) == 10
    assert next(first) == 20
    assert next(second) == 10
    assert list(first) == [30]
    assert list(second) == [20, 30]


def test_exhaustion_is_terminal():
    source = Reviving()
    cursor = iter(S.from_(source))
    assert next(cursor) == 1
    with pytest.raises(StopIteration):
        next(cursor)
    with pytest.raises(StopIteration):
        next(cursor)
    # the latched cursor never asked upstream again
    assert source.calls == 2


def test_to_list_and_to_string():
    seq = S.from_([1, "a", 2.5])
    assert seq.to_list() == [1, "a", 2.5]
    assert seq.to_string() == "1a2.5"
    assert S.from_([]).to_string() == ""


def test_for_each_visits_in_order():
    seen: list[int] = []
    S.range(0, 4).for_each(seen.append)
    assert seen == [0, 1, 2, 3]


def test_first_pulls_a_single_element():
    counted = CountingSource([7, 8, 9])
    match S.from_(counted).first():
        case Ok(value):
            assert value == 7
        case Error(err):
            pytest.fail(f"unexpected {err!r}")
    assert counted.pulled == 1


def test_first_of_empty_is_error():
    match S.from_([]).first():
        case Ok(value):
            pytest.fail(f"unexpected {value!r}")
        case Error(err):
            assert isinstance(err, S.EmptySequenceError)


def test_repr_does_not_drain_infinite_sequences():
    text = repr(S.generate().map(str))
    assert text.startswith("Map(")
    assert "Generate()" in text


def test_nodes_are_immutable():
    node = S.from_([1]).take(1)
    with pytest.raises(AttributeError):
        node.n = 5  # type: ignore[misc]


def test_same_arguments_give_same_output():
    def build() -> S.Seq[str]:
        return S.permute(lambda a, b: f"{a}{b}", S.range(0, 3), "xy").join("|")

    assert build().to_list() == build().to_list()
    seq = build()
    assert seq.to_list() == seq.to_list()
