from __future__ import annotations

import pytest
from kungfu import Error, Ok

import lazyseq as S
from lazyseq.testing import EXHAUSTED, ComparePolicy, assert_sequence_equal, compare


def test_compare_equal_sequences():
    match compare(S.zip([1, 2], [3, 4]), [1, 3, 2, 4]):
        case Ok(length):
            assert length == 4
        case Error(mismatch):
            pytest.fail(str(mismatch))


def test_compare_reports_first_differing_value():
    match compare([1, 2, 3], [1, 9, 3]):
        case Ok(length):
            pytest.fail(f"unexpected match of length {length}")
        case Error(mismatch):
            assert mismatch.index == 1
            assert (mismatch.left, mismatch.right) == (2, 9)


def test_compare_treats_early_exhaustion_as_mismatch():
    match compare([1, 2], [1]):
        case Ok(length):
            pytest.fail(f"unexpected match of length {length}")
        case Error(mismatch):
            assert mismatch.index == 1
            assert mismatch.left == 2
            assert mismatch.right is EXHAUSTED


def test_compare_infinite_sequences_up_to_limit():
    result = compare(S.generate(), S.generate(), policy=ComparePolicy(limit=50))
    assert result.unwrap() == 50


def test_compare_policy_validation():
    with pytest.raises(ValueError):
        ComparePolicy(limit=0)
    assert ComparePolicy(limit=None).limit is None


def test_assert_sequence_equal_message_names_index():
    with pytest.raises(S.SequenceMismatchError, match=r"\(at index 2\)"):
        assert_sequence_equal(S.range(0, 5), [0, 1, 5, 3, 4])


def test_mismatch_is_an_assertion_error():
    with pytest.raises(AssertionError):
        assert_sequence_equal([], [1])


def test_compare_walks_finite_sequences_to_the_end_by_default():
    left = [*range(10_001), 1]
    right = [*range(10_001), 2]
    match compare(left, right):
        case Ok(length):
            pytest.fail(f"unexpected match of length {length}")
        case Error(mismatch):
            assert mismatch.index == 10_001
    with pytest.raises(S.SequenceMismatchError, match=r"\(at index 10000\)"):
        assert_sequence_equal(S.range(0, 20_000), S.range(0, 10_000))
