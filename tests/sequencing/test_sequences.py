from __future__ import annotations

from itertools import islice

import pytest

from determination.domain.error_codes import ErrorCode
from determination.domain.exceptions import EmptyInputError, InvalidArgumentError
from determination.domain.sequencing.sequences import ComputedSequence, LiteralSequence, ProgressionSequence


def test_literal_sequence_rejects_none():
    with pytest.raises(InvalidArgumentError) as exc_info:
        LiteralSequence(None)
    assert exc_info.value.code == ErrorCode.INVALID_ARGUMENT
    assert exc_info.value.details["argument"] == "values"


def test_literal_sequence_rejects_empty_list():
    with pytest.raises(EmptyInputError) as exc_info:
        LiteralSequence([])
    assert exc_info.value.code == ErrorCode.EMPTY_INPUT


def test_literal_sequence_walks_values_in_order_and_restarts():
    seq = LiteralSequence([3, 1, 2])

    assert seq.first() == 3
    assert len(seq) == 3
    assert list(seq) == [3, 1, 2]
    assert list(seq) == [3, 1, 2]


def test_literal_sequence_copies_input():
    values = [1, 2]
    seq = LiteralSequence(values)
    values.append(3)

    assert list(seq) == [1, 2]


def test_literal_sequence_iterator_ends_after_last_value():
    it = iter(LiteralSequence(["only"]))

    assert next(it) == "only"
    with pytest.raises(StopIteration):
        next(it)


def test_progression_first_does_not_call_combine():
    calls: list[tuple[int, int]] = []

    def combine(previous: int, step: int) -> int:
        calls.append((previous, step))
        return previous + step

    seq = ProgressionSequence(10, 5, combine)

    assert seq.first() == 10
    assert calls == []
    assert seq.next_after(10) == 15
    assert calls == [(10, 5)]


def test_progression_is_lazy_and_restartable():
    calls = []

    def combine(previous: int, step: int) -> int:
        calls.append(previous)
        return previous * step

    seq = ProgressionSequence(1, 2, combine)

    assert list(islice(seq, 5)) == [1, 2, 4, 8, 16]
    assert len(calls) == 4

    it = iter(seq)
    assert next(it) == 1
    assert len(calls) == 4
    assert next(it) == 2
    assert len(calls) == 5


@pytest.mark.parametrize("combine", [None, "not callable"])
def test_progression_rejects_missing_combine(combine):
    with pytest.raises(InvalidArgumentError):
        ProgressionSequence(0, 1, combine)


def test_computed_sequence_calls_function_per_element():
    counter = iter(range(100))
    seq = ComputedSequence(lambda: next(counter))

    assert list(islice(seq, 3)) == [0, 1, 2]


def test_computed_sequence_rejects_none():
    with pytest.raises(InvalidArgumentError):
        ComputedSequence(None)
