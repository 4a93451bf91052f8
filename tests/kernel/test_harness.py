from __future__ import annotations

import pytest

from ordered_merge import OutOfOrderError, merge
from ordered_merge.adapters.producers import counting, fibonacci
from ordered_merge.kernel.harness import stream, take, take_result


def test_take_rejects_negative_bound() -> None:
    with pytest.raises(ValueError):
        take(merge([[1]]), -1)


@pytest.mark.parametrize("bound", [1.5, "3", True])
def test_take_rejects_non_integer_bound(bound) -> None:
    with pytest.raises(TypeError):
        take(merge([[1]]), bound)


def test_take_result_reports_violation_as_data() -> None:
    # The non-raising variant returns the prefix plus the violation.
    source = [1, 4, 2]
    result = take_result(merge([source]), 10)
    assert result.values == [1, 4]
    assert not result.ok
    assert result.violation is not None
    assert result.violation.source is source


def test_take_result_ok_when_sources_behave() -> None:
    result = take_result(merge([counting(0)]), 3)
    assert result.ok
    assert result.values == [0, 1, 2]


def test_stream_hands_out_values_before_failing() -> None:
    received: list[int] = []
    with pytest.raises(OutOfOrderError) as info:
        for value in stream(merge([[1, 2, 0]]), 10):
            received.append(value)
    assert received == [1, 2]
    assert info.value.emitted == [1, 2]


def test_stream_is_lazy_over_unbounded_source() -> None:
    # Nothing is pulled until the generator is advanced.
    engine = merge([fibonacci()])
    gen = stream(engine, 1000)
    assert engine.pull_counts() == [0]
    assert next(gen) == 0
    assert engine.pull_counts() == [1]


def test_stream_stops_at_bound() -> None:
    assert list(stream(merge([counting(10)]), 4)) == [10, 11, 12, 13]


def test_take_stops_when_engine_is_exhausted() -> None:
    engine = merge([[1, 2]])
    assert take(engine, 10) == [1, 2]
    assert take(engine, 10) == []
