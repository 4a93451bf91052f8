from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol

from ordered_merge.domain.errors import OutOfOrderError
from ordered_merge.domain.results import END, OrderingViolation, PullResult, TakeResult


class _Producer(Protocol):
    def next_result(self) -> PullResult:
        raise NotImplementedError("Producer protocol has no implementation")


def _check_bound(k: int) -> None:
    if isinstance(k, bool) or not isinstance(k, int):
        raise TypeError(f"k must be an int, got {type(k).__name__}")
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")


def take_result(engine: _Producer, k: int) -> TakeResult:
    # Asks for at most k values and never more; an exhausted merge ends the loop early.
    _check_bound(k)
    values: list[Any] = []
    while len(values) < k:
        result = engine.next_result()
        if result is END:
            break
        if isinstance(result, OrderingViolation):
            return TakeResult(values=values, violation=result)
        values.append(result.value)
    return TakeResult(values=values)


def take(engine: _Producer, k: int) -> list[Any]:
    # Raising variant of take_result; the prefix produced before a violation rides on the error.
    result = take_result(engine, k)
    if result.violation is not None:
        raise OutOfOrderError(result.violation, emitted=result.values)
    return result.values


def stream(engine: _Producer, k: int) -> Iterator[Any]:
    # Lazy variant of take: each value reaches the caller before the next one is requested.
    _check_bound(k)
    emitted: list[Any] = []
    while len(emitted) < k:
        result = engine.next_result()
        if result is END:
            return
        if isinstance(result, OrderingViolation):
            raise OutOfOrderError(result, emitted=emitted)
        emitted.append(result.value)
        yield result.value
