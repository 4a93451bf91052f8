from __future__ import annotations

import itertools
from collections.abc import Iterator


# Ascending producers used by the CLI config and tests. Each call returns a fresh generator.


def counting(start: int = 0, stop: int | None = None, step: int = 1) -> Iterator[int]:
    # Finite when stop is given (exclusive, like range), unbounded otherwise.
    if step <= 0:
        raise ValueError("step must be positive for an ascending sequence")
    if stop is None:
        return itertools.count(start, step)
    return iter(range(start, stop, step))


def fibonacci() -> Iterator[int]:
    a, b = 0, 1
    while True:
        yield a
        a, b = b, a + b


def triangular() -> Iterator[int]:
    # Sums of the first n natural numbers: 1, 3, 6, 10, ...
    n = 1
    while True:
        yield n * (n + 1) // 2
        n += 1
