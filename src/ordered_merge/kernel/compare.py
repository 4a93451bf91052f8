from __future__ import annotations

from collections.abc import Callable
from typing import Any

# Three-way comparator: negative if a < b, zero if equal, positive if a > b.
Comparator = Callable[[Any, Any], int]


def natural_compare(a: Any, b: Any) -> int:
    # Uses only `<` so types that define just __lt__ still work.
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def key_compare(key: Callable[[Any], Any]) -> Comparator:
    # Builds a comparator ordering values by key(value).
    def _compare(a: Any, b: Any) -> int:
        return natural_compare(key(a), key(b))

    return _compare
