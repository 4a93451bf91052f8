from __future__ import annotations

from enum import Enum
from typing import Any

from ordered_merge.domain.results import END, OrderingViolation, Pulled, PullResult
from ordered_merge.kernel.compare import Comparator
from ordered_merge.ports.sequence_source import SequenceSource


class CursorState(str, Enum):
    FRESH = "FRESH"
    ACTIVE = "ACTIVE"
    EXHAUSTED = "EXHAUSTED"
    BROKEN = "BROKEN"


class SourceCursor:
    """Per-source merge state and ordering validator.

    ``peek()`` pulls at most once between two ``advance()`` calls and caches the
    result. Every pulled value is checked against the last one seen from the same
    source; a smaller value breaks the cursor for good and is reported as an
    :class:`OrderingViolation` on this and every later ``peek()``.
    """

    __slots__ = ("handle", "index", "pulls", "_adapter", "_compare", "_last", "_has_last", "_peeked", "_state")

    def __init__(self, handle: Any, adapter: SequenceSource, compare: Comparator, *, index: int) -> None:
        # handle is the caller's object (reported in violations); adapter is what we pull from.
        self.handle = handle
        self.index = index
        self.pulls = 0
        self._adapter = adapter
        self._compare = compare
        self._last: Any = None
        self._has_last = False
        self._peeked: PullResult | None = None
        self._state = CursorState.FRESH

    @property
    def state(self) -> CursorState:
        return self._state

    @property
    def last(self) -> Any:
        return self._last

    def peek(self) -> PullResult:
        if self._peeked is not None:
            return self._peeked
        if self._state is CursorState.EXHAUSTED:
            return END

        value = self._adapter.try_pull()
        self.pulls += 1
        if value is END:
            self._state = CursorState.EXHAUSTED
            self._peeked = END
            return END

        if self._has_last and self._compare(value, self._last) < 0:
            self._state = CursorState.BROKEN
            self._peeked = OrderingViolation(
                source=self.handle,
                offending_value=value,
                prior_value=self._last,
                index=self.index,
            )
            return self._peeked

        self._last = value
        self._has_last = True
        self._state = CursorState.ACTIVE
        self._peeked = Pulled(value)
        return self._peeked

    def advance(self) -> Any:
        # Consumes the peeked value; only legal while ACTIVE.
        if self._state is not CursorState.ACTIVE or not isinstance(self._peeked, Pulled):
            raise RuntimeError(f"Cannot advance cursor #{self.index} in state {self._state.value}")
        value = self._peeked.value
        self._peeked = None
        self._state = CursorState.FRESH
        return value

    def __repr__(self) -> str:
        return f"SourceCursor(index={self.index}, state={self._state.value}, pulls={self.pulls})"
