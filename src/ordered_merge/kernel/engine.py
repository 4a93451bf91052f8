from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any

from ordered_merge.adapters.sources import as_source
from ordered_merge.domain.errors import OutOfOrderError
from ordered_merge.domain.results import END, OrderingViolation, Pulled, PullResult, TakeResult
from ordered_merge.kernel import harness
from ordered_merge.kernel.compare import Comparator, key_compare, natural_compare
from ordered_merge.kernel.cursor import CursorState, SourceCursor
from ordered_merge.observability.messages import LogMessage
from ordered_merge.ports.log_sink import LogSink


class _HeapEntry:
    # Heap order is (value under comparator, registration index): equal values go to the first-registered source.
    __slots__ = ("value", "cursor", "_compare")

    def __init__(self, value: Any, cursor: SourceCursor, compare: Comparator) -> None:
        self.value = value
        self.cursor = cursor
        self._compare = compare

    def __lt__(self, other: _HeapEntry) -> bool:
        c = self._compare(self.value, other.value)
        if c != 0:
            return c < 0
        return self.cursor.index < other.cursor.index


class MergeEngine:
    """Lazy k-way ascending merge over pull-based sources.

    Each call to :meth:`next_result` does the minimum work needed for one output
    value: it peeks every cursor that has nothing cached (all of them on the first
    call, only the previous winner afterwards), then pops the smallest cached value.
    Over ``k`` outputs that is at most ``k + n - 1`` pulls for ``n`` sources.

    The engine is a single-consumer iterator; do not drive one instance from
    several callers at once.
    """

    def __init__(
        self,
        sources: Iterable[Any],
        comparator: Comparator | None = None,
        *,
        log_sink: LogSink | None = None,
    ) -> None:
        self._compare: Comparator = comparator or natural_compare
        self._log_sink = log_sink
        self._cursors: list[SourceCursor] = [
            SourceCursor(handle, as_source(handle), self._compare, index=index)
            for index, handle in enumerate(sources)
        ]
        self._heap: list[_HeapEntry] = []
        # Cursors without a cached value, kept in registration order.
        self._pending: list[SourceCursor] = list(self._cursors)
        self._remaining = len(self._cursors)
        self._reported: set[int] = set()
        self._emitted = 0

    @property
    def remaining(self) -> int:
        # Number of registered cursors not yet exhausted.
        return self._remaining

    @property
    def emitted(self) -> int:
        return self._emitted

    @property
    def sources(self) -> list[Any]:
        return [cursor.handle for cursor in self._cursors]

    def pull_counts(self) -> list[int]:
        return [cursor.pulls for cursor in self._cursors]

    def next_result(self) -> PullResult:
        violation = self._fill()
        if violation is not None:
            return violation
        if not self._heap:
            return END

        entry = heapq.heappop(self._heap)
        value = entry.cursor.advance()
        # The winner is re-peeked on the next call, not now: that keeps the pull count minimal.
        self._pending.append(entry.cursor)
        self._emitted += 1
        return Pulled(value)

    def take(self, k: int) -> list[Any]:
        return harness.take(self, k)

    def take_result(self, k: int) -> TakeResult:
        return harness.take_result(self, k)

    def drop(self, source: Any) -> None:
        # Unregisters a source by identity so the others can keep merging (e.g. after a violation).
        for position, cursor in enumerate(self._cursors):
            if cursor.handle is source:
                break
        else:
            raise KeyError(f"Source is not registered with this engine: {source!r}")

        del self._cursors[position]
        if cursor in self._pending:
            self._pending.remove(cursor)
        else:
            self._heap = [entry for entry in self._heap if entry.cursor is not cursor]
            heapq.heapify(self._heap)
        if cursor.state is not CursorState.EXHAUSTED:
            self._remaining -= 1
        self._log("INFO", "source_dropped", index=cursor.index, state=cursor.state.value)

    def __iter__(self) -> MergeEngine:
        return self

    def __next__(self) -> Any:
        result = self.next_result()
        if isinstance(result, Pulled):
            return result.value
        if isinstance(result, OrderingViolation):
            raise OutOfOrderError(result)
        raise StopIteration

    def _fill(self) -> OrderingViolation | None:
        # A cursor leaves the pending list only after its peek is fully handled,
        # so an exception from a source or the comparator loses no cursors.
        pending = self._pending
        for position, cursor in enumerate(pending):
            try:
                result = cursor.peek()
                if isinstance(result, Pulled):
                    heapq.heappush(self._heap, _HeapEntry(result.value, cursor, self._compare))
            except BaseException:
                if any(entry.cursor is cursor for entry in self._heap):
                    self._heap = [entry for entry in self._heap if entry.cursor is not cursor]
                    heapq.heapify(self._heap)
                raise
            if isinstance(result, OrderingViolation):
                # The broken source and everything after it stay pending.
                self._report(result)
                return result
            self._pending = pending[position + 1 :]
            if result is END:
                self._remaining -= 1
                self._log("DEBUG", "source_exhausted", index=cursor.index, pulls=cursor.pulls)
        return None

    def _report(self, violation: OrderingViolation) -> None:
        if violation.index in self._reported:
            return
        self._reported.add(violation.index)
        self._log(
            "ERROR",
            "ordering_violation",
            index=violation.index,
            offending_value=violation.offending_value,
            prior_value=violation.prior_value,
            emitted=self._emitted,
        )

    def _log(self, level: str, event: str, **fields: object) -> None:
        if self._log_sink is not None:
            self._log_sink.emit(LogMessage(level=level, event=event, fields=dict(fields)))


def merge(
    sources: Iterable[Any] = (),
    comparator: Comparator | None = None,
    *,
    key: Any = None,
    log_sink: LogSink | None = None,
) -> MergeEngine:
    # Entry point: sources are iterables or SequenceSource objects, merged in ascending order.
    if comparator is not None and key is not None:
        raise ValueError("Pass either comparator or key, not both")
    if key is not None:
        comparator = key_compare(key)
    return MergeEngine(sources, comparator, log_sink=log_sink)
