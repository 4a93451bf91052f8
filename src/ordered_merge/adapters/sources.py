from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO

from ordered_merge.domain.results import END, End
from ordered_merge.ports.sequence_source import SequenceSource


class FileSourceError(ValueError):
    # Unreadable or unparseable line in a FileSource; carries path and 1-based line number.
    def __init__(self, path: Path, line_no: int, reason: str) -> None:
        super().__init__(f"{path}:{line_no}: {reason}")
        self.path = path
        self.line_no = line_no


class IteratorSource(SequenceSource):
    # Wraps any iterable (list, range, generator) behind the pull contract.
    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iterable = iterable
        self._it: Iterator[Any] | None = iter(iterable)

    def try_pull(self) -> Any | End:
        # After the first END the underlying iterator is released and never touched again.
        if self._it is None:
            return END
        value = next(self._it, END)
        if value is END:
            self._it = None
        return value

    def __repr__(self) -> str:
        return f"IteratorSource({self._iterable!r})"


class CallableSource(SequenceSource):
    # Pulls by calling a zero-argument function until it returns the sentinel.
    # The sentinel is matched by identity, so None stays an ordinary value unless passed as sentinel.
    def __init__(self, fn: Callable[[], Any], sentinel: Any = END) -> None:
        self._fn: Callable[[], Any] | None = fn
        self._sentinel = sentinel

    def try_pull(self) -> Any | End:
        if self._fn is None:
            return END
        value = self._fn()
        if value is self._sentinel:
            self._fn = None
            return END
        return value


@dataclass
class FileSource(SequenceSource):
    # Streams one parsed value per non-blank line; the file is opened on first pull.
    path: Path
    parse: Callable[[str], Any] = int
    encoding: str = "utf-8"
    _handle: TextIO | None = field(default=None, init=False, repr=False)
    _line_no: int = field(default=0, init=False, repr=False)
    _done: bool = field(default=False, init=False, repr=False)

    def try_pull(self) -> Any | End:
        if self._done:
            return END
        if self._handle is None:
            self._handle = self.path.open("r", encoding=self.encoding)
        while True:
            try:
                line = self._handle.readline()
            except UnicodeDecodeError as exc:
                raise FileSourceError(self.path, self._line_no + 1, f"not valid {self.encoding} at or after this line") from exc
            if not line:
                self.close()
                return END
            self._line_no += 1
            text = line.strip()
            if not text:
                continue
            try:
                return self.parse(text)
            except (ValueError, ArithmeticError) as exc:
                raise FileSourceError(self.path, self._line_no, f"cannot parse {text!r}") from exc

    def close(self) -> None:
        # Close is idempotent and also marks the source exhausted.
        self._done = True
        if self._handle is not None:
            self._handle.close()
            self._handle = None


def as_source(obj: object) -> SequenceSource:
    # Construction-time coercion: sources pass through, iterables get wrapped, anything else is rejected.
    if isinstance(obj, SequenceSource):
        return obj
    if isinstance(obj, Iterable):
        return IteratorSource(obj)
    raise TypeError(f"Cannot merge {type(obj).__name__!s}: expected an iterable or an object with try_pull()")
