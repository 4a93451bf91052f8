from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from ordered_merge.ports.output_sink import OutputSink


@dataclass
class FileOutputSink(OutputSink):
    """Writes one merged value per line to ``path``.

    With ``atomic_replace`` the values go to a hidden ``.partial`` file beside the
    target, which only replaces the target on ``close(commit=True)``. A failed run
    (``commit=False``) deletes the partial file and leaves any previous target as it
    was. Without ``atomic_replace`` the prefix written so far always stays on disk.
    """

    path: Path
    atomic_replace: bool = False
    format: Callable[[object], str] = str
    written: int = field(default=0, init=False)
    _handle: TextIO | None = field(default=None, init=False, repr=False)

    @property
    def partial_path(self) -> Path:
        return self.path.with_name(f".{self.path.name}.partial")

    def write(self, value: object) -> None:
        if self._handle is None:
            target = self.partial_path if self.atomic_replace else self.path
            self._handle = target.open("w", encoding="utf-8")
        self._handle.write(self.format(value) + "\n")
        self.written += 1

    def close(self, *, commit: bool = True) -> None:
        # Idempotent; nothing was opened if nothing was written.
        if self._handle is None:
            return
        self._handle.close()
        self._handle = None
        if not self.atomic_replace:
            return
        if commit:
            self.partial_path.replace(self.path)
        else:
            self.partial_path.unlink(missing_ok=True)

    def __enter__(self) -> FileOutputSink:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close(commit=exc_type is None)


@dataclass
class StreamOutputSink(OutputSink):
    # Writes to an already-open text stream (stdout by default); the stream is never closed.
    stream: TextIO = field(default_factory=lambda: sys.stdout)
    format: Callable[[object], str] = str
    written: int = field(default=0, init=False)

    def write(self, value: object) -> None:
        self.stream.write(self.format(value) + "\n")
        self.written += 1

    def close(self, *, commit: bool = True) -> None:
        self.stream.flush()
