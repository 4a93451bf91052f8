from __future__ import annotations

import json
from pathlib import Path
from typing import TextIO

from ordered_merge.observability.messages import LogMessage


class JsonlLogSink:
    """Appends one flat JSON record per merge event to ``path``.

    The file (and its parent directory) is created on the first emit, so a run
    that logs nothing leaves no file behind. Values JSON cannot encode, such as
    arbitrary merged objects, are written as their ``repr``.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._file: TextIO | None = None
        self._closed = False

    def emit(self, message: LogMessage) -> None:
        if self._closed:
            raise RuntimeError(f"JsonlLogSink for {self.path} is closed")
        if self._file is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file = self.path.open("a", encoding="utf-8")
        self._file.write(json.dumps(message.to_record(), separators=(",", ":"), default=repr) + "\n")
        self._file.flush()

    def close(self) -> None:
        self._closed = True
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> JsonlLogSink:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class MemoryLogSink:
    # Keeps messages in memory; used by tests and by callers embedding the engine.
    def __init__(self) -> None:
        self.messages: list[LogMessage] = []

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)

    def close(self) -> None:
        pass

    def events(self) -> list[str]:
        return [m.event for m in self.messages]
