from __future__ import annotations

from typing import Protocol, runtime_checkable

from ordered_merge.observability.messages import LogMessage


# LogSink port receives structured merge events; the engine never requires one.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Deliver one structured log message."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Flush and release the sink; further emits are a wiring error."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
