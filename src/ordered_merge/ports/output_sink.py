from __future__ import annotations

from typing import Protocol, runtime_checkable


# OutputSink port receives merged values in emission order.
@runtime_checkable
class OutputSink(Protocol):
    def write(self, value: object) -> None:
        """Record one merged value; the sink owns its formatting."""
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")

    def close(self, *, commit: bool = True) -> None:
        """Release the sink. commit=False means the run failed and a sink may discard partial output."""
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")
