from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ordered_merge.domain.results import End


# SequenceSource port is the only capability the merge engine requires of an input.
@runtime_checkable
class SequenceSource(Protocol):
    def try_pull(self) -> Any | End:
        """Consume and return the next value, or END once the producer has none left."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("SequenceSource is a port; use a concrete adapter.")
