from __future__ import annotations

from typing import Any

from ordered_merge.domain.results import OrderingViolation


class OutOfOrderError(Exception):
    # Raised at the Python-facing boundary when a source breaks its ascending contract.
    # `emitted` holds values produced by the failing call before the violation surfaced.
    def __init__(self, violation: OrderingViolation, emitted: list[Any] | None = None) -> None:
        super().__init__(f"Out-of-order value: {violation.describe()}")
        self.violation = violation
        self.emitted: list[Any] = list(emitted) if emitted is not None else []

    @property
    def source(self) -> Any:
        return self.violation.source

    @property
    def offending_value(self) -> Any:
        return self.violation.offending_value

    @property
    def prior_value(self) -> Any:
        return self.violation.prior_value
