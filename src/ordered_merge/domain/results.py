from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class End(Enum):
    # Single-member enum so END survives identity checks and pickling.
    END = "END"

    def __repr__(self) -> str:
        return "END"


END = End.END


@dataclass(frozen=True, slots=True)
class Pulled(Generic[T]):
    # One value successfully taken from a source (or from the merge).
    value: T


@dataclass(frozen=True, slots=True)
class OrderingViolation:
    # A source yielded a value smaller than its previous one.
    # `source` is the caller's own object; compare it with `is`, never by value.
    source: Any
    offending_value: Any
    prior_value: Any
    index: int = -1

    def describe(self) -> str:
        return (
            f"source #{self.index} ({self.source!r}) yielded {self.offending_value!r} "
            f"after {self.prior_value!r}"
        )


# Tagged result used between cursor, engine and harness.
PullResult = Union[Pulled[Any], End, OrderingViolation]


@dataclass(frozen=True, slots=True)
class TakeResult:
    # Prefix produced by one bounded take plus the violation that cut it short, if any.
    values: list[Any] = field(default_factory=list)
    violation: OrderingViolation | None = None

    @property
    def ok(self) -> bool:
        return self.violation is None
