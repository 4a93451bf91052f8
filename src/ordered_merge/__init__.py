from ordered_merge.domain.errors import OutOfOrderError
from ordered_merge.domain.results import END, OrderingViolation, Pulled, TakeResult
from ordered_merge.kernel.engine import MergeEngine, merge
from ordered_merge.kernel.harness import take, take_result

__version__ = "0.1.0"

__all__ = [
    "END",
    "MergeEngine",
    "OrderingViolation",
    "OutOfOrderError",
    "Pulled",
    "TakeResult",
    "merge",
    "take",
    "take_result",
]
