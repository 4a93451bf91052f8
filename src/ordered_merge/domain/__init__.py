from .errors import OutOfOrderError
from .results import END, End, OrderingViolation, Pulled, PullResult, TakeResult

# Public domain exports keep imports explicit across layers.
__all__ = [
    "END",
    "End",
    "OrderingViolation",
    "OutOfOrderError",
    "Pulled",
    "PullResult",
    "TakeResult",
]
