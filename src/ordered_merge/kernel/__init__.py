from .compare import Comparator, key_compare, natural_compare
from .cursor import CursorState, SourceCursor
from .engine import MergeEngine, merge
from .harness import stream, take, take_result

# Kernel exports are minimal and merge-focused.
__all__ = [
    "Comparator",
    "CursorState",
    "MergeEngine",
    "SourceCursor",
    "key_compare",
    "merge",
    "natural_compare",
    "stream",
    "take",
    "take_result",
]
