from .output_sink import FileOutputSink, StreamOutputSink
from .producers import counting, fibonacci, triangular
from .sources import CallableSource, FileSource, FileSourceError, IteratorSource, as_source

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "CallableSource",
    "FileOutputSink",
    "FileSource",
    "FileSourceError",
    "IteratorSource",
    "StreamOutputSink",
    "as_source",
    "counting",
    "fibonacci",
    "triangular",
]
