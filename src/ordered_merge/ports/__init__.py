from .log_sink import LogSink
from .output_sink import OutputSink
from .sequence_source import SequenceSource

# Public port exports keep wiring explicit at composition time.
__all__ = [
    "LogSink",
    "OutputSink",
    "SequenceSource",
]
